"""Shared default values for user-facing configuration settings."""
from merge_images.type_defs import LayoutMode, LogLevel

# Layout
DEFAULT_LAYOUT: LayoutMode = "grid"

# Encoding
DEFAULT_JPEG_QUALITY = 95
JPEG_QUALITY_MIN = 1
JPEG_QUALITY_MAX = 100

# Logging
DEFAULT_LOG_LEVEL: LogLevel = "INFO"

# CLI
DEFAULT_OUTPUT_PATH = "merged.jpg"
