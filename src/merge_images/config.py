"""
Configuration schema and loader for merge-images.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from pathlib import Path

import tomlkit
from pydantic import BaseModel, Field

from merge_images.config_defaults import (
    DEFAULT_JPEG_QUALITY,
    DEFAULT_LAYOUT,
    DEFAULT_LOG_LEVEL,
    JPEG_QUALITY_MAX,
    JPEG_QUALITY_MIN,
)
from merge_images.type_defs import LayoutMode, LogLevel


class EncodeConfig(BaseModel):
    """Control JPEG encoding of the merged canvas."""

    quality: int = Field(
        DEFAULT_JPEG_QUALITY,
        ge=JPEG_QUALITY_MIN,
        le=JPEG_QUALITY_MAX,
    )


class LoggingConfig(BaseModel):
    """Select logger verbosity."""

    level: LogLevel = Field(DEFAULT_LOG_LEVEL)


class MergeConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of the TOML file: a top-level layout name
    plus encode and logging tables.
    """

    layout: LayoutMode = Field(DEFAULT_LAYOUT)
    encode: EncodeConfig = Field(
        default_factory=lambda: EncodeConfig.model_validate({}),
    )
    logging: LoggingConfig = Field(
        default_factory=lambda: LoggingConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> MergeConfig:
        """Load a merge configuration from a TOML file."""
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return MergeConfig.model_validate(doc.unwrap())
