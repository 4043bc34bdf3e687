"""Public package exports for merge-images."""

from __future__ import annotations

from .compositor import merge, merge_grid, merge_waterfall, merge_with_layout
from .config import EncodeConfig, MergeConfig
from .errors import (
    DecodeError,
    EncodeError,
    FitError,
    LayoutError,
    MergeError,
    NoImagesError,
)

__all__ = [
    "DecodeError",
    "EncodeConfig",
    "EncodeError",
    "FitError",
    "LayoutError",
    "MergeConfig",
    "MergeError",
    "NoImagesError",
    "merge",
    "merge_grid",
    "merge_waterfall",
    "merge_with_layout",
]
