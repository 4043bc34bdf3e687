"""
Layout engines mapping input images to canvas cells.

The grid engine depends only on the image count; the waterfall engine
also probes each image's aspect ratio.
"""

from __future__ import annotations

from . import core, grid, waterfall
from .core import Layout, Rect
from .grid import grid_layout
from .waterfall import waterfall_layout

__all__ = [
    "Layout",
    "Rect",
    "core",
    "grid",
    "grid_layout",
    "waterfall",
    "waterfall_layout",
]
