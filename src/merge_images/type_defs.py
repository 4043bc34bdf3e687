"""
Defines shared type aliases for merge-images.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:  # pragma: no cover
    from merge_images.layout.core import Layout

LayoutMode = Literal["grid", "waterfall"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
ImageBytes = bytes | bytearray | memoryview
LayoutEngine = Callable[[Sequence[ImageBytes]], "Layout"]
