"""
Column balanced packing used by merge_waterfall.

Every image keeps its own aspect ratio at a fixed column width and is
dropped into whichever column is currently shortest, lowest index first
on ties. This is the greedy list scheduling heuristic: not optimal, but
O(n log columns) and visually even.
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

from merge_images import codec
from merge_images.constants import PAD
from merge_images.errors import DecodeError, LayoutError
from merge_images.layout.core import (
    Layout,
    Rect,
    Tier,
    padded_extent,
    select_tier,
)
from merge_images.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from merge_images.type_defs import ImageBytes

WATERFALL_TIERS: tuple[Tier, ...] = (
    (9, 2, 800),
    (16, 3, 500),
    (25, 4, 400),
    (36, 5, 350),
    (49, 6, 300),
    (None, 7, 300),
)


def _probe_size(idx: int, data: ImageBytes) -> tuple[int, int]:
    try:
        probe = codec.probe_dimensions(data)
    except DecodeError as exc:
        msg = f"Failed to get size of image {idx} (0 based index): {exc}"
        raise LayoutError(msg) from exc
    if probe.width <= 0:
        msg = f"Image {idx} reports zero width"
        raise LayoutError(msg)
    return probe.width, probe.height


def waterfall_layout(images: Sequence[ImageBytes]) -> Layout:
    """
    Return the canvas size and cells for a waterfall collage.

    Each cell is one column wide and as tall as the image's aspect
    ratio requires. The canvas is exactly as tall as the lowest cell.

    Raises:
        LayoutError: If any image's dimensions cannot be probed.

    """
    logger.debug("Generating waterfall cells for %d images", len(images))
    columns, cell = select_tier(len(images), WATERFALL_TIERS)

    # (bottom y, column index)
    heap = [(0, col) for col in range(columns)]
    heapq.heapify(heap)

    rects: list[Rect] = []
    image_height = 0
    for idx, data in enumerate(images):
        width, height = _probe_size(idx, data)
        resized_height = cell * height // width
        y, col = heapq.heappop(heap)
        rects.append(Rect(col * (cell + PAD), y, cell, resized_height))
        image_height = max(image_height, y + resized_height)
        heapq.heappush(heap, (y + resized_height + PAD, col))

    canvas_size = (padded_extent(columns, cell, PAD), image_height)
    logger.debug("waterfall canvas %dx%d, %d columns of %dpx",
                 *canvas_size, columns, cell)
    return Layout(canvas_size, tuple(rects))
