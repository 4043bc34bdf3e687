"""
Fixed templates and uniform grid used by merge_grid.

Counts 2 to 9 use hand tuned tables so the previews look balanced.
Larger counts fall through to a uniform square grid whose column count
and cell size step down as the count grows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from merge_images.constants import PAD
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

_RawRect = tuple[int, int, int, int]

# count -> ((canvas w, canvas h), rects as (x, y, w, h))
_TEMPLATES: dict[int, tuple[tuple[int, int], tuple[_RawRect, ...]]] = {
    1: (
        (1800, 1800),
        ((0, 0, 1800, 1800),),
    ),
    2: (
        (1800 + PAD, 900),
        (
            (0, 0, 900, 900),
            (900 + PAD, 0, 900, 900),
        ),
    ),
    # 1 + 2
    3: (
        (1800 + PAD, 2700 + PAD),
        (
            (0, 0, 1800, 1800),
            (0, 1800 + PAD, 900, 900),
            (900 + PAD, 1800 + PAD, 900, 900),
        ),
    ),
    # column major 2x2
    4: (
        (1800 + PAD, 1800 + PAD),
        (
            (0, 0, 900, 900),
            (0, 900 + PAD, 900, 900),
            (900 + PAD, 0, 900, 900),
            (900 + PAD, 900 + PAD, 900, 900),
        ),
    ),
    # 2 + 3
    5: (
        (1800 + 2 * PAD, 1500 + PAD),
        (
            (0, 0, 900, 900),
            (900 + PAD, 0, 900, 900),
            (0, 900 + PAD, 600, 600),
            (600 + PAD, 900 + PAD, 600, 600),
            (1200 + 2 * PAD, 900 + PAD, 600, 600),
        ),
    ),
    # 3x2
    6: (
        (1800 + 2 * PAD, 1200 + PAD),
        (
            (0, 0, 600, 600),
            (600 + PAD, 0, 600, 600),
            (1200 + 2 * PAD, 0, 600, 600),
            (0, 600 + PAD, 600, 600),
            (600 + PAD, 600 + PAD, 600, 600),
            (1200 + 2 * PAD, 600 + PAD, 600, 600),
        ),
    ),
    # 2 + 2 + 3
    7: (
        (1800 + 2 * PAD, 2400 + 2 * PAD),
        (
            (0, 0, 900, 900),
            (900 + PAD, 0, 900, 900),
            (0, 900 + PAD, 900, 900),
            (900 + PAD, 900 + PAD, 900, 900),
            (0, 1800 + 2 * PAD, 600, 600),
            (600 + PAD, 1800 + 2 * PAD, 600, 600),
            (1200 + 2 * PAD, 1800 + 2 * PAD, 600, 600),
        ),
    ),
    # 2 + 3 + 3
    8: (
        (1800 + 2 * PAD, 2100 + 2 * PAD),
        (
            (0, 0, 900, 900),
            (900 + PAD, 0, 900, 900),
            (0, 900 + PAD, 600, 600),
            (600 + PAD, 900 + PAD, 600, 600),
            (1200 + 2 * PAD, 900 + PAD, 600, 600),
            (0, 1500 + 2 * PAD, 600, 600),
            (600 + PAD, 1500 + 2 * PAD, 600, 600),
            (1200 + 2 * PAD, 1500 + 2 * PAD, 600, 600),
        ),
    ),
    # 3x3
    9: (
        (1800 + 2 * PAD, 1800 + 2 * PAD),
        (
            (0, 0, 600, 600),
            (600 + PAD, 0, 600, 600),
            (1200 + 2 * PAD, 0, 600, 600),
            (0, 600 + PAD, 600, 600),
            (600 + PAD, 600 + PAD, 600, 600),
            (1200 + 2 * PAD, 600 + PAD, 600, 600),
            (0, 1200 + 2 * PAD, 600, 600),
            (600 + PAD, 1200 + 2 * PAD, 600, 600),
            (1200 + 2 * PAD, 1200 + 2 * PAD, 600, 600),
        ),
    ),
}

GRID_TIERS: tuple[Tier, ...] = (
    (9, 3, 800),
    (16, 4, 500),
    (25, 5, 400),
    (36, 6, 350),
    (49, 7, 300),
    (64, 8, 300),
    (81, 9, 300),
    (None, 10, 240),
)


def _uniform_grid(n: int) -> Layout:
    """Square cells in row major order for counts above the templates."""
    columns, cell = select_tier(n, GRID_TIERS)
    rows = (n + columns - 1) // columns
    width = padded_extent(columns, cell, PAD)
    height = padded_extent(rows, cell, PAD)

    rects = tuple(
        Rect((i % columns) * (cell + PAD), (i // columns) * (cell + PAD),
             cell, cell)
        for i in range(n)
    )
    logger.debug("grid canvas %dx%d, %d columns of %dpx",
                 width, height, columns, cell)
    return Layout((width, height), rects)


def grid_layout(n: int) -> Layout:
    """
    Return the canvas size and cells for `n` images.

    Raises:
        ValueError: If n is smaller than one.

    """
    if n < 1:
        msg = f"Grid layout needs at least one image, got {n}"
        raise ValueError(msg)
    if n == 1:
        logger.error("Grid layout requested for a single image")

    template = _TEMPLATES.get(n)
    if template is None:
        return _uniform_grid(n)

    canvas_size, raw = template
    layout = Layout(canvas_size, tuple(Rect(*r) for r in raw))
    logger.debug("grid canvas %dx%d, template for %d images",
                 *canvas_size, n)
    return layout


def layout_images(images: Sequence[ImageBytes]) -> Layout:
    """Grid layout keyed on the number of input buffers."""
    return grid_layout(len(images))
