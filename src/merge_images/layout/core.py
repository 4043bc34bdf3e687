"""Geometry primitives shared by the grid and waterfall layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

# (upper bound on image count or None for unbounded, columns, cell size)
Tier = tuple[int | None, int, int]


@dataclass(frozen=True)
class Rect:
    """Axis aligned cell in canvas pixel coordinates."""

    x: int
    y: int
    w: int
    h: int

    @property
    def x1(self) -> int:
        """Right edge, exclusive."""
        return self.x + self.w

    @property
    def y1(self) -> int:
        """Bottom edge, exclusive."""
        return self.y + self.h

    def size(self) -> tuple[int, int]:
        """Return (w, h)."""
        return self.w, self.h

    def origin(self) -> tuple[int, int]:
        """Return the top left corner."""
        return self.x, self.y

    def box(self) -> tuple[int, int, int, int]:
        """Return a PIL style (x0, y0, x1, y1) box."""
        return self.x, self.y, self.x1, self.y1

    def intersects(self, other: Rect) -> bool:
        """Return True if the two rectangles share any pixel."""
        return (self.x < other.x1 and other.x < self.x1
                and self.y < other.y1 and other.y < self.y1)


@dataclass(frozen=True)
class Layout:
    """Canvas size plus one cell per input image, in input order."""

    canvas_size: tuple[int, int]
    rects: tuple[Rect, ...]

    def __len__(self) -> int:
        return len(self.rects)


def select_tier(n: int, tiers: Sequence[Tier]) -> tuple[int, int]:
    """
    Return (columns, cell size) for an image count.

    Tiers are ordered by ascending upper bound; the last one must be
    unbounded.
    """
    for upper, columns, cell in tiers:
        if upper is None or n <= upper:
            return columns, cell
    msg = f"No layout tier covers {n} images"
    raise ValueError(msg)


def padded_extent(count: int, cell: int, pad: int) -> int:
    """Length of `count` cells laid out with `pad` between neighbours."""
    return count * cell + pad * (count - 1)
