"""Tests for Rect, Layout and the count tier lookup."""

from __future__ import annotations

import pytest

from merge_images.layout.core import Layout, Rect, padded_extent, select_tier

_TIERS = ((4, 2, 100), (9, 3, 50), (None, 4, 25))


def test_rect_accessors() -> None:
    r = Rect(10, 20, 30, 40)
    assert (r.x1, r.y1) == (40, 60)
    assert r.size() == (30, 40)
    assert r.origin() == (10, 20)
    assert r.box() == (10, 20, 40, 60)


@pytest.mark.parametrize(
    ("other", "expected"),
    [
        (Rect(0, 0, 10, 10), True),
        (Rect(5, 5, 2, 2), True),
        (Rect(10, 0, 10, 10), False),   # touching edge
        (Rect(0, 10, 10, 10), False),
        (Rect(20, 20, 5, 5), False),
    ],
)
def test_rect_intersects(other: Rect, expected: bool) -> None:  # noqa: FBT001
    base = Rect(0, 0, 10, 10)
    assert base.intersects(other) is expected
    assert other.intersects(base) is expected


def test_layout_len() -> None:
    layout = Layout((20, 10), (Rect(0, 0, 10, 10), Rect(10, 0, 10, 10)))
    assert len(layout) == 2  # noqa: PLR2004


@pytest.mark.parametrize(
    ("n", "expected"),
    [(1, (2, 100)), (4, (2, 100)), (5, (3, 50)), (9, (3, 50)),
     (10, (4, 25)), (1000, (4, 25))],
)
def test_select_tier_boundaries(n: int, expected: tuple[int, int]) -> None:
    assert select_tier(n, _TIERS) == expected


def test_select_tier_without_unbounded_tail() -> None:
    with pytest.raises(ValueError, match="No layout tier covers 7"):
        select_tier(7, ((4, 2, 100),))


def test_padded_extent() -> None:
    assert padded_extent(1, 500, 10) == 500  # noqa: PLR2004
    assert padded_extent(4, 500, 10) == 2030  # noqa: PLR2004
