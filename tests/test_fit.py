"""Tests for the crop and resize fit policy."""

from __future__ import annotations

import pytest
from PIL import Image
from pytest_mock import MockerFixture

from merge_images.errors import FitError
from merge_images.fit import center_square_box, fit_image


def _striped(w: int, h: int, *, vertical: bool) -> Image.Image:
    """Three equal red, green, blue bands across the long axis."""
    img = Image.new("RGB", (w, h))
    colors = [(255, 0, 0), (0, 255, 0), (0, 0, 255)]
    for i, color in enumerate(colors):
        if vertical:
            img.paste(color, (i * w // 3, 0, (i + 1) * w // 3, h))
        else:
            img.paste(color, (0, i * h // 3, w, (i + 1) * h // 3))
    return img


@pytest.mark.parametrize(
    ("size", "box"),
    [
        ((300, 100), (100, 0, 200, 100)),
        ((100, 300), (0, 100, 100, 200)),
        ((50, 50), (0, 0, 50, 50)),
        ((101, 100), (0, 0, 100, 100)),
    ],
)
def test_center_square_box(
    size: tuple[int, int],
    box: tuple[int, int, int, int],
) -> None:
    assert center_square_box(*size) == box


def test_square_fit_keeps_horizontal_center() -> None:
    out = fit_image(_striped(300, 100, vertical=True), 10, 10, square=True)
    assert out.size == (10, 10)
    assert out.getpixel((0, 5)) == (0, 255, 0)
    assert out.getpixel((9, 5)) == (0, 255, 0)


def test_square_fit_keeps_vertical_center() -> None:
    out = fit_image(_striped(100, 300, vertical=False), 20, 20, square=True)
    assert out.size == (20, 20)
    assert out.getpixel((10, 0)) == (0, 255, 0)
    assert out.getpixel((10, 19)) == (0, 255, 0)


def test_square_fit_upscales(sample_image: Image.Image) -> None:
    out = fit_image(sample_image, 600, 600, square=True)
    assert out.size == (600, 600)
    assert out.getpixel((300, 300)) == (255, 0, 0)


def test_preserve_fit_does_not_crop() -> None:
    out = fit_image(_striped(300, 100, vertical=True), 30, 10, square=False)
    assert out.size == (30, 10)
    assert out.getpixel((1, 5)) == (255, 0, 0)
    assert out.getpixel((28, 5)) == (0, 0, 255)


def test_input_image_is_not_mutated(sample_image: Image.Image) -> None:
    fit_image(sample_image, 10, 10, square=True)
    assert sample_image.size == (100, 100)


@pytest.mark.parametrize(("w", "h"), [(0, 10), (10, 0), (0, 0)])
def test_empty_target_raises(
    sample_image: Image.Image,
    w: int,
    h: int,
) -> None:
    with pytest.raises(FitError, match="empty"):
        fit_image(sample_image, w, h, square=False)


def test_empty_source_raises() -> None:
    with pytest.raises(FitError, match="empty 0x0 image"):
        fit_image(Image.new("RGB", (0, 0)), 10, 10, square=True)


def test_resize_failure_is_wrapped(
    sample_image: Image.Image,
    mocker: MockerFixture,
) -> None:
    mocker.patch.object(Image.Image, "resize",
                        side_effect=ValueError("boom"))
    with pytest.raises(FitError, match="boom"):
        fit_image(sample_image, 10, 10, square=True)
