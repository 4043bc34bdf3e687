"""
Test configuration and shared fixtures for merge_images.

This module defines reusable pytest fixtures that build encoded images
in memory with Pillow, so no test depends on files or the network.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
import io
import struct
from collections.abc import Callable, Generator

import pytest
from PIL import Image

from merge_images.constants import COLOR_MODE_RGB
from merge_images.logging_utils import logger

ImageFactory = Callable[..., bytes]


def encode_image(
    img: Image.Image,
    fmt: str = "PNG",
    **params: object,
) -> bytes:
    """Serialize a PIL image to bytes in the given format."""
    buffer = io.BytesIO()
    img.save(buffer, format=fmt, **params)
    return buffer.getvalue()


def with_jpeg_frame_size(data: bytes, size: tuple[int, int]) -> bytes:
    """
    Rewrite the SOF0 frame size of a baseline JPEG.

    The scan data is left alone, so the header claims a huge image while
    the bytes stay tiny. Only probing and layout can use the result.
    """
    sof = data.index(b"\xff\xc0")
    width, height = size
    # marker (2), length (2), precision (1), then height and width
    return data[:sof + 5] + struct.pack(">HH", height, width) + data[sof + 9:]


@pytest.fixture
def make_image_bytes() -> ImageFactory:
    """Factory for solid color encoded images of any size and format."""

    def _make(
        size: tuple[int, int] = (64, 48),
        color: str | tuple[int, ...] = "red",
        fmt: str = "PNG",
        mode: str = COLOR_MODE_RGB,
    ) -> bytes:
        return encode_image(Image.new(mode, size, color), fmt)

    return _make


@pytest.fixture
def make_gif_bytes() -> Callable[..., bytes]:
    """Factory for animated GIFs whose frames are solid colors."""

    def _make(
        size: tuple[int, int] = (40, 30),
        colors: tuple[str, ...] = ("red", "blue"),
    ) -> bytes:
        frames = [Image.new(COLOR_MODE_RGB, size, c) for c in colors]
        return encode_image(
            frames[0], "GIF",
            save_all=True, append_images=frames[1:], duration=100, loop=0,
        )

    return _make


@pytest.fixture
def transparent_gif_bytes() -> bytes:
    """Two frame GIF whose first frame is fully transparent."""
    palette = [0, 0, 0, 255, 0, 0] + [0, 0, 0] * 254
    frames = []
    for index in (0, 1):
        frame = Image.new("P", (20, 20), index)
        frame.putpalette(palette)
        frames.append(frame)
    return encode_image(
        frames[0], "GIF",
        save_all=True, append_images=frames[1:], transparency=0,
        duration=100, loop=0, disposal=2,
    )


@pytest.fixture
def huge_header_jpeg() -> bytes:
    """Small JPEG whose header claims 20000x20000, past Pillow's limit."""
    data = encode_image(Image.new(COLOR_MODE_RGB, (16, 16), "gray"), "JPEG")
    return with_jpeg_frame_size(data, (20000, 20000))


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a sample 100x100 red RGB PIL image."""
    return Image.new(COLOR_MODE_RGB, (100, 100), color="red")


@pytest.fixture
def corrupt_bytes() -> bytes:
    """Bytes that no codec recognises."""
    return b"definitely not an image"


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the merge logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)


@pytest.fixture(autouse=True)
def restore_logger_level() -> Generator[None, None, None]:
    """Undo verbosity changes made by the CLI between tests."""
    level = logger.level
    yield
    logger.setLevel(level)
