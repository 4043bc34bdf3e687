"""
Pillow and imageio bindings for probing, decoding and encoding images.

Everything here is a thin wrapper: pixel work stays inside the codec
libraries, and their exceptions are translated into merge error kinds.
"""
from __future__ import annotations

import io
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING

import imageio.v3 as iio
import numpy as np
from PIL import Image

from merge_images.constants import (
    ANIMATED_FORMATS,
    COLOR_MODE_RGB,
    COLOR_MODE_RGBA,
    COLOR_WHITE,
    JPEG_FORMAT,
)
from merge_images.errors import DecodeError, EncodeError
from merge_images.logging_utils import logger
from merge_images.type_defs import ImageBytes

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterator

_RGB = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class ImageProbe:
    """Header level facts about an encoded image."""

    width: int
    height: int
    format: str
    animated: bool

    @property
    def max_side(self) -> int:
        """Return the larger of width and height."""
        return max(self.width, self.height)


@contextmanager
def _header_only_open() -> Iterator[int | None]:
    """
    Lift Pillow's pixel count guard while a header is being read.

    ``Image.open`` rejects sources by their full resolution, before
    ``draft`` can shrink them. The caller gets the original limit back
    and applies it to the size it will actually allocate.
    """
    limit = Image.MAX_IMAGE_PIXELS
    Image.MAX_IMAGE_PIXELS = None
    try:
        yield limit
    finally:
        Image.MAX_IMAGE_PIXELS = limit


def _check_pixel_budget(size: tuple[int, int], limit: int | None) -> None:
    """Raise DecodeError when a raster would exceed Pillow's hard limit."""
    if limit is None:
        return
    width, height = size
    if width * height > 2 * limit:
        msg = (f"Decoded size {width}x{height} exceeds limit of "
               f"{2 * limit} pixels")
        raise DecodeError(msg)


def probe_dimensions(data: ImageBytes) -> ImageProbe:
    """
    Read the image size from its header without decoding pixel data.

    Pillow opens images lazily, so only the header is parsed here. The
    pixel count guard is not applied: a huge header is exactly what the
    reduced decode path needs to see.

    Raises:
        DecodeError: If the header cannot be identified.

    """
    try:
        with _header_only_open(), Image.open(io.BytesIO(data)) as im:
            width, height = im.size
            fmt = im.format or ""
            animated = (fmt in ANIMATED_FORMATS
                        or bool(getattr(im, "is_animated", False)))
    except (OSError, ValueError) as exc:
        msg = f"Cannot read image header: {exc}"
        raise DecodeError(msg) from exc
    return ImageProbe(width, height, fmt, animated)


def to_rgb(img: Image.Image, *, bg_color: _RGB = COLOR_WHITE) -> Image.Image:
    """Convert PIL image to RGB, alpha compositing if needed."""
    if img.mode == COLOR_MODE_RGB:
        return img
    if img.mode in (COLOR_MODE_RGBA, "LA") or (
        img.mode == "P" and "transparency" in img.info
    ):
        bg = Image.new(COLOR_MODE_RGBA, img.size, (*bg_color, 255))
        comp = Image.alpha_composite(bg, img.convert(COLOR_MODE_RGBA))
        return comp.convert(COLOR_MODE_RGB)
    return img.convert(COLOR_MODE_RGB)


def decode_still(data: ImageBytes, *, reduce: int = 1) -> Image.Image:
    """
    Decode a still image to RGB, optionally at 1/`reduce` scale.

    JPEG sources are scaled inside the decoder through ``draft``, so the
    full resolution raster is never allocated. Codecs without native
    scaling decode at full size and are reduced before returning.
    Pillow's pixel limit is checked against the size after ``draft``.

    Raises:
        DecodeError: If the bytes are not a decodable image, or the
            raster to allocate exceeds the pixel limit.

    """
    try:
        with (_header_only_open() as limit,
              Image.open(io.BytesIO(data)) as im):
            full_size = im.size
            if reduce > 1:
                im.draft(None, (max(1, im.width // reduce),
                                max(1, im.height // reduce)))
            _check_pixel_budget(im.size, limit)
            im.load()
            decoded = to_rgb(im)
            if reduce > 1 and im.size == full_size:
                logger.debug("No native scaling for %s, reducing by %d",
                             im.format, reduce)
                decoded = decoded.reduce(reduce)
            return decoded
    except (OSError, ValueError) as exc:
        msg = f"Cannot decode image: {exc}"
        raise DecodeError(msg) from exc


def decode_first_frame(data: ImageBytes, fmt: str) -> Image.Image:
    """
    Decode the first frame of an animated container.

    Frames are read with their alpha channel so transparent pixels end
    up white like any other image.

    Raises:
        DecodeError: If the container cannot be read or holds no frame.

    """
    extension = f".{fmt.lower()}" if fmt else None
    frame: np.ndarray | None = None
    try:
        with iio.imopen(bytes(data), "r", plugin="pillow",
                        extension=extension) as reader:
            for frame in reader.iter(mode=COLOR_MODE_RGBA):
                break
    except (OSError, ValueError, RuntimeError) as exc:
        msg = f"Cannot read frames from {fmt or 'unknown'} image: {exc}"
        raise DecodeError(msg) from exc

    if frame is None:
        msg = f"No frame available in {fmt or 'unknown'} image"
        raise DecodeError(msg)
    return to_rgb(Image.fromarray(np.ascontiguousarray(frame)))


def scale_down(img: Image.Image, factor: int) -> Image.Image:
    """Shrink both sides by `factor` with linear resampling."""
    w, h = img.size
    return img.resize(
        (max(1, w // factor), max(1, h // factor)),
        Image.Resampling.BILINEAR,
    )


def new_canvas(size: tuple[int, int],
               bg_color: _RGB = COLOR_WHITE) -> Image.Image:
    """Allocate an RGB canvas filled with the background color."""
    return Image.new(COLOR_MODE_RGB, size, bg_color)


def encode_jpeg(img: Image.Image, *, quality: int) -> bytes:
    """
    Encode an image as JPEG bytes.

    Raises:
        EncodeError: If Pillow refuses to write the image.

    """
    buffer = io.BytesIO()
    try:
        img.save(buffer, format=JPEG_FORMAT, quality=quality)
    except (OSError, ValueError) as exc:
        msg = f"Cannot encode {img.size[0]}x{img.size[1]} canvas: {exc}"
        raise EncodeError(msg) from exc
    return buffer.getvalue()
