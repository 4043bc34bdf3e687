"""
Merge a sequence of encoded images into one JPEG preview.

The compositor asks a layout engine for cells, then decodes, fits and
pastes each image in input order. A single image that fails to decode
or fit leaves its cell blank instead of failing the whole merge.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from merge_images import codec
from merge_images.config import EncodeConfig
from merge_images.decoder import safe_decode
from merge_images.errors import DecodeError, FitError, NoImagesError
from merge_images.fit import fit_image
from merge_images.layout import grid, waterfall
from merge_images.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from PIL import Image

    from merge_images.layout.core import Rect
    from merge_images.type_defs import ImageBytes, LayoutEngine, LayoutMode


def _render_cell(
    idx: int,
    data: ImageBytes,
    rect: Rect,
    *,
    square: bool,
) -> Image.Image | None:
    """Return the image fitted to `rect`, or None if it must be skipped."""
    try:
        img = safe_decode(data)
    except DecodeError as exc:
        logger.info("Error decoding image %d (0 based index): %s", idx, exc)
        return None
    logger.info("Image %d size: %dx%d", idx, *img.size)

    try:
        return fit_image(img, rect.w, rect.h, square=square)
    except FitError as exc:
        logger.info("Failed to process image %d: %s. continue", idx, exc)
        return None


def merge(
    images: Sequence[ImageBytes],
    engine: LayoutEngine,
    *,
    square: bool,
    encode: EncodeConfig | None = None,
) -> bytes:
    """
    Compose images onto one canvas and return it as JPEG bytes.

    A single input is returned unchanged without being decoded.

    Args:
        images: Encoded source images, in placement order.
        engine: Callable returning the Layout for the images.
        square: Center crop each image to a square before resizing.
        encode: JPEG encoding options; defaults apply when omitted.

    Raises:
        NoImagesError: If `images` is empty.
        LayoutError: If the engine cannot compute cells.
        EncodeError: If the finished canvas cannot be encoded.

    """
    logger.debug("Merging %d images", len(images))
    if not images:
        raise NoImagesError
    if len(images) == 1:
        return bytes(images[0])

    layout = engine(images)
    logger.debug("Canvas size: %dx%d", *layout.canvas_size)
    canvas = codec.new_canvas(layout.canvas_size)

    skipped: list[int] = []
    for idx, (data, rect) in enumerate(
        zip(images, layout.rects, strict=True),
    ):
        fitted = _render_cell(idx, data, rect, square=square)
        if fitted is None:
            skipped.append(idx)
            continue
        canvas.paste(fitted, rect.origin())

    if skipped:
        logger.warning("Skipped %d of %d images: %s",
                       len(skipped), len(images), skipped)

    options = encode or EncodeConfig.model_validate({})
    return codec.encode_jpeg(canvas, quality=options.quality)


def merge_grid(
    images: Sequence[ImageBytes],
    *,
    encode: EncodeConfig | None = None,
) -> bytes:
    """Merge images into a square cell grid, any count above zero."""
    return merge(images, grid.layout_images, square=True, encode=encode)


def merge_waterfall(
    images: Sequence[ImageBytes],
    *,
    encode: EncodeConfig | None = None,
) -> bytes:
    """Merge images into balanced columns that keep each aspect ratio."""
    return merge(images, waterfall.waterfall_layout, square=False,
                 encode=encode)


def merge_with_layout(
    images: Sequence[ImageBytes],
    layout: LayoutMode = "grid",
    *,
    encode: EncodeConfig | None = None,
) -> bytes:
    """Dispatch to merge_grid or merge_waterfall by layout name."""
    if layout == "waterfall":
        return merge_waterfall(images, encode=encode)
    if layout == "grid":
        return merge_grid(images, encode=encode)
    msg = f"Unknown layout: {layout!r}"
    raise ValueError(msg)
