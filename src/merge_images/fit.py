"""Adapt one decoded image to the exact size of its destination cell."""
from __future__ import annotations

from PIL import Image

from merge_images.errors import FitError
from merge_images.logging_utils import logger


def center_square_box(width: int, height: int) -> tuple[int, int, int, int]:
    """Return the (x0, y0, x1, y1) box of the centered maximal square."""
    side = min(width, height)
    if width > height:
        x = (width - height) // 2
        return x, 0, x + side, side
    y = (height - width) // 2
    return 0, y, side, y + side


def fit_image(
    img: Image.Image,
    target_w: int,
    target_h: int,
    *,
    square: bool,
) -> Image.Image:
    """
    Crop and resize an image to exactly (target_w, target_h).

    With `square` the image is first cropped to its centered square, so
    grid cells never distort the source. Without it the whole frame is
    resized; waterfall cells already follow the source aspect ratio.

    Raises:
        FitError: If the source or target size is empty or Pillow fails.

    """
    w, h = img.size
    if w <= 0 or h <= 0:
        msg = f"Cannot fit empty {w}x{h} image"
        raise FitError(msg)
    if target_w <= 0 or target_h <= 0:
        msg = f"Cannot fit image into empty {target_w}x{target_h} cell"
        raise FitError(msg)

    logger.debug("Fitting %dx%d image into (%d, %d), square=%s",
                 w, h, target_w, target_h, square)
    try:
        if square and w != h:
            img = img.crop(center_square_box(w, h))
        return img.resize((target_w, target_h), Image.Resampling.BILINEAR)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to resize image: %s", exc)
        msg = f"Cannot resize {w}x{h} image to {target_w}x{target_h}: {exc}"
        raise FitError(msg) from exc
