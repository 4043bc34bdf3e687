"""
Memory bounded decoding of untrusted image bytes.

The header is probed first so oversized sources are decoded at a
reduced scale instead of allocating their full resolution raster.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from merge_images import codec
from merge_images.constants import (
    DECODE_REDUCE_4,
    DECODE_REDUCE_4_ABOVE,
    DECODE_REDUCE_8,
    DECODE_REDUCE_8_ABOVE,
)
from merge_images.errors import DecodeError
from merge_images.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image

    from merge_images.type_defs import ImageBytes


def reduce_factor(max_side: int) -> int:
    """Return the decode scale divisor for a source's larger side."""
    if max_side > DECODE_REDUCE_8_ABOVE:
        return DECODE_REDUCE_8
    if max_side > DECODE_REDUCE_4_ABOVE:
        return DECODE_REDUCE_4
    return 1


def safe_decode(data: ImageBytes) -> Image.Image:
    """
    Decode image bytes into an RGB image with a bounded size.

    Animated containers yield their first frame. Any image whose larger
    side still exceeds the 1/8 threshold after decoding is shrunk again.

    Raises:
        DecodeError: If the bytes hold no decodable image.

    """
    try:
        probe: codec.ImageProbe | None = codec.probe_dimensions(data)
    except DecodeError as exc:
        logger.warning("Cannot get image size in advance (%s), "
                       "decoding in full", exc)
        probe = None

    if probe is None:
        img = codec.decode_still(data)
    elif probe.animated:
        logger.debug("Reading first frame of %s image", probe.format)
        img = codec.decode_first_frame(data, probe.format)
    else:
        factor = reduce_factor(probe.max_side)
        if factor > 1:
            logger.info("Size too big: (%dx%d), shrink to 1/%d",
                        probe.width, probe.height, factor)
        img = codec.decode_still(data, reduce=factor)

    if max(img.size) > DECODE_REDUCE_8_ABOVE:
        logger.error(
            "Inconsistent decode: %dx%d still exceeds %d, shrink to 1/%d",
            img.width, img.height, DECODE_REDUCE_8_ABOVE, DECODE_REDUCE_8,
        )
        img = codec.scale_down(img, DECODE_REDUCE_8)
    return img
