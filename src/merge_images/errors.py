"""
Error kinds raised while merging images.

Only NoImagesError, LayoutError and EncodeError escape a merge call.
DecodeError and FitError are recovered per image by the compositor.
"""


class MergeError(Exception):
    """Base class for all merge failures."""


class NoImagesError(MergeError):
    """No input images were supplied."""

    def __init__(self) -> None:
        super().__init__("no images")


class LayoutError(MergeError):
    """The layout could not be computed for the supplied images."""


class DecodeError(MergeError):
    """One input could not be decoded as a still or animated image."""


class FitError(MergeError):
    """A decoded image could not be cropped or resized to its cell."""


class EncodeError(MergeError):
    """The finished canvas could not be encoded."""


__all__ = [
    "DecodeError",
    "EncodeError",
    "FitError",
    "LayoutError",
    "MergeError",
    "NoImagesError",
]
