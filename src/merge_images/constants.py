"""
Constants used internally by merge-images.

These are implementation-level values that should not be overridden
via config files or CLI arguments. Both layout engines share PAD, so
changing it changes every rendered geometry.
"""

# Gap between adjacent cells, in pixels
PAD = 10

# Canvas background
COLOR_MODE_RGB = "RGB"
COLOR_MODE_RGBA = "RGBA"
COLOR_WHITE = (255, 255, 255)

# Output encoding
JPEG_FORMAT = "JPEG"

# Reduced decode thresholds on the larger source side
DECODE_REDUCE_8_ABOVE = 8000
DECODE_REDUCE_4_ABOVE = 3000
DECODE_REDUCE_8 = 8
DECODE_REDUCE_4 = 4

# Containers decoded through the frame reader
ANIMATED_FORMATS = frozenset({"GIF"})
