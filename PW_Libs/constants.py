"""
Constants and configuration values for Pixel Weave.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Pixel layout
RGBA_MODE = "RGBA"
RGB_MODE = "RGB"
# Pillow modes holding 16-bit samples (e.g. 16-bit grayscale PNG)
SIXTEEN_BIT_MODES = {"I", "I;16", "I;16L", "I;16B", "I;16N"}
RGBA_CHANNELS = 4
# Bytes copied from one source before switching to the other (one pixel)
PIXEL_CHUNK_SIZE = RGBA_CHANNELS

# Output defaults
DEFAULT_OUTPUT_FORMAT = "PNG"
DEFAULT_JPEG_QUALITY = 95
MIN_JPEG_QUALITY = 1
MAX_JPEG_QUALITY = 100
JPEG_FORMAT = "JPEG"
JPEG_FORMAT_ALIASES = {"JPG", "JPEG"}

# Format guard policies
FORMAT_POLICY_DISTINCT = "distinct"  # proceed only when input formats differ
FORMAT_POLICY_SAME = "same"  # proceed only when input formats match
FORMAT_POLICIES = (FORMAT_POLICY_DISTINCT, FORMAT_POLICY_SAME)
DEFAULT_FORMAT_POLICY = FORMAT_POLICY_DISTINCT

# Supported file formats
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".tif", ".webp"}

# CLI exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
