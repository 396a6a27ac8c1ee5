"""
ImageEditingLib - Core image functionality

This module provides the image models, size standardization and pixel
interleaving used by the Pixel Weave pipeline.
"""

from PW_Libs.ImageEditingLib.image_models import (
    CombinedImage,
    Dimensions,
    PixelGrid,
)
from PW_Libs.ImageEditingLib.image_editing_ops import (
    get_smallest_dimension,
    resize_exact,
    standardise_size,
    combine_buffers,
    combine_images,
)

__all__ = [
    "CombinedImage",
    "Dimensions",
    "PixelGrid",
    "get_smallest_dimension",
    "resize_exact",
    "standardise_size",
    "combine_buffers",
    "combine_images",
]
