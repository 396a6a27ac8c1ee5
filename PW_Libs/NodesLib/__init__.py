"""
Pixel Weave Nodes Library.

This module contains the pipeline stages that touch the file system.

Modules:
    image_import_node: Loading and decoding input images
    output_node: Encoding and saving the combined image
"""

from PW_Libs.NodesLib.image_import_node import (
    load_image,
    get_supported_image_formats,
    is_supported_format,
)
from PW_Libs.NodesLib.output_node import (
    OutputConfig,
    save_combined_image,
)

__all__ = [
    "load_image",
    "get_supported_image_formats",
    "is_supported_format",
    "OutputConfig",
    "save_combined_image",
]
