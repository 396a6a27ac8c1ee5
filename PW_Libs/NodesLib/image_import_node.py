"""
Image Import stage for Pixel Weave.

This module opens an image file, sniffs its container format and decodes its
pixels into a :class:`PixelGrid`. Every failure is raised as one of the
``UnableTo*`` errors so callers can report the exact kind.

Functions:
    load_image: Decode an image file into a PixelGrid
    get_supported_image_formats: Get list of commonly supported extensions
    is_supported_format: Check a path's extension against that list
"""

import logging
from pathlib import Path
from typing import List, Union

from PW_Libs.constants import SUPPORTED_STANDARD_IMAGES
from PW_Libs.errors import UnableToDecodeImage, UnableToReadFile, UnableToReadFormat
from PW_Libs.ImageEditingLib.image_models import PixelGrid
from PW_Libs.pillow_compat import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)


def get_supported_image_formats() -> List[str]:
    """
    Get list of supported standard image formats.

    Returns:
        List of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(SUPPORTED_STANDARD_IMAGES)


def is_supported_format(file_path: Union[str, Path]) -> bool:
    """
    Check if a file path has a commonly supported extension.

    The loader itself sniffs the format from the file contents; this is only
    a hint for callers that filter files up front.
    """
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


def load_image(path: Union[str, Path]) -> PixelGrid:
    """
    Load and decode an image from disk.

    Args:
        path: Path to the image file

    Returns:
        PixelGrid holding the decoded image and its format tag

    Raises:
        UnableToReadFile: If the path cannot be opened
        UnableToReadFormat: If the container format cannot be determined
        UnableToDecodeImage: If the pixel data cannot be decoded
    """
    file_path = Path(path)

    try:
        fp = open(file_path, "rb")
    except OSError as e:
        raise UnableToReadFile(file_path, e.strerror or str(e)) from e

    with fp:
        try:
            img = Image.open(fp)
        except UnidentifiedImageError as e:
            raise UnableToReadFormat(file_path) from e
        except Image.DecompressionBombError as e:
            raise UnableToDecodeImage(file_path, str(e)) from e
        except OSError as e:
            raise UnableToReadFile(file_path, str(e)) from e

        image_format = img.format
        if image_format is None:
            raise UnableToReadFormat(file_path)

        try:
            img.load()
        except Exception as e:
            raise UnableToDecodeImage(file_path, str(e)) from e

    logger.debug(f"Loaded {file_path} as {image_format} {img.mode} {img.size}")
    return PixelGrid(image=img, format=image_format, path=file_path)
