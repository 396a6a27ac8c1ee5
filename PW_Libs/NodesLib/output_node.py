"""
Output stage for Pixel Weave.

This module encodes a :class:`CombinedImage` as 8-bit RGBA pixels and writes
it to disk in a chosen container format.

Classes:
    OutputConfig: Configuration for the output write

Functions:
    save_combined_image: Encode and write a CombinedImage
"""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from PW_Libs.constants import (
    DEFAULT_JPEG_QUALITY,
    JPEG_FORMAT,
    JPEG_FORMAT_ALIASES,
    MAX_JPEG_QUALITY,
    MIN_JPEG_QUALITY,
    RGB_MODE,
    RGBA_MODE,
)
from PW_Libs.errors import UnableToSaveImage
from PW_Libs.ImageEditingLib.image_models import CombinedImage
from PW_Libs.pillow_compat import Image

logger = logging.getLogger(__name__)


@dataclass
class OutputConfig:
    """Configuration for writing the combined image.

    Attributes:
        save_format: Format to save as; overrides the format passed to the writer
        quality: JPEG quality 1-100 (default: 95, only for JPEG)
        create_directories: Create missing parent directories (default: True)
        overwrite: Replace an existing file (default: True)
    """
    save_format: Optional[str] = None
    quality: int = DEFAULT_JPEG_QUALITY
    create_directories: bool = True
    overwrite: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OutputConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    def get_save_kwargs(self, target_format: str) -> Dict[str, Any]:
        """Get PIL Image.save() kwargs for ``target_format``."""
        # PIL uses "JPEG" not "JPG"
        save_format = str(self.save_format or target_format).upper()
        if save_format in JPEG_FORMAT_ALIASES:
            save_format = JPEG_FORMAT

        kwargs: Dict[str, Any] = {"format": save_format}

        if save_format == JPEG_FORMAT:
            kwargs["quality"] = max(MIN_JPEG_QUALITY, min(MAX_JPEG_QUALITY, self.quality))

        return kwargs


def save_combined_image(
    image: CombinedImage,
    target_format: str,
    config: Optional[OutputConfig] = None,
) -> Path:
    """
    Encode a combined image as RGBA and write it to ``image.name``.

    Args:
        image: CombinedImage with its data assigned
        target_format: Container format to encode (e.g. 'PNG')
        config: Optional output configuration

    Returns:
        Path where the image was saved

    Raises:
        UnableToSaveImage: If encoding or writing fails for any reason
    """
    config = config or OutputConfig()
    output_file = Path(image.name)

    if output_file.exists() and not config.overwrite:
        raise UnableToSaveImage(
            output_file,
            FileExistsError(f"Output file already exists: {output_file}"),
        )

    try:
        kwargs = config.get_save_kwargs(target_format)
        pil_image = Image.frombytes(RGBA_MODE, (image.width, image.height), image.data)
        # JPEG has no alpha channel
        if kwargs["format"] == JPEG_FORMAT:
            pil_image = pil_image.convert(RGB_MODE)

        if config.create_directories:
            output_file.parent.mkdir(parents=True, exist_ok=True)

        pil_image.save(output_file, **kwargs)
    except Exception as e:
        raise UnableToSaveImage(output_file, e) from e

    logger.debug(f"Saved {image.width}x{image.height} {kwargs['format']} image to {output_file}")
    return output_file
