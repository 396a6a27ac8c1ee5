"""
Image data models for Pixel Weave.

This module defines the core data structures passed between pipeline stages.

Classes:
    PixelGrid: A decoded image together with its container format tag
    CombinedImage: Output image with a reserved byte capacity, filled once

Type Aliases:
    Dimensions: A (width, height) tuple in pixels
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

import numpy as np

from PW_Libs.constants import RGBA_CHANNELS, RGBA_MODE, SIXTEEN_BIT_MODES
from PW_Libs.errors import BufferLengthMismatch, BufferTooSmall
from PW_Libs.pillow_compat import Image

Dimensions = Tuple[int, int]


@dataclass
class PixelGrid:
    """A decoded image and the format it was decoded from.

    Attributes:
        image: Pillow image holding the pixel data
        format: Container format tag sniffed by the decoder (e.g. 'PNG')
        path: Source file, when the grid came from disk
    """
    image: 'Image.Image'
    format: Optional[str] = None
    path: Optional[Path] = None

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def dimensions(self) -> Dimensions:
        return (self.image.width, self.image.height)

    @property
    def area(self) -> int:
        return self.image.width * self.image.height

    def to_rgba_image(self) -> 'Image.Image':
        """
        Return the image as 8-bit RGBA.

        16-bit grayscale is scaled down to 8 bits rather than clipped.
        """
        image = self.image
        if image.mode == RGBA_MODE:
            return image
        if image.mode in SIXTEEN_BIT_MODES:
            values = np.clip(np.asarray(image, dtype=np.int64), 0, 0xFFFF) >> 8
            image = Image.fromarray(values.astype(np.uint8))
        return image.convert(RGBA_MODE)

    def to_rgba_bytes(self) -> bytes:
        """Return the pixels as a flat R,G,B,A byte buffer."""
        return self.to_rgba_image().tobytes()

    def with_image(self, image: 'Image.Image') -> "PixelGrid":
        """Return a new grid holding ``image`` with the same format and path."""
        return PixelGrid(image=image, format=self.format, path=self.path)


@dataclass
class CombinedImage:
    """Output image whose byte capacity is fixed at construction.

    ``data`` starts empty. Assignment through :meth:`set_data` only succeeds
    when the buffer fits into ``width * height * 4`` bytes.

    Attributes:
        width: Output width in pixels
        height: Output height in pixels
        name: Output path the image is written to
        data: RGBA bytes, empty until assigned
    """
    width: int
    height: int
    name: str
    data: bytes = field(default=b"", init=False)
    capacity: int = field(default=0, init=False)

    def __post_init__(self):
        """Validate dimensions and reserve capacity."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Dimensions must be >= 0, got {self.width}x{self.height}")
        self.capacity = self.width * self.height * RGBA_CHANNELS

    def set_data(self, new_data: bytes, strict: bool = False) -> None:
        """
        Assign the combined pixel buffer.

        Args:
            new_data: RGBA bytes produced by the interleaver
            strict: Also reject buffers shorter than the capacity

        Raises:
            BufferTooSmall: If the buffer is longer than the reserved capacity
            BufferLengthMismatch: If strict and the length differs from capacity
        """
        length = len(new_data)
        if length > self.capacity:
            raise BufferTooSmall(length, self.capacity)
        if strict and length != self.capacity:
            raise BufferLengthMismatch(length, self.capacity)
        self.data = bytes(new_data)
