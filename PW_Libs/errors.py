"""
Error taxonomy for Pixel Weave.

Every pipeline stage raises one of these; the CLI is the only place that
turns them into an exit code.

Classes:
    ImageErrors: Base class for all pipeline failures
    DifferentImageFormats: Format guard rejected the input pair
    BufferTooSmall: Combined buffer exceeds the reserved capacity
    BufferLengthMismatch: Combined buffer length differs from capacity (strict mode)
    UnableToSaveImage: Encoding or writing the output failed
    UnableToReadFile: Input path could not be opened
    UnableToReadFormat: Input container format could not be determined
    UnableToDecodeImage: Input pixel data could not be decoded
"""

from pathlib import Path
from typing import Optional, Union


class ImageErrors(Exception):
    """Base class for every error the interleave pipeline reports."""

    @property
    def kind(self) -> str:
        """Name of the error kind, as shown to the user."""
        return type(self).__name__


class DifferentImageFormats(ImageErrors):
    def __init__(self, format_a: Optional[str], format_b: Optional[str], policy: str):
        self.format_a = format_a
        self.format_b = format_b
        self.policy = policy
        super().__init__(
            f"Input formats {format_a!r} and {format_b!r} rejected by '{policy}' format policy"
        )


class BufferTooSmall(ImageErrors):
    def __init__(self, length: int, capacity: int):
        self.length = length
        self.capacity = capacity
        super().__init__(f"Buffer of {length} bytes exceeds reserved capacity of {capacity} bytes")


class BufferLengthMismatch(ImageErrors):
    def __init__(self, length: int, capacity: int):
        self.length = length
        self.capacity = capacity
        super().__init__(f"Buffer of {length} bytes does not match required length of {capacity} bytes")


class UnableToSaveImage(ImageErrors):
    """Wraps the underlying Pillow or OS error that stopped the write."""

    def __init__(self, path: Union[str, Path], cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to save image to {path}: {cause}")


class _PathError(ImageErrors):
    message = "Failed to read"

    def __init__(self, path: Union[str, Path], detail: str = ""):
        self.path = Path(path)
        text = f"{self.message}: {path}"
        if detail:
            text = f"{text} ({detail})"
        super().__init__(text)


class UnableToReadFile(_PathError):
    message = "Unable to open image file"


class UnableToReadFormat(_PathError):
    message = "Unable to determine image format"


class UnableToDecodeImage(_PathError):
    message = "Unable to decode image data"
