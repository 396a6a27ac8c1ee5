"""
Compatibility wrapper to import Pillow (which provides the `PIL` namespace)
and expose the symbols Pixel Weave needs from a single place.

Re-exports:
    Image: the `PIL.Image` module
    UnidentifiedImageError: raised by Pillow when a file's format cannot be sniffed
    TRIANGLE_FILTER: the triangle (bilinear) resampling filter used for resizing
"""
from importlib import import_module
from types import ModuleType
from typing import Optional


def _import(name: str) -> Optional[ModuleType]:
    try:
        return import_module(name)
    except ImportError:
        return None


_pil = _import("PIL")
_pil_image = _import("PIL.Image")

if _pil is None or _pil_image is None:
    raise ImportError("pillow (PIL) is required: install with 'pip install Pillow'")

Image = _pil_image

UnidentifiedImageError = getattr(_pil, "UnidentifiedImageError")

# Pillow's BILINEAR filter is a triangle kernel
TRIANGLE_FILTER = _pil_image.Resampling.BILINEAR
