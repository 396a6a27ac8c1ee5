"""
Pytest configuration and shared fixtures for Pixel Weave tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

from pathlib import Path

import pytest
from PIL import Image


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 255),  # Gray
        (255, 255, 0, 128),  # Translucent yellow
        (0, 255, 255, 64),   # Translucent cyan
    ]


@pytest.fixture
def make_image():
    """
    Provide a factory building an RGBA image from a flat list of pixel colors.

    Returns:
        Callable (size, colors) -> PIL Image, filled row by row
    """
    def _make(size, colors):
        image = Image.new("RGBA", size)
        image.putdata(list(colors))
        return image

    return _make


@pytest.fixture
def write_image(tmp_path, make_image):
    """
    Provide a factory that saves an RGBA image into the temporary directory.

    Returns:
        Callable (name, size, colors, format) -> Path of the written file
    """
    def _write(name, size, colors, image_format="PNG") -> Path:
        path = tmp_path / name
        make_image(size, colors).save(path, format=image_format)
        return path

    return _write
