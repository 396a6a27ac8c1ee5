"""
Core image operations for Pixel Weave.

This module provides the size standardization and pixel interleaving steps
of the pipeline.

Functions:
    get_smallest_dimension: Pick the dimensions of the smaller-area image
    resize_exact: Resize a grid to exact dimensions with a triangle filter
    standardise_size: Bring two grids to a common resolution
    combine_buffers: Interleave two RGBA byte buffers pixel by pixel
    combine_images: Interleave the pixels of two standardized grids
"""

import logging
from typing import Tuple

import numpy as np

from PW_Libs.constants import PIXEL_CHUNK_SIZE
from PW_Libs.ImageEditingLib.image_models import Dimensions, PixelGrid
from PW_Libs.pillow_compat import TRIANGLE_FILTER

logger = logging.getLogger(__name__)


def get_smallest_dimension(dim_1: Dimensions, dim_2: Dimensions) -> Dimensions:
    """
    Pick the dimensions of the image with the smaller pixel area.

    Ties go to the first image.

    Args:
        dim_1: (width, height) of the first image
        dim_2: (width, height) of the second image

    Returns:
        The (width, height) pair with the smaller area
    """
    pix_1 = dim_1[0] * dim_1[1]
    pix_2 = dim_2[0] * dim_2[1]
    return dim_2 if pix_1 > pix_2 else dim_1


def resize_exact(grid: PixelGrid, dimensions: Dimensions) -> PixelGrid:
    """
    Resize a grid to exactly ``dimensions``, ignoring aspect ratio.

    The image is converted to 8-bit RGBA first, since Pillow falls back to
    nearest-neighbour for palette and bilevel modes. A grid that already has
    the requested size is returned unchanged.
    """
    if grid.dimensions == tuple(dimensions):
        return grid

    logger.debug(f"Resizing {grid.dimensions} -> {tuple(dimensions)}")
    return grid.with_image(grid.to_rgba_image().resize(tuple(dimensions), TRIANGLE_FILTER))


def standardise_size(grid_1: PixelGrid, grid_2: PixelGrid) -> Tuple[PixelGrid, PixelGrid]:
    """
    Bring two grids to the dimensions of the smaller-area one.

    When the first grid already matches the target, the second one is
    resized; otherwise the first one is resized and the second is kept.

    Args:
        grid_1: First decoded image
        grid_2: Second decoded image

    Returns:
        Tuple of both grids sharing identical width and height
    """
    width, height = get_smallest_dimension(grid_1.dimensions, grid_2.dimensions)

    if grid_1.dimensions == (width, height):
        return grid_1, resize_exact(grid_2, (width, height))
    return resize_exact(grid_1, (width, height)), grid_2


def _pixel_rows(buffer: bytes, length: int) -> np.ndarray:
    """View ``buffer`` as (n, 4) pixel rows, zero-padded or cut to ``length``."""
    data = np.frombuffer(buffer, dtype=np.uint8)[:length]
    if data.size < length:
        data = np.pad(data, (0, length - data.size))
    return data.reshape(-1, PIXEL_CHUNK_SIZE)


def combine_buffers(buffer_1: bytes, buffer_2: bytes) -> bytes:
    """
    Interleave two RGBA buffers one pixel at a time.

    Pixel ``k`` of the result comes from ``buffer_1`` when ``k`` is even and
    from ``buffer_2`` when ``k`` is odd. Bytes read past the end of either
    source are zero.

    Args:
        buffer_1: RGBA bytes of the first image
        buffer_2: RGBA bytes of the second image, normally the same length

    Returns:
        Combined buffer, exactly ``len(buffer_1)`` bytes long

    Example:
        >>> combine_buffers(bytes([1] * 8), bytes([2] * 8))
        b'\\x01\\x01\\x01\\x01\\x02\\x02\\x02\\x02'
    """
    data_length = len(buffer_1)
    if data_length == 0:
        return b""

    # Round up to whole pixels so a trailing partial chunk is still copied
    padded_length = -(-data_length // PIXEL_CHUNK_SIZE) * PIXEL_CHUNK_SIZE

    combined = _pixel_rows(buffer_1, padded_length).copy()
    combined[1::2] = _pixel_rows(buffer_2, padded_length)[1::2]

    return combined.tobytes()[:data_length]


def combine_images(grid_1: PixelGrid, grid_2: PixelGrid) -> bytes:
    """
    Interleave the RGBA pixels of two grids of equal size.

    Args:
        grid_1: First standardized grid, supplies even pixels
        grid_2: Second standardized grid, supplies odd pixels

    Returns:
        Combined RGBA bytes, as long as the first grid's buffer
    """
    vec_1 = grid_1.to_rgba_bytes()
    vec_2 = grid_2.to_rgba_bytes()
    logger.debug(f"Combining {len(vec_1)} and {len(vec_2)} byte buffers")
    return combine_buffers(vec_1, vec_2)
