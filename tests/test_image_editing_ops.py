"""
Unit tests for image_editing_ops module.

Tests size standardization and pixel interleaving.
"""

from unittest.mock import patch

import pytest
from PIL import Image

from PW_Libs.ImageEditingLib.image_editing_ops import (
    get_smallest_dimension,
    resize_exact,
    standardise_size,
    combine_buffers,
    combine_images,
)
from PW_Libs.ImageEditingLib.image_models import PixelGrid


def _grid(size, color=(10, 20, 30, 255), image_format="PNG"):
    return PixelGrid(Image.new("RGBA", size, color), format=image_format)


def _pixels(buffer):
    return [tuple(buffer[i:i + 4]) for i in range(0, len(buffer), 4)]


class TestGetSmallestDimension:
    """Tests for get_smallest_dimension function."""

    def test_second_smaller(self):
        assert get_smallest_dimension((4, 4), (2, 2)) == (2, 2)

    def test_first_smaller(self):
        assert get_smallest_dimension((2, 3), (10, 10)) == (2, 3)

    def test_equal_area_prefers_first(self):
        """Ties go to the first image even when the shapes differ."""
        assert get_smallest_dimension((2, 8), (4, 4)) == (2, 8)


class TestResizeExact:
    """Tests for resize_exact function."""

    def test_resizes_to_exact_dimensions(self):
        resized = resize_exact(_grid((10, 4)), (3, 7))

        assert resized.dimensions == (3, 7)
        assert resized.format == "PNG"

    def test_matching_dimensions_returns_same_grid(self):
        grid = _grid((5, 5))

        assert resize_exact(grid, (5, 5)) is grid

    def test_uses_triangle_filter(self):
        grid = _grid((4, 4))

        with patch.object(Image.Image, "resize", return_value=Image.new("RGBA", (2, 2))) as mock_resize:
            resize_exact(grid, (2, 2))

        mock_resize.assert_called_once_with((2, 2), Image.Resampling.BILINEAR)

    def test_palette_image_uses_triangle_filter(self):
        """Palette images are blended like RGBA ones, not picked by nearest neighbour."""
        stripe = Image.new("RGB", (4, 1))
        stripe.putdata([(0, 0, 0), (255, 255, 255), (0, 0, 0), (255, 255, 255)])
        palette = stripe.convert("P")
        expected = palette.convert("RGBA").resize((2, 1), Image.Resampling.BILINEAR)

        resized = resize_exact(PixelGrid(palette, format="GIF"), (2, 1))

        assert resized.image.mode == "RGBA"
        assert resized.to_rgba_bytes() == expected.tobytes()
        assert resized.to_rgba_bytes() != palette.resize((2, 1), Image.Resampling.NEAREST).convert("RGBA").tobytes()
        assert resized.format == "GIF"

    def test_bilevel_image_uses_triangle_filter(self):
        bilevel = Image.new("1", (4, 1))
        bilevel.putdata([0, 255, 0, 255])
        expected = bilevel.convert("RGBA").resize((2, 1), Image.Resampling.BILINEAR)

        resized = resize_exact(PixelGrid(bilevel), (2, 1))

        assert resized.to_rgba_bytes() == expected.tobytes()


class TestStandardiseSize:
    """Tests for standardise_size function."""

    def test_larger_first_is_resized(self):
        big, small = _grid((4, 4)), _grid((2, 2))

        out_1, out_2 = standardise_size(big, small)

        assert out_1.dimensions == (2, 2)
        assert out_2 is small

    def test_larger_second_is_resized(self):
        small, big = _grid((2, 2)), _grid((6, 3))

        out_1, out_2 = standardise_size(small, big)

        assert out_1 is small
        assert out_2.dimensions == (2, 2)

    def test_equal_area_uses_first_dimensions(self):
        out_1, out_2 = standardise_size(_grid((2, 8)), _grid((4, 4)))

        assert out_1.dimensions == (2, 8)
        assert out_2.dimensions == (2, 8)

    def test_identical_dimensions_are_untouched(self):
        grid_1, grid_2 = _grid((3, 3)), _grid((3, 3))

        out_1, out_2 = standardise_size(grid_1, grid_2)

        assert out_1 is grid_1
        assert out_2 is grid_2

    def test_idempotent(self):
        once = standardise_size(_grid((7, 2)), _grid((3, 3)))
        twice = standardise_size(*once)

        assert [g.dimensions for g in once] == [g.dimensions for g in twice]
        assert twice[0].dimensions == twice[1].dimensions == (7, 2)

    def test_preserves_formats(self):
        out_1, out_2 = standardise_size(_grid((4, 4), image_format="PNG"), _grid((2, 2), image_format="TIFF"))

        assert out_1.format == "PNG"
        assert out_2.format == "TIFF"


class TestCombineBuffers:
    """Tests for combine_buffers function."""

    def test_alternates_pixels_starting_with_first(self):
        buffer_1 = bytes([1, 1, 1, 1, 2, 2, 2, 2, 3, 3, 3, 3])
        buffer_2 = bytes([9, 9, 9, 9, 8, 8, 8, 8, 7, 7, 7, 7])

        result = combine_buffers(buffer_1, buffer_2)

        assert result == bytes([1, 1, 1, 1, 8, 8, 8, 8, 3, 3, 3, 3])

    @pytest.mark.parametrize("pixel_count", [1, 2, 3, 8, 33])
    def test_even_pixels_from_first_odd_from_second(self, pixel_count):
        buffer_1 = bytes((i * 7) % 256 for i in range(pixel_count * 4))
        buffer_2 = bytes((i * 13 + 5) % 256 for i in range(pixel_count * 4))

        result = combine_buffers(buffer_1, buffer_2)

        assert len(result) == len(buffer_1)
        pixels_1, pixels_2 = _pixels(buffer_1), _pixels(buffer_2)
        for k, pixel in enumerate(_pixels(result)):
            expected = pixels_1[k] if k % 2 == 0 else pixels_2[k]
            assert pixel == expected

    def test_empty_buffers(self):
        assert combine_buffers(b"", b"") == b""

    def test_short_second_buffer_reads_zero(self):
        """Bytes missing from the second source are treated as zero."""
        buffer_1 = bytes([1] * 16)
        buffer_2 = bytes([2] * 6)

        result = combine_buffers(buffer_1, buffer_2)

        assert result == bytes([1] * 4 + [2, 2, 0, 0] + [1] * 4 + [0] * 4)

    def test_partial_trailing_chunk(self):
        """A buffer that is not whole pixels keeps its length."""
        buffer_1 = bytes([1] * 6)
        buffer_2 = bytes([2] * 6)

        result = combine_buffers(buffer_1, buffer_2)

        assert result == bytes([1, 1, 1, 1, 2, 2])

    def test_returns_bytes(self):
        assert isinstance(combine_buffers(bytes(8), bytes(8)), bytes)


class TestCombineImages:
    """Tests for combine_images function."""

    def test_combines_two_by_two_images(self, make_image, sample_rgba_colors):
        colors_1 = sample_rgba_colors[:4]
        colors_2 = sample_rgba_colors[4:]
        grid_1 = PixelGrid(make_image((2, 2), colors_1))
        grid_2 = PixelGrid(make_image((2, 2), colors_2))

        result = combine_images(grid_1, grid_2)

        assert _pixels(result) == [colors_1[0], colors_2[1], colors_1[2], colors_2[3]]

    def test_converts_non_rgba_inputs(self):
        grid_1 = PixelGrid(Image.new("RGB", (2, 1), (255, 0, 0)))
        grid_2 = PixelGrid(Image.new("L", (2, 1), 7))

        result = combine_images(grid_1, grid_2)

        assert _pixels(result) == [(255, 0, 0, 255), (7, 7, 7, 255)]
