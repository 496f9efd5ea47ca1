import numpy as np
import pytest

import pixscale as px
from pixscale.transform.interpolation.edi import AXIS_X, AXIS_Y, blend, first_axis


class TestEdgeDirected:
    """Test edge-directed interpolation"""

    def test_tie_with_equal_corners_goes_x_first(self):
        assert first_axis(0.5, 0.5, 0.5, 0.5) == AXIS_X

    def test_tie_with_symmetric_block_goes_x_first(self):
        # gx = |0-1| + |1-0| == gy = |0-1| + |1-0|
        assert first_axis(0.0, 1.0, 1.0, 0.0) == AXIS_X

        fx, fy = 0.3, 0.6
        i1 = 0.0 + fx * (1.0 - 0.0)
        i2 = 1.0 + fx * (0.0 - 1.0)
        assert blend(0.0, 1.0, 1.0, 0.0, fx, fy) == i1 + fy * (i2 - i1)

    def test_horizontal_contrast_goes_y_first(self):
        assert first_axis(0.0, 1.0, 0.0, 1.0) == AXIS_Y

        fx, fy = 0.25, 0.75
        i1 = 0.0 + fy * (0.0 - 0.0)
        i2 = 1.0 + fy * (1.0 - 1.0)
        assert blend(0.0, 1.0, 0.0, 1.0, fx, fy) == i1 + fx * (i2 - i1)

    def test_vertical_contrast_goes_x_first(self):
        assert first_axis(0.0, 0.0, 1.0, 1.0) == AXIS_X

    @pytest.mark.parametrize(
        "width, height, scale, expected",
        [(5, 3, 1.5, (7, 4)), (4, 4, 2.0, (8, 8)), (8, 6, 0.5, (4, 3))],
    )
    def test_output_size(self, width, height, scale, expected, rng):
        channels = 3
        image = rng.integers(0, 256, size=width * height * channels, dtype=np.uint8)
        output = px.upscale_edi(image, width, height, channels, scale)
        assert output.shape == (expected[0] * expected[1] * channels,)
        assert output.dtype == np.uint8

    def test_constant_image(self):
        """Test that a flat image maps to its own normalise-denormalise round trip"""
        image = np.full(6 * 4 * 3, 137, dtype=np.uint8)
        expected = px.to_uint8(px.to_float32(image[:1]))[0]
        output = px.upscale_edi(image, 6, 4, 3, 2.5)
        assert np.all(output == expected)
        assert expected in (136, 137)

    def test_integer_scale_keeps_source_samples(self, rng):
        width, height, channels = 5, 4, 2
        image = rng.integers(0, 256, size=(height, width, channels), dtype=np.uint8)
        output = px.upscale_edi(image, width, height, channels, 2.0).reshape(height * 2, width * 2, channels)
        np.testing.assert_array_equal(output[::2, ::2], px.to_uint8(px.to_float32(image)))

    def test_invalid_scale(self):
        image = np.zeros(4 * 4, dtype=np.uint8)
        with pytest.raises(px.InvalidArgumentError):
            px.upscale_edi(image, 4, 4, 1, 0.0)
        with pytest.raises(px.InvalidArgumentError):
            px.upscale_edi(image, 4, 4, 1, -2.0)
        with pytest.raises(px.InvalidArgumentError):
            px.upscale_edi(image, 4, 4, 1, 0.1)
