import numpy as np
import pytest

import pixscale as px


class TestDtypeConversions:
    """Test data type conversion functions"""

    @pytest.fixture
    def sample_float32(self):
        """Create a sample float32 image"""
        np.random.seed(42)
        return np.random.rand(50, 50, 3).astype(np.float32)

    @pytest.fixture
    def sample_uint8(self):
        """Create a sample uint8 image"""
        np.random.seed(42)
        return (np.random.rand(50, 50, 3) * 255).astype(np.uint8)

    def test_to_uint8_from_float32(self, sample_float32):
        """Test float32 to uint8 conversion"""
        uint8_image = px.to_uint8(sample_float32)
        assert uint8_image.dtype == np.uint8
        assert uint8_image.shape == sample_float32.shape

    def test_to_uint8_truncates(self):
        """Test that denormalization truncates toward zero"""
        image = np.array([0.0, 0.6 / 255, 1.4 / 255, 1.6 / 255, 254.9 / 255, 1.0], dtype=np.float64)
        np.testing.assert_array_equal(px.to_uint8(image), [0, 0, 1, 1, 254, 255])

    def test_to_uint8_float32_truncates(self):
        """Test truncation on float32 input"""
        image = np.array([0.25 / 255, 2.75 / 255, 100.5 / 255], dtype=np.float32)
        np.testing.assert_array_equal(px.to_uint8(image), [0, 2, 100])

    def test_to_uint8_clamps(self):
        """Test that out-of-range floats saturate"""
        image = np.array([-0.5, 1.5], dtype=np.float32)
        np.testing.assert_array_equal(px.to_uint8(image), [0, 255])

    def test_to_uint8_passthrough(self, sample_uint8):
        """Test that uint8 input is returned unchanged"""
        assert px.to_uint8(sample_uint8) is sample_uint8

    def test_to_float32_from_uint8(self, sample_uint8):
        """Test uint8 to float32 conversion"""
        float_image = px.to_float32(sample_uint8)
        assert float_image.dtype == np.float32
        assert float_image.min() >= 0.0
        assert float_image.max() <= 1.0
        np.testing.assert_allclose(float_image * 255, sample_uint8, atol=1e-3)

    def test_round_trip(self, sample_uint8):
        """Test uint8 -> float32 -> uint8 loses at most one level to truncation"""
        restored = px.to_uint8(px.to_float32(sample_uint8))
        diff = sample_uint8.astype(np.int16) - restored.astype(np.int16)
        assert diff.min() >= 0
        assert diff.max() <= 1

    def test_unsupported_dtype(self):
        """Test that integer types other than uint8 are rejected"""
        with pytest.raises(px.InvalidArgumentError):
            px.to_uint8(np.zeros(4, dtype=np.uint16))
        with pytest.raises(px.InvalidArgumentError):
            px.to_float32(np.zeros(4, dtype=np.int32))
