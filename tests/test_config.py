import pytest

import pixscale as px
from pixscale import config


class TestEnvironmentOverrides:
    """Test validation of the environment-driven defaults"""

    @pytest.mark.parametrize("value, expected", [(None, "cpu"), ("", "cpu"), ("cpu", "cpu"), (" CUDA ", "cuda")])
    def test_device(self, value, expected):
        """Test accepted device values"""
        assert config.device_from_env(value) == expected

    @pytest.mark.parametrize("value", ["gpu", "tpu", "cuda:0"])
    def test_unknown_device(self, value):
        """Test that a device outside the supported set is rejected"""
        with pytest.raises(px.InvalidArgumentError, match="PIXSCALE_DEVICE"):
            config.device_from_env(value)

    @pytest.mark.parametrize("value, expected", [(None, None), ("", None), ("0", None), ("4", 4)])
    def test_threads(self, value, expected):
        """Test accepted thread counts"""
        assert config.threads_from_env(value) == expected

    @pytest.mark.parametrize("value", ["four", "2.5", "-1"])
    def test_invalid_threads(self, value):
        """Test that malformed thread counts are rejected with a clear error"""
        with pytest.raises(px.InvalidArgumentError, match="PIXSCALE_NUM_THREADS"):
            config.threads_from_env(value)

    def test_default_device_is_a_cli_choice(self):
        """Test that the configured default is one of the supported devices"""
        assert config.DEFAULT_DEVICE in config.DEVICES
