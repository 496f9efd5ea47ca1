import numpy as np
import pytest

import pixscale as px
from pixscale.errors import NumericDegenerateError
from pixscale.transform.interpolation.geometry import (
    center_ratio,
    center_source,
    clamp_index,
    edge_ratio,
    edge_source,
    to_sample,
)


class TestKernelFunctions:
    """Test the scalar weight functions"""

    def test_sinc(self):
        assert px.sinc(0.0) == 1.0
        for x in [1.0, 2.0, -3.0]:
            assert abs(px.sinc(x)) < 1e-12
        assert px.sinc(0.5) == pytest.approx(2 / np.pi)

    @pytest.mark.parametrize("a", [1, 2, 3, 8])
    def test_lanczos_support(self, a):
        assert px.lanczos(0.0, a) == 1.0
        assert px.lanczos(float(a), a) == 0.0
        assert px.lanczos(-float(a), a) == 0.0
        assert px.lanczos(a + 0.5, a) == 0.0
        for x in np.linspace(-a + 0.01, a - 0.01, 37):
            assert px.lanczos(x, a) == pytest.approx(px.lanczos(-x, a))

    def test_lanczos_value(self):
        expected = px.sinc(0.25) * px.sinc(0.25 / 3)
        assert px.lanczos(0.25, 3) == pytest.approx(expected)
        assert px.lanczos(1.0, 3) == pytest.approx(0.0, abs=1e-12)

    def test_cubic(self):
        assert px.cubic(0.0) == 1.0
        assert px.cubic(1.0) == 0.0
        assert px.cubic(-1.0) == 0.0
        assert px.cubic(2.0) == 0.0
        assert px.cubic(2.5) == 0.0
        assert px.cubic(0.5) == pytest.approx(0.5625)
        assert px.cubic(-1.5) == pytest.approx(-0.0625)


class TestGeometry:
    """Test coordinate mapping and clamp-to-edge"""

    @pytest.mark.parametrize("size", [1, 2, 7])
    def test_clamp_index_in_range(self, size):
        for i in range(-10, size + 10):
            j = clamp_index(i, size)
            assert 0 <= j <= size - 1
            if 0 <= i < size:
                assert j == i

    def test_center_source(self):
        ratio = center_ratio(2, 4)
        assert center_source(0, ratio) == pytest.approx(-0.25)
        assert center_source(3, ratio) == pytest.approx(1.25)

    def test_edge_source(self):
        ratio = edge_ratio(4, 7)
        assert edge_source(0, ratio) == 0.0
        assert edge_source(6, ratio) == 3.0

    def test_edge_ratio_single_sample(self):
        assert edge_ratio(1, 1) == 0.0
        with pytest.raises(NumericDegenerateError):
            edge_ratio(5, 1)

    def test_to_sample(self):
        assert to_sample(-12.0) == 0
        assert to_sample(300.0) == 255
        assert to_sample(84.49) == 84
        assert to_sample(84.5) == 84
        assert to_sample(84.99) == 84
        assert to_sample(255.0) == 255
