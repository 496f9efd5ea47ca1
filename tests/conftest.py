import numpy as np
import pytest

import pixscale as px


@pytest.fixture
def cuda():
    """CuPy module, or skip when no CUDA device is usable"""
    if not px.is_cuda_available():
        pytest.skip("CUDA device not available")
    import cupy as cp

    return cp


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
