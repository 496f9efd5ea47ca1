import functools
import logging

import numpy as np

from ..errors import DeviceError

logger = logging.getLogger(__name__)

try:
    import cupy as cp
except ImportError as e:  # CPU-only installs
    cp = None
    _import_error = e
else:
    _import_error = None


@functools.lru_cache(maxsize=1)
def is_cuda_available() -> bool:
    """Return True when CuPy is importable and at least one CUDA device is visible."""
    if cp is None:
        logger.debug(f"CuPy unavailable: {_import_error}")
        return False
    return bool(cp.cuda.is_available())


def get_device_count() -> int:
    if not is_cuda_available():
        return 0
    return cp.cuda.runtime.getDeviceCount()


def require_cupy():
    """
    Return the ``cupy`` module, or raise if the CUDA path cannot run here.

    Raises
    ------
    DeviceError
        If CuPy is not installed or no CUDA device is present.
    """
    if cp is None:
        raise DeviceError(f"CuPy is not available: {_import_error}")
    if not is_cuda_available():
        raise DeviceError("No CUDA device available")
    return cp


def is_cupy_array(obj) -> bool:
    return cp is not None and isinstance(obj, cp.ndarray)


def get_array_module(image):
    """numpy for host arrays, cupy for device arrays."""
    if is_cupy_array(image):
        return cp
    return np
