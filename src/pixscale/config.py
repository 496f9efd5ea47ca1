# config.py
"""
Configuration constants for pixscale.

Defaults can be overridden through the environment:

* ``PIXSCALE_DEVICE``: ``cpu`` or ``cuda``, used when a call does not pick a device.
* ``PIXSCALE_NUM_THREADS``: upper bound on the numba worker threads of the CPU path.
"""

import os
from typing import Final

from .errors import InvalidArgumentError

DEVICE_CPU: Final = "cpu"
DEVICE_CUDA: Final = "cuda"
DEVICES: Final = (DEVICE_CPU, DEVICE_CUDA)


def device_from_env(value: str | None) -> str:
    """Validate a ``PIXSCALE_DEVICE`` value, defaulting to the CPU."""
    if not value:
        return DEVICE_CPU
    device = value.strip().lower()
    if device not in DEVICES:
        raise InvalidArgumentError(f"PIXSCALE_DEVICE must be one of {DEVICES}, got {value!r}")
    return device


def threads_from_env(value: str | None) -> int | None:
    """Validate a ``PIXSCALE_NUM_THREADS`` value. Unset or 0 leaves numba's default."""
    if not value:
        return None
    try:
        threads = int(value)
    except ValueError:
        raise InvalidArgumentError(f"PIXSCALE_NUM_THREADS must be an integer, got {value!r}") from None
    if threads < 0:
        raise InvalidArgumentError(f"PIXSCALE_NUM_THREADS must not be negative, got {value!r}")
    return threads or None


DEFAULT_DEVICE: Final = device_from_env(os.environ.get("PIXSCALE_DEVICE"))
NUM_THREADS: Final = threads_from_env(os.environ.get("PIXSCALE_NUM_THREADS"))

# Lanczos lobes for the host entry points and for the device-level entry point
DEFAULT_LANCZOS_A: Final = 3
DEVICE_LANCZOS_A: Final = 8

CUDA_BLOCK_SIZE: Final = (16, 16)

SUPPORTED_EXTENSIONS: Final = frozenset({".jpg", ".jpeg"})
DEFAULT_JPEG_QUALITY: Final = 90
OUTPUT_SUFFIX: Final = "_x{scale:g}"
