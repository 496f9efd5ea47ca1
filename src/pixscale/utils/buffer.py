import math

import numpy as np

from ..errors import InvalidArgumentError
from .device import is_cupy_array


def as_flat_buffer(buffer) -> np.ndarray:
    """
    View an image buffer as a flat uint8 array without copying where possible.

    Parameters
    ----------
    buffer : bytes | bytearray | memoryview | np.ndarray | cp.ndarray
        Row-major, channel-interleaved 8-bit samples of any shape.

    Returns
    -------
    np.ndarray | cp.ndarray
        One dimensional uint8 array on the same device as the input.
    """
    if isinstance(buffer, (bytes, bytearray, memoryview)):
        return np.frombuffer(buffer, dtype=np.uint8)
    if isinstance(buffer, np.ndarray) or is_cupy_array(buffer):
        if buffer.dtype != np.uint8:
            raise InvalidArgumentError(f"Image buffer must be uint8, got {buffer.dtype}")
        return buffer.reshape(-1)
    raise InvalidArgumentError(f"Unsupported image buffer type: {type(buffer)}")


def check_dimensions(width: int, height: int, channels: int | None = None, name: str = "input") -> None:
    if width < 1 or height < 1:
        raise InvalidArgumentError(f"{name} dimensions must be positive, got {width}x{height}")
    if channels is not None and channels < 1:
        raise InvalidArgumentError(f"channels must be positive, got {channels}")


def check_buffer(buffer, width: int, height: int, channels: int) -> None:
    check_dimensions(width, height, channels)
    expected = width * height * channels
    if buffer.size != expected:
        raise InvalidArgumentError(
            f"Buffer holds {buffer.size} samples, expected {expected} ({width}x{height}x{channels})"
        )


def check_scale(scale: float, name: str = "scale") -> None:
    if not scale > 0 or math.isinf(scale):
        raise InvalidArgumentError(f"{name} must be a positive finite number, got {scale}")


def output_dimensions(width: int, height: int, scale_x: float, scale_y: float) -> tuple[int, int]:
    """Output (width, height) as ``floor(input_dim * scale)``, each at least 1."""
    check_scale(scale_x, "scale_x")
    check_scale(scale_y, "scale_y")
    output_width = int(math.floor(width * scale_x))
    output_height = int(math.floor(height * scale_y))
    check_dimensions(output_width, output_height, name="output")
    return output_width, output_height
