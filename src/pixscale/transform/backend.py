"""
Execution strategies for the resampling kernels.

``CpuBackend`` runs numba-parallel loops over the collapsed output grid,
``CudaBackend`` launches one CUDA thread per output pixel. Both evaluate the
same formulas and take and return flat buffers resident on their own
device: uint8 samples, or float32 linear-light values which are resampled
without quantisation.
"""

import functools
import logging

import numba
import numpy as np

from ..config import DEVICE_CPU, DEVICE_CUDA, DEVICES, NUM_THREADS
from ..errors import InvalidArgumentError, NumericDegenerateError
from ..utils.device import is_cupy_array, require_cupy
from ..utils.dtypes import to_float32, to_uint8
from .interpolation.bicubic import bicubic_cpu
from .interpolation.edi import edi_cpu
from .interpolation.geometry import center_ratio, edge_ratio
from .interpolation.lanczos import lanczos_cpu

logger = logging.getLogger(__name__)


def _raise_if_degenerate(degenerate, method: str) -> None:
    if bool(degenerate.any()):
        count = int(degenerate.sum())
        raise NumericDegenerateError(f"{method}: kernel weights summed to zero for {count} output pixel(s)")


class Backend:
    name: str = ""

    def asarray(self, buffer):
        raise NotImplementedError

    def to_host(self, buffer) -> np.ndarray:
        raise NotImplementedError

    def lanczos(self, src, width_in, height_in, channels, width_out, height_out, a):
        raise NotImplementedError

    def bicubic(self, src, width_in, height_in, channels, width_out, height_out):
        raise NotImplementedError

    def edi(self, src, width_in, height_in, channels, width_out, height_out, scale_factor):
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class CpuBackend(Backend):
    name = DEVICE_CPU

    def __init__(self, num_threads: int | None = NUM_THREADS) -> None:
        self.num_threads = num_threads

    def _set_threads(self) -> None:
        if self.num_threads is not None:
            numba.set_num_threads(max(1, min(self.num_threads, numba.config.NUMBA_NUM_THREADS)))

    def asarray(self, buffer) -> np.ndarray:
        if is_cupy_array(buffer):
            return buffer.get()
        return np.ascontiguousarray(buffer)

    def to_host(self, buffer) -> np.ndarray:
        return buffer

    def lanczos(self, src, width_in, height_in, channels, width_out, height_out, a):
        dst = np.empty(width_out * height_out * channels, dtype=src.dtype)
        degenerate = np.zeros(width_out * height_out, dtype=np.uint8)
        self._set_threads()
        lanczos_cpu(
            src,
            dst,
            degenerate,
            width_in,
            height_in,
            width_out,
            height_out,
            channels,
            a,
            center_ratio(width_in, width_out),
            center_ratio(height_in, height_out),
            src.dtype == np.uint8,
        )
        _raise_if_degenerate(degenerate, "lanczos")
        return dst

    def bicubic(self, src, width_in, height_in, channels, width_out, height_out):
        x_ratio = edge_ratio(width_in, width_out)
        y_ratio = edge_ratio(height_in, height_out)
        dst = np.empty(width_out * height_out * channels, dtype=src.dtype)
        degenerate = np.zeros(width_out * height_out, dtype=np.uint8)
        self._set_threads()
        bicubic_cpu(
            src,
            dst,
            degenerate,
            width_in,
            height_in,
            width_out,
            height_out,
            channels,
            x_ratio,
            y_ratio,
            src.dtype == np.uint8,
        )
        _raise_if_degenerate(degenerate, "bicubic")
        return dst

    def edi(self, src, width_in, height_in, channels, width_out, height_out, scale_factor):
        preprocessed = to_float32(src)
        upscaled = np.empty(width_out * height_out * channels, dtype=np.float32)
        self._set_threads()
        edi_cpu(preprocessed, upscaled, width_in, height_in, width_out, height_out, channels, float(scale_factor))
        return to_uint8(upscaled) if src.dtype == np.uint8 else upscaled


class CudaBackend(Backend):
    name = DEVICE_CUDA

    def __init__(self) -> None:
        self.cp = require_cupy()

    def asarray(self, buffer):
        from .cuda.launch import device_errors

        with device_errors("upload"):
            return self.cp.ascontiguousarray(self.cp.asarray(buffer))

    def to_host(self, buffer) -> np.ndarray:
        from .cuda.launch import device_errors

        with device_errors("download"):
            return self.cp.asnumpy(buffer)

    def lanczos(self, src, width_in, height_in, channels, width_out, height_out, a):
        from .cuda.lanczos import lanczos_float_kernel, lanczos_kernel
        from .cuda.launch import device_errors, launch

        cp = self.cp
        with device_errors("lanczos allocation"):
            dst = cp.empty(width_out * height_out * channels, dtype=src.dtype)
            degenerate = cp.zeros(width_out * height_out, dtype=cp.uint8)
        launch(
            lanczos_kernel if src.dtype == cp.uint8 else lanczos_float_kernel,
            width_out,
            height_out,
            (
                src,
                dst,
                degenerate,
                np.int32(width_in),
                np.int32(height_in),
                np.int32(width_out),
                np.int32(height_out),
                np.int32(channels),
                np.int32(a),
                np.float64(center_ratio(width_in, width_out)),
                np.float64(center_ratio(height_in, height_out)),
            ),
        )
        _raise_if_degenerate(degenerate, "lanczos")
        return dst

    def bicubic(self, src, width_in, height_in, channels, width_out, height_out):
        from .cuda.bicubic import bicubic_float_kernel, bicubic_kernel
        from .cuda.launch import device_errors, launch

        cp = self.cp
        x_ratio = edge_ratio(width_in, width_out)
        y_ratio = edge_ratio(height_in, height_out)
        with device_errors("bicubic allocation"):
            dst = cp.empty(width_out * height_out * channels, dtype=src.dtype)
            degenerate = cp.zeros(width_out * height_out, dtype=cp.uint8)
        launch(
            bicubic_kernel if src.dtype == cp.uint8 else bicubic_float_kernel,
            width_out,
            height_out,
            (
                src,
                dst,
                degenerate,
                np.int32(width_in),
                np.int32(height_in),
                np.int32(width_out),
                np.int32(height_out),
                np.int32(channels),
                np.float64(x_ratio),
                np.float64(y_ratio),
            ),
        )
        _raise_if_degenerate(degenerate, "bicubic")
        return dst

    def edi(self, src, width_in, height_in, channels, width_out, height_out, scale_factor):
        from .cuda.edi import edi_kernel
        from .cuda.launch import device_errors, launch

        cp = self.cp
        with device_errors("edi allocation"):
            preprocessed = cp.ascontiguousarray(to_float32(src))
            upscaled = cp.empty(width_out * height_out * channels, dtype=cp.float32)
        launch(
            edi_kernel,
            width_out,
            height_out,
            (
                preprocessed,
                upscaled,
                np.int32(width_in),
                np.int32(height_in),
                np.int32(width_out),
                np.int32(height_out),
                np.int32(channels),
                np.float64(scale_factor),
            ),
        )
        if src.dtype != cp.uint8:
            return upscaled
        with device_errors("edi postprocess"):
            return to_uint8(upscaled)


@functools.lru_cache(maxsize=None)
def get_backend(device: str) -> Backend:
    """
    Return the execution strategy for ``device``.

    Raises
    ------
    InvalidArgumentError
        If ``device`` is not one of ``config.DEVICES``.
    DeviceError
        If ``device`` is ``"cuda"`` and no usable CUDA device is present.
    """
    if device == DEVICE_CPU:
        return CpuBackend()
    elif device == DEVICE_CUDA:
        return CudaBackend()
    raise InvalidArgumentError(f"Unknown device {device!r}, expected one of {DEVICES}")
