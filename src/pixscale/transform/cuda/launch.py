import contextlib

import cupy as cp
from cupy.cuda.compiler import CompileException
from cupy.cuda.memory import OutOfMemoryError

from ...config import CUDA_BLOCK_SIZE
from ...errors import DeviceError

CUDA_ERRORS = (
    cp.cuda.runtime.CUDARuntimeError,
    cp.cuda.driver.CUDADriverError,
    OutOfMemoryError,
    CompileException,
)

# Writes one result: clamped and truncated into uint8 output, unchanged into float output
store_sample_code = r"""
__device__ void store_sample(unsigned char* output, const int pos, const double value) {
    output[pos] = (unsigned char)fmin(fmax(value, 0.0), 255.0);
}

__device__ void store_sample(float* output, const int pos, const double value) {
    output[pos] = (float)value;
}
"""


@contextlib.contextmanager
def device_errors(what: str):
    """Re-raise any CuPy/CUDA failure inside the block as a DeviceError."""
    try:
        yield
    except CUDA_ERRORS as e:
        raise DeviceError(f"{what} failed on the CUDA device: {e}") from e


def launch(kernel: cp.RawKernel, width: int, height: int, args: tuple) -> None:
    """
    Launch ``kernel`` with one thread per output pixel and wait for it.

    The grid covers ``width x height`` in ``CUDA_BLOCK_SIZE`` blocks; threads past
    the edge return immediately.
    """
    block_size: tuple[int, int] = CUDA_BLOCK_SIZE
    grid_size: tuple[int, int] = (
        (width + block_size[0] - 1) // block_size[0],
        (height + block_size[1] - 1) // block_size[1],
    )
    with device_errors(kernel.name):
        kernel(grid_size, block_size, args)
        cp.cuda.get_current_stream().synchronize()
