from .color.linear import linear_to_srgb, srgb_to_linear
from .errors import (
    DeviceError,
    InvalidArgumentError,
    NumericDegenerateError,
    PixscaleError,
    UnsupportedMethodError,
)
from .io.imread import imread
from .io.imwrite import imwrite
from .io.listdir import list_jpeg_files
from .transform.backend import CpuBackend, CudaBackend, get_backend
from .transform.interpolation.kernels import cubic, lanczos, sinc
from .transform.resize import (
    lanczos_resample_device,
    resize,
    upscale,
    upscale_bicubic,
    upscale_edi,
    upscale_lanczos,
)
from .transform.schema import (
    INTER_CUBIC,
    INTER_EDGE_DIRECTED,
    INTER_LANCZOS,
    UpscaleJob,
    UpscaleMethod,
    parse_method,
)
from .utils.buffer import output_dimensions
from .utils.device import get_device_count, is_cuda_available
from .utils.dtypes import to_float32, to_uint8

__version__ = "0.1.0"

__all__ = [
    "linear_to_srgb",
    "srgb_to_linear",
    "DeviceError",
    "InvalidArgumentError",
    "NumericDegenerateError",
    "PixscaleError",
    "UnsupportedMethodError",
    "imread",
    "imwrite",
    "list_jpeg_files",
    "CpuBackend",
    "CudaBackend",
    "get_backend",
    "cubic",
    "lanczos",
    "sinc",
    "lanczos_resample_device",
    "resize",
    "upscale",
    "upscale_bicubic",
    "upscale_edi",
    "upscale_lanczos",
    "INTER_CUBIC",
    "INTER_EDGE_DIRECTED",
    "INTER_LANCZOS",
    "UpscaleJob",
    "UpscaleMethod",
    "parse_method",
    "output_dimensions",
    "get_device_count",
    "is_cuda_available",
    "to_float32",
    "to_uint8",
]
