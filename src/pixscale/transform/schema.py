from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ..config import DEFAULT_DEVICE, DEFAULT_JPEG_QUALITY, DEFAULT_LANCZOS_A
from ..errors import UnsupportedMethodError


class UpscaleMethod(str, Enum):
    BICUBIC = "bicubic"
    LANCZOS = "lanczos"
    EDGE_DIRECTED = "edi"


INTER_CUBIC = 2
INTER_LANCZOS = 4
INTER_EDGE_DIRECTED = 5

_INTER_CODES = {
    INTER_CUBIC: UpscaleMethod.BICUBIC,
    INTER_LANCZOS: UpscaleMethod.LANCZOS,
    INTER_EDGE_DIRECTED: UpscaleMethod.EDGE_DIRECTED,
}


def parse_method(method: "UpscaleMethod | str | int") -> UpscaleMethod:
    """
    Resolve a method tag to an ``UpscaleMethod``.

    Accepts the enum itself, its value or name in any case (``"edi"``,
    ``"EDGE_DIRECTED"``, ``"edge-directed"``) or one of the ``INTER_*`` codes.

    Raises
    ------
    UnsupportedMethodError
        For anything outside {Bicubic, Lanczos, EdgeDirected}.
    """
    if isinstance(method, UpscaleMethod):
        return method
    if isinstance(method, str):
        key = method.strip().lower().replace("-", "_")
        for candidate in UpscaleMethod:
            if key in (candidate.value, candidate.name.lower()):
                return candidate
    elif isinstance(method, int) and not isinstance(method, bool):
        if method in _INTER_CODES:
            return _INTER_CODES[method]
    raise UnsupportedMethodError(f"Unsupported upscale method: {method!r}")


class UpscaleJob(BaseModel):
    model_config = ConfigDict(frozen=True)

    input_path: Path = Field(..., description="Image to read")
    output_path: Path = Field(..., description="Where the resampled image is written")
    scale_x: float = Field(..., gt=0, description="Horizontal scale factor")
    scale_y: float = Field(..., gt=0, description="Vertical scale factor")
    method: UpscaleMethod = Field(default=UpscaleMethod.LANCZOS, description="Interpolation method")
    a: int = Field(default=DEFAULT_LANCZOS_A, ge=1, description="Lanczos lobes")
    device: str = Field(default=DEFAULT_DEVICE, description="Execution device, cpu or cuda")
    linear_light: bool = Field(default=False, description="Resample in linear light")
    quality: int = Field(default=DEFAULT_JPEG_QUALITY, ge=0, le=100, description="JPEG quality")
