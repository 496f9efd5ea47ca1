import logging

import numpy as np

from ..color.linear import linear_to_srgb, srgb_to_linear
from ..config import DEFAULT_DEVICE, DEFAULT_LANCZOS_A, DEVICE_CUDA, DEVICE_LANCZOS_A
from ..errors import InvalidArgumentError
from ..utils.buffer import as_flat_buffer, check_buffer, check_dimensions, check_scale, output_dimensions
from ..utils.device import is_cupy_array, require_cupy
from .backend import Backend, get_backend
from .schema import UpscaleMethod, parse_method

logger = logging.getLogger(__name__)


def _resolve_device(src, device: str | None) -> str:
    if device is None:
        return DEVICE_CUDA if is_cupy_array(src) else DEFAULT_DEVICE
    return device.lower()


def _check_lanczos_a(a: int) -> None:
    if isinstance(a, bool) or int(a) != a or a < 1:
        raise InvalidArgumentError(f"Lanczos parameter a must be a positive integer, got {a}")


def _prepare(input, width_in: int, height_in: int, channels: int, device: str | None) -> tuple:
    src = as_flat_buffer(input)
    check_buffer(src, width_in, height_in, channels)
    backend: Backend = get_backend(_resolve_device(src, device))
    return src, backend, backend.asarray(src)


def _finish(output, src, backend: Backend):
    # CuPy in, CuPy out; every other container comes back as a host ndarray
    if is_cupy_array(src):
        return output if is_cupy_array(output) else require_cupy().asarray(output)
    return backend.to_host(output)


def upscale_bicubic(
    input,
    in_w: int,
    in_h: int,
    channels: int,
    out_w: int,
    out_h: int,
    device: str | None = None,
) -> np.ndarray:
    """
    Resample with Catmull-Rom cubic convolution over a 4x4 neighbourhood.

    Uses the edge-to-edge mapping ``src = out * (in - 1) / (out - 1)``, so the
    first and last samples of each axis are preserved exactly.

    Parameters
    ----------
    input : bytes | bytearray | memoryview | np.ndarray | cp.ndarray
        Flat row-major uint8 samples, channels interleaved.
    in_w, in_h : int
        Input width and height.
    channels : int
        Samples per pixel.
    out_w, out_h : int
        Output width and height.
    device : str | None (optional)
        ``"cpu"`` or ``"cuda"``. by default inferred from the input container.

    Returns
    -------
    np.ndarray | cp.ndarray
        Flat uint8 buffer of ``out_w * out_h * channels`` samples.

    Raises
    ------
    InvalidArgumentError
        If a dimension is not positive or the buffer size does not match.
    NumericDegenerateError
        If an output dimension is 1 while the matching input dimension is larger.
    """
    check_dimensions(out_w, out_h, name="output")
    src, backend, data = _prepare(input, in_w, in_h, channels, device)
    logger.debug(f"bicubic {in_w}x{in_h}x{channels} -> {out_w}x{out_h} on {backend.name}")
    output = backend.bicubic(data, in_w, in_h, channels, out_w, out_h)
    return _finish(output, src, backend)


def upscale_lanczos(
    input,
    in_w: int,
    in_h: int,
    channels: int,
    out_w: int,
    out_h: int,
    a: int = DEFAULT_LANCZOS_A,
    device: str | None = None,
) -> np.ndarray:
    """
    Resample with a Lanczos windowed sinc of ``a`` lobes.

    Uses the pixel-center mapping ``src = (out + 0.5) * in / out - 0.5`` and a
    ``2a x 2a`` clamp-to-edge neighbourhood.

    Parameters
    ----------
    input : bytes | bytearray | memoryview | np.ndarray | cp.ndarray
        Flat row-major uint8 samples, channels interleaved.
    in_w, in_h : int
        Input width and height.
    channels : int
        Samples per pixel.
    out_w, out_h : int
        Output width and height.
    a : int (optional)
        Number of lobes, by default 3.
    device : str | None (optional)
        ``"cpu"`` or ``"cuda"``. by default inferred from the input container.

    Returns
    -------
    np.ndarray | cp.ndarray
        Flat uint8 buffer of ``out_w * out_h * channels`` samples.
    """
    check_dimensions(out_w, out_h, name="output")
    _check_lanczos_a(a)
    src, backend, data = _prepare(input, in_w, in_h, channels, device)
    logger.debug(f"lanczos{a} {in_w}x{in_h}x{channels} -> {out_w}x{out_h} on {backend.name}")
    output = backend.lanczos(data, in_w, in_h, channels, out_w, out_h, int(a))
    return _finish(output, src, backend)


def upscale_edi(
    input,
    in_w: int,
    in_h: int,
    channels: int,
    scale_factor: float,
    device: str | None = None,
) -> np.ndarray:
    """
    Edge-directed interpolation by a uniform ``scale_factor``.

    The output is ``floor(in_w * scale_factor) x floor(in_h * scale_factor)``
    and each output pixel samples ``src = out / scale_factor``.

    Returns
    -------
    np.ndarray | cp.ndarray
        Flat uint8 buffer of ``out_w * out_h * channels`` samples.
    """
    check_scale(scale_factor, "scale_factor")
    out_w, out_h = output_dimensions(in_w, in_h, scale_factor, scale_factor)
    src, backend, data = _prepare(input, in_w, in_h, channels, device)
    logger.debug(f"edi x{scale_factor} {in_w}x{in_h}x{channels} -> {out_w}x{out_h} on {backend.name}")
    output = backend.edi(data, in_w, in_h, channels, out_w, out_h, scale_factor)
    return _finish(output, src, backend)


def upscale(
    input,
    in_w: int,
    in_h: int,
    channels: int,
    out_w: int,
    out_h: int,
    method: UpscaleMethod | str | int,
    a: int = DEFAULT_LANCZOS_A,
    device: str | None = None,
    linear_light: bool = False,
) -> np.ndarray:
    """
    Resample ``input`` with the selected method.

    EdgeDirected takes a single scale ``out_w / in_w``; ``out_h`` is not used for it
    and the output height is ``floor(in_h * out_w / in_w)``.

    Parameters
    ----------
    method : UpscaleMethod | str | int
        Method tag, see ``parse_method``.
    a : int (optional)
        Lanczos lobes, ignored by the other methods. by default 3.
    device : str | None (optional)
        ``"cpu"`` or ``"cuda"``. by default inferred from the input container.
    linear_light : bool (optional)
        Convert sRGB to linear light before resampling and back afterwards.
        The linear image is resampled as float32. Requires 3 channels.
        by default False.

    Raises
    ------
    InvalidArgumentError
        If a dimension, the buffer size or ``a`` is invalid.
    UnsupportedMethodError
        If ``method`` is not Bicubic, Lanczos or EdgeDirected.
    """
    method = parse_method(method)
    check_dimensions(out_w, out_h, name="output")
    if method == UpscaleMethod.LANCZOS:
        _check_lanczos_a(a)
    if linear_light and channels != 3:
        raise InvalidArgumentError(f"linear_light needs 3 channels, got {channels}")
    src, backend, data = _prepare(input, in_w, in_h, channels, device)

    if method == UpscaleMethod.EDGE_DIRECTED:
        scale_factor = out_w / in_w
        out_w, out_h = output_dimensions(in_w, in_h, scale_factor, scale_factor)

    if linear_light:
        # Float32 linear values go through the kernels unquantised
        data = srgb_to_linear(data.reshape(in_h, in_w, channels)).reshape(-1)

    logger.debug(f"{method.value} {in_w}x{in_h}x{channels} -> {out_w}x{out_h} on {backend.name}")
    if method == UpscaleMethod.BICUBIC:
        output = backend.bicubic(data, in_w, in_h, channels, out_w, out_h)
    elif method == UpscaleMethod.LANCZOS:
        output = backend.lanczos(data, in_w, in_h, channels, out_w, out_h, int(a))
    else:
        output = backend.edi(data, in_w, in_h, channels, out_w, out_h, scale_factor)

    if linear_light:
        output = linear_to_srgb(output.reshape(out_h, out_w, channels)).reshape(-1)

    return _finish(output, src, backend)


def lanczos_resample_device(
    src,
    dst,
    in_w: int,
    in_h: int,
    out_w: int,
    out_h: int,
    channels: int,
    a: int = DEVICE_LANCZOS_A,
) -> None:
    """
    Lanczos resampling on the CUDA device into a caller-allocated buffer.

    Blocks until the kernel has finished and, for a host ``dst``, until the
    result has been copied back.

    Parameters
    ----------
    src : bytes | np.ndarray | cp.ndarray
        Flat uint8 input of ``in_w * in_h * channels`` samples.
    dst : bytearray | np.ndarray | cp.ndarray
        Writable, C-contiguous uint8 buffer of ``out_w * out_h * channels`` samples.
    a : int (optional)
        Number of lobes, by default 8.

    Raises
    ------
    DeviceError
        If CuPy or a CUDA device is unavailable, or allocation, compilation or launch fails.
    """
    _check_lanczos_a(a)
    check_dimensions(out_w, out_h, name="output")
    target = as_flat_buffer(dst)
    check_buffer(target, out_w, out_h, channels)
    if not target.flags.c_contiguous or not target.flags.writeable:
        raise InvalidArgumentError("dst must be a writable C-contiguous buffer")

    _, backend, data = _prepare(src, in_w, in_h, channels, DEVICE_CUDA)
    output = backend.lanczos(data, in_w, in_h, channels, out_w, out_h, int(a))

    from .cuda.launch import device_errors

    with device_errors("copy to destination"):
        if is_cupy_array(target):
            target[...] = output
        else:
            output.get(out=target)


def resize(
    image: np.ndarray,
    dsize: tuple[int, int] | None = None,
    fx: float | None = None,
    fy: float | None = None,
    method: UpscaleMethod | str | int = UpscaleMethod.LANCZOS,
    a: int = DEFAULT_LANCZOS_A,
    device: str | None = None,
    linear_light: bool = False,
) -> np.ndarray:
    """
    Resize an image array to the specified size.

    Parameters
    ----------
    image : np.ndarray | cp.ndarray
        The input image, uint8, shape (height, width) or (height, width, channels).
    dsize : tuple[int, int] | None (optional)
        The output image size. The format is (width, height). by default None.
    fx : float | None (optional)
        The scaling factor along the horizontal axis. by default None.
    fy : float | None (optional)
        The scaling factor along the vertical axis. by default None.
    method : UpscaleMethod | str | int (optional)
        The interpolation method, by default Lanczos.

    Returns
    -------
    np.ndarray | cp.ndarray
        The resized image. The shape is (height, width, channels). dtype is uint8.
    """
    if image.ndim == 2:
        image = image[:, :, None]
    if image.ndim != 3:
        raise InvalidArgumentError(f"Expected a 2D or 3D image, got shape {image.shape}")
    input_height, input_width, channels = image.shape

    if dsize is not None:
        output_width, output_height = dsize
        check_dimensions(output_width, output_height, name="output")
    elif fx is not None and fy is not None:
        output_width, output_height = output_dimensions(input_width, input_height, fx, fy)
    else:
        raise InvalidArgumentError("Either dsize or fx and fy must be specified.")

    method = parse_method(method)
    output = upscale(
        image,
        input_width,
        input_height,
        channels,
        output_width,
        output_height,
        method,
        a=a,
        device=device,
        linear_light=linear_light,
    )
    if method == UpscaleMethod.EDGE_DIRECTED:
        scale_factor = output_width / input_width
        output_width, output_height = output_dimensions(input_width, input_height, scale_factor, scale_factor)
    return output.reshape(output_height, output_width, channels)
