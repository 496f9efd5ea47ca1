import numpy as np

from ..errors import InvalidArgumentError
from ..utils.device import get_array_module
from ..utils.dtypes import to_float32


def _check_rgb(image) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise InvalidArgumentError(f"Expected a (height, width, 3) RGB image, got shape {image.shape}")


def srgb_to_linear(image: np.ndarray) -> np.ndarray:
    """
    Convert sRGB to linear light

    Parameters
    ----------
    image : np.ndarray | cp.ndarray
        Input image. Shape 3D array (height, width, 3), uint8 or float in [0, 1], sRGB encoded.

    Returns
    -------
    image_linear : np.ndarray | cp.ndarray
        Output image. Shape 3D array (height, width, 3), float32 linear light in [0, 1].
    """
    _check_rgb(image)
    xp = get_array_module(image)
    image = to_float32(image)
    linear = xp.where(image <= 0.04045, image / 12.92, ((image + 0.055) / 1.055) ** 2.4)
    return linear.astype(xp.float32)


def linear_to_srgb(image: np.ndarray) -> np.ndarray:
    """
    Convert linear light to sRGB

    Parameters
    ----------
    image : np.ndarray | cp.ndarray
        Input image. Shape 3D array (height, width, 3), float linear light in [0, 1].

    Returns
    -------
    image_srgb : np.ndarray | cp.ndarray
        Output image. Shape 3D array (height, width, 3), uint8 sRGB encoded,
        quantised to the nearest code value.
    """
    _check_rgb(image)
    xp = get_array_module(image)
    image = to_float32(image).astype(xp.float64)
    srgb = xp.where(image <= 0.0031308, image * 12.92, 1.055 * image ** (1.0 / 2.4) - 0.055)
    return xp.floor(srgb * 255.0 + 0.5).clip(0, 255.0).astype(xp.uint8)
