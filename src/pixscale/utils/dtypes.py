import numpy as np

from ..errors import InvalidArgumentError


def to_uint8(image: np.ndarray) -> np.ndarray:
    """
    Denormalize a ``[0, 1]`` float image to 8-bit samples.

    Values are scaled by 255, clamped to ``[0, 255]`` and truncated. Works on
    NumPy and CuPy arrays.
    """
    if image.dtype == "uint8":
        pass
    elif image.dtype == "float32":
        image = (image * 255.0).clip(0, 255.0).astype("uint8")
    elif image.dtype == "float16":
        image = (image.astype("float32") * 255.0).clip(0, 255.0).astype("uint8")
    elif image.dtype == "float64":
        image = (image * 255.0).clip(0, 255.0).astype("uint8")
    else:
        raise InvalidArgumentError(f"Unsupported dtype {image.dtype}")
    return image


def to_float32(image: np.ndarray) -> np.ndarray:
    """Normalize 8-bit samples to ``[0, 1]`` float32. Works on NumPy and CuPy arrays."""
    if image.dtype == "float32":
        pass
    elif image.dtype == "uint8":
        image = image.astype("float32") / 255.0
    elif image.dtype in ("float16", "float64"):
        image = image.astype("float32")
    else:
        raise InvalidArgumentError(f"Unsupported dtype {image.dtype}")
    image = image.clip(0, 1.0)
    return image
