import os

import cv2
import numpy as np


def imread(input_path: str) -> tuple[np.ndarray, int, int, int]:
    """
    Decode an image file into a flat 8-bit buffer.

    Args:
        input_path (str): Path to the image file.
    Returns:
        tuple[np.ndarray, int, int, int]: (buffer, width, height, channels). The buffer is
        row-major with channels interleaved in OpenCV (BGR) order.
    Raises:
        FileNotFoundError: If the image file does not exist.
        RuntimeError: If the file cannot be decoded or is not 8-bit.
    """
    if not os.path.exists(input_path):
        raise FileNotFoundError(f"Image not found at {input_path}")

    image: np.ndarray | None = cv2.imread(input_path, cv2.IMREAD_UNCHANGED)
    if image is None:
        raise RuntimeError(f"Failed to read image from {input_path}")
    if image.dtype != np.uint8:
        raise RuntimeError(f"Only 8-bit images are supported, {input_path} is {image.dtype}")

    if image.ndim == 2:
        image = image[:, :, None]
    elif image.shape[2] == 4:
        # If the image has an alpha channel, remove it
        image = image[:, :, :3]

    height, width, channels = image.shape
    return np.ascontiguousarray(image).reshape(-1), width, height, channels
