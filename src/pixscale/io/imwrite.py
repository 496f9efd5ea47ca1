import os

import cv2
import numpy as np

from ..config import DEFAULT_JPEG_QUALITY
from ..utils.buffer import as_flat_buffer, check_buffer
from ..utils.device import is_cupy_array


def imwrite(
    output_path: str,
    buffer,
    width: int,
    height: int,
    channels: int,
    quality: int = DEFAULT_JPEG_QUALITY,
) -> None:
    """
    Encode a flat 8-bit buffer to an image file.

    Args:
        output_path (str): Destination path; the extension selects the codec.
        buffer: Flat uint8 samples, ``width * height * channels`` long, BGR order.
        quality (int): JPEG quality 0-100, by default 90. Ignored by other formats.
    Raises:
        RuntimeError: If OpenCV cannot encode or write the file.
    """
    samples = as_flat_buffer(buffer)
    if is_cupy_array(samples):
        samples = samples.get()
    check_buffer(samples, width, height, channels)
    image = samples.reshape(height, width, channels)
    if channels == 1:
        image = image[:, :, 0]

    _, ext = os.path.splitext(output_path)
    if ext.lower() in [".jpg", ".jpeg"]:
        options = [cv2.IMWRITE_JPEG_QUALITY, int(quality)]
    else:
        options = []

    if not cv2.imwrite(output_path, np.ascontiguousarray(image), options):
        raise RuntimeError(f"Failed to write image to {output_path}")
