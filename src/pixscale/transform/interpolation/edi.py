"""
Edge-directed interpolation.

A bilinear 2x2 blend whose first interpolation axis follows the local
gradient: when horizontal contrast dominates, blend along y first, otherwise
along x first. Works on float samples normalized to ``[0, 1]``.
"""

import math

from numba import njit, prange

AXIS_X = 0
AXIS_Y = 1


@njit(cache=True)
def gradient(a: float, b: float, c: float, d: float) -> float:
    return abs(a - b) + abs(c - d)


@njit(cache=True)
def first_axis(a: float, b: float, c: float, d: float) -> int:
    """
    Axis to interpolate along first for the block ``a b / c d``.

    Ties go to ``AXIS_X``.
    """
    gx = gradient(a, b, c, d)
    gy = gradient(a, c, b, d)
    if abs(gx) > abs(gy):
        return AXIS_Y
    return AXIS_X


@njit(cache=True)
def blend(a: float, b: float, c: float, d: float, fx: float, fy: float) -> float:
    if first_axis(a, b, c, d) == AXIS_Y:
        i1 = a + fy * (c - a)
        i2 = b + fy * (d - b)
        return i1 + fx * (i2 - i1)
    i1 = a + fx * (b - a)
    i2 = c + fx * (d - c)
    return i1 + fy * (i2 - i1)


@njit(cache=True)
def interpolate_pixel(src, width, height, channels, x, y, channel):
    x0 = min(int(math.floor(x)), width - 1)
    y0 = min(int(math.floor(y)), height - 1)
    x1 = min(x0 + 1, width - 1)
    y1 = min(y0 + 1, height - 1)

    fx = x - x0
    fy = y - y0

    a = src[(y0 * width + x0) * channels + channel]
    b = src[(y0 * width + x1) * channels + channel]
    c = src[(y1 * width + x0) * channels + channel]
    d = src[(y1 * width + x1) * channels + channel]
    return blend(a, b, c, d, fx, fy)


@njit(parallel=True, cache=True)
def edi_cpu(src, dst, width_in, height_in, width_out, height_out, channels, scale_factor):
    for idx in prange(width_out * height_out):
        y_out = idx // width_out
        x_out = idx - y_out * width_out

        src_x = x_out / scale_factor
        src_y = y_out / scale_factor

        out_pos = idx * channels
        for c in range(channels):
            dst[out_pos + c] = interpolate_pixel(src, width_in, height_in, channels, src_x, src_y, c)
