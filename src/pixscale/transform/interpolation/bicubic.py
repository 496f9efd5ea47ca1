import math

from numba import njit, prange

from .geometry import clamp_index, edge_source, to_sample
from .kernels import cubic


@njit(parallel=True, cache=True)
def bicubic_cpu(
    src, dst, degenerate, width_in, height_in, width_out, height_out, channels, x_ratio, y_ratio, quantize
):
    """Catmull-Rom resampling over a fixed 4x4 neighbourhood with edge-to-edge mapping."""
    for idx in prange(width_out * height_out):
        y_out = idx // width_out
        x_out = idx - y_out * width_out

        x_l = edge_source(x_out, x_ratio)
        y_l = edge_source(y_out, y_ratio)
        x_i = int(math.floor(x_l))
        y_i = int(math.floor(y_l))

        out_pos = idx * channels
        for c in range(channels):
            result = 0.0
            normalizer = 0.0

            for m in range(-1, 3):
                cur_x = clamp_index(x_i + m, width_in)
                wx = cubic(x_l - cur_x)
                for n in range(-1, 3):
                    cur_y = clamp_index(y_i + n, height_in)
                    weight = wx * cubic(y_l - cur_y)
                    result += weight * src[(cur_y * width_in + cur_x) * channels + c]
                    normalizer += weight

            if normalizer == 0.0:
                degenerate[idx] = 1
                dst[out_pos + c] = 0
            elif quantize:
                dst[out_pos + c] = to_sample(result / normalizer)
            else:
                dst[out_pos + c] = result / normalizer
