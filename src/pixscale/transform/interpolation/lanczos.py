import math

from numba import njit, prange

from .geometry import center_source, clamp_index, to_sample
from .kernels import lanczos


@njit(parallel=True, cache=True)
def lanczos_cpu(
    src, dst, degenerate, width_in, height_in, width_out, height_out, channels, a, x_ratio, y_ratio, quantize
):
    """
    Lanczos resampling of a flat uint8 or float32 buffer into ``dst``.

    Every output pixel reads a ``2a x 2a`` clamped neighbourhood around its
    pixel-center source position. With ``quantize`` the result is clamped and
    truncated to uint8, otherwise it is stored as is into a float ``dst``.
    Pixels whose weights sum to zero are flagged in ``degenerate`` and left black.
    """
    for idx in prange(width_out * height_out):
        y_out = idx // width_out
        x_out = idx - y_out * width_out

        x_l = center_source(x_out, x_ratio)
        y_l = center_source(y_out, y_ratio)
        x_i = int(math.floor(x_l))
        y_i = int(math.floor(y_l))

        out_pos = idx * channels
        for c in range(channels):
            result = 0.0
            normalizer = 0.0

            for m in range(-a + 1, a + 1):
                cur_x = clamp_index(x_i + m, width_in)
                wx = lanczos(x_l - cur_x, a)
                for n in range(-a + 1, a + 1):
                    cur_y = clamp_index(y_i + n, height_in)
                    weight = wx * lanczos(y_l - cur_y, a)
                    result += weight * src[(cur_y * width_in + cur_x) * channels + c]
                    normalizer += weight

            if normalizer == 0.0:
                degenerate[idx] = 1
                dst[out_pos + c] = 0
            elif quantize:
                dst[out_pos + c] = to_sample(result / normalizer)
            else:
                dst[out_pos + c] = result / normalizer
