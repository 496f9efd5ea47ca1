import cupy as cp

from .launch import store_sample_code

bicubic_kernel_code = r"""
__device__ double cubic(double x) {
    x = fabs(x);
    if (x <= 1.0) return (1.5 * x - 2.5) * x * x + 1.0;
    else if (x < 2.0) return ((-0.5 * x + 2.5) * x - 4.0) * x + 2.0;
    return 0.0;
}

template <typename T>
__device__ void bicubic_resample(
    const T* __restrict__ input,
    T* __restrict__ output,
    unsigned char* __restrict__ degenerate,
    const int width_in,
    const int height_in,
    const int width_out,
    const int height_out,
    const int channels,
    const double x_ratio,
    const double y_ratio
) {
    const int x_out = blockIdx.x * blockDim.x + threadIdx.x;
    const int y_out = blockIdx.y * blockDim.y + threadIdx.y;

    if (x_out >= width_out || y_out >= height_out) return;

    // Edge-to-edge source position
    const double x_l = x_out * x_ratio;
    const double y_l = y_out * y_ratio;
    const int x_i = (int)floor(x_l);
    const int y_i = (int)floor(y_l);

    const int idx = y_out * width_out + x_out;
    const int out_pos = idx * channels;

    for (int c = 0; c < channels; ++c) {
        double result = 0.0;
        double normalizer = 0.0;

        // 4x4 neighbourhood
        for (int m = -1; m <= 2; ++m) {
            const int cur_x = max(0, min(x_i + m, width_in - 1));
            const double wx = cubic(x_l - cur_x);
            for (int n = -1; n <= 2; ++n) {
                const int cur_y = max(0, min(y_i + n, height_in - 1));
                const double weight = wx * cubic(y_l - cur_y);
                result += weight * input[(cur_y * width_in + cur_x) * channels + c];
                normalizer += weight;
            }
        }

        if (normalizer == 0.0) {
            degenerate[idx] = 1;
            store_sample(output, out_pos + c, 0.0);
        } else {
            store_sample(output, out_pos + c, result / normalizer);
        }
    }
}

extern "C" __global__ void bicubic_kernel(
    const unsigned char* __restrict__ input,
    unsigned char* __restrict__ output,
    unsigned char* __restrict__ degenerate,
    const int width_in,
    const int height_in,
    const int width_out,
    const int height_out,
    const int channels,
    const double x_ratio,
    const double y_ratio
) {
    bicubic_resample(input, output, degenerate, width_in, height_in, width_out, height_out, channels, x_ratio, y_ratio);
}

extern "C" __global__ void bicubic_float_kernel(
    const float* __restrict__ input,
    float* __restrict__ output,
    unsigned char* __restrict__ degenerate,
    const int width_in,
    const int height_in,
    const int width_out,
    const int height_out,
    const int channels,
    const double x_ratio,
    const double y_ratio
) {
    bicubic_resample(input, output, degenerate, width_in, height_in, width_out, height_out, channels, x_ratio, y_ratio);
}
"""

bicubic_kernel = cp.RawKernel(store_sample_code + bicubic_kernel_code, "bicubic_kernel")
bicubic_float_kernel = cp.RawKernel(store_sample_code + bicubic_kernel_code, "bicubic_float_kernel")
