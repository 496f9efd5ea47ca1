import cupy as cp

from .launch import store_sample_code

lanczos_kernel_code = r"""
__device__ double sinc(double x) {
    if (x == 0.0) return 1.0;
    const double pi_x = 3.14159265358979323846 * x;
    return sin(pi_x) / pi_x;
}

__device__ double lanczos(double x, int a) {
    if (x == 0.0) return 1.0;
    if (x > -a && x < a) return sinc(x) * sinc(x / a);
    return 0.0;
}

template <typename T>
__device__ void lanczos_resample(
    const T* __restrict__ input,
    T* __restrict__ output,
    unsigned char* __restrict__ degenerate,
    const int width_in,
    const int height_in,
    const int width_out,
    const int height_out,
    const int channels,
    const int a,
    const double x_ratio,
    const double y_ratio
) {
    const int x_out = blockIdx.x * blockDim.x + threadIdx.x;
    const int y_out = blockIdx.y * blockDim.y + threadIdx.y;

    if (x_out >= width_out || y_out >= height_out) return;

    // Pixel-center source position
    const double x_l = (x_out + 0.5) * x_ratio - 0.5;
    const double y_l = (y_out + 0.5) * y_ratio - 0.5;
    const int x_i = (int)floor(x_l);
    const int y_i = (int)floor(y_l);

    const int idx = y_out * width_out + x_out;
    const int out_pos = idx * channels;

    for (int c = 0; c < channels; ++c) {
        double result = 0.0;
        double normalizer = 0.0;

        for (int m = -a + 1; m <= a; ++m) {
            const int cur_x = max(0, min(x_i + m, width_in - 1));
            const double wx = lanczos(x_l - cur_x, a);
            for (int n = -a + 1; n <= a; ++n) {
                const int cur_y = max(0, min(y_i + n, height_in - 1));
                const double weight = wx * lanczos(y_l - cur_y, a);
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

extern "C" __global__ void lanczos_kernel(
    const unsigned char* __restrict__ input,
    unsigned char* __restrict__ output,
    unsigned char* __restrict__ degenerate,
    const int width_in,
    const int height_in,
    const int width_out,
    const int height_out,
    const int channels,
    const int a,
    const double x_ratio,
    const double y_ratio
) {
    lanczos_resample(input, output, degenerate, width_in, height_in, width_out, height_out, channels, a, x_ratio, y_ratio);
}

extern "C" __global__ void lanczos_float_kernel(
    const float* __restrict__ input,
    float* __restrict__ output,
    unsigned char* __restrict__ degenerate,
    const int width_in,
    const int height_in,
    const int width_out,
    const int height_out,
    const int channels,
    const int a,
    const double x_ratio,
    const double y_ratio
) {
    lanczos_resample(input, output, degenerate, width_in, height_in, width_out, height_out, channels, a, x_ratio, y_ratio);
}
"""

lanczos_kernel = cp.RawKernel(store_sample_code + lanczos_kernel_code, "lanczos_kernel")
lanczos_float_kernel = cp.RawKernel(store_sample_code + lanczos_kernel_code, "lanczos_float_kernel")
