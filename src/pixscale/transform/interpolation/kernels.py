import math

from numba import njit


@njit(cache=True)
def sinc(x: float) -> float:
    """Normalized sinc, ``sin(pi x) / (pi x)`` with ``sinc(0) == 1``."""
    if x == 0.0:
        return 1.0
    pi_x = math.pi * x
    return math.sin(pi_x) / pi_x


@njit(cache=True)
def lanczos(x: float, a: int) -> float:
    """
    Lanczos windowed sinc with ``a`` lobes.

    Compact support on the open interval ``(-a, a)``; exactly 1 at the origin.
    """
    if x == 0.0:
        return 1.0
    if x > -a and x < a:
        return sinc(x) * sinc(x / a)
    return 0.0


@njit(cache=True)
def cubic(x: float) -> float:
    """
    Catmull-Rom cubic convolution kernel (coefficient -0.5).

    Compact support on ``(-2, 2)``.
    """
    x = abs(x)
    if x <= 1.0:
        return (1.5 * x - 2.5) * x * x + 1.0
    elif x < 2.0:
        return ((-0.5 * x + 2.5) * x - 4.0) * x + 2.0
    return 0.0
