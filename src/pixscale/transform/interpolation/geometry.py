from numba import njit

from ...errors import NumericDegenerateError


@njit(cache=True)
def clamp_index(i: int, size: int) -> int:
    """Clamp-to-edge: replace an out-of-range coordinate with the nearest valid one."""
    return min(max(i, 0), size - 1)


@njit(cache=True)
def center_source(out: int, ratio: float) -> float:
    """Pixel-center mapping, ``(out + 0.5) * in / out - 0.5``."""
    return (out + 0.5) * ratio - 0.5


@njit(cache=True)
def edge_source(out: int, ratio: float) -> float:
    """Edge-to-edge mapping, ``out * (in - 1) / (out - 1)``."""
    return out * ratio


@njit(cache=True)
def to_sample(value: float) -> int:
    """Clamp to ``[0, 255]`` and truncate to an 8-bit sample."""
    value = min(max(value, 0.0), 255.0)
    return int(value)


def center_ratio(input_size: int, output_size: int) -> float:
    return input_size / output_size


def edge_ratio(input_size: int, output_size: int) -> float:
    """
    Ratio for the edge-to-edge mapping.

    A single output sample has no edge-to-edge span. It maps to the single input
    sample when there is one and is rejected otherwise.

    Raises
    ------
    NumericDegenerateError
        If ``output_size == 1`` while ``input_size > 1``.
    """
    if output_size == 1:
        if input_size == 1:
            return 0.0
        raise NumericDegenerateError(
            f"Edge-to-edge mapping of {input_size} samples onto a single sample is undefined"
        )
    return (input_size - 1) / (output_size - 1)
