class PixscaleError(Exception):
    """Base class for every error raised by pixscale."""


class InvalidArgumentError(PixscaleError, ValueError):
    """Raised for non-positive scales, zero-sized dimensions or mismatched buffers."""


class NumericDegenerateError(InvalidArgumentError):
    """Raised when a resampling ratio or a weight normalizer would divide by zero."""


class UnsupportedMethodError(PixscaleError, ValueError):
    """Raised when the dispatcher receives a method outside the supported set."""


class DeviceError(PixscaleError, RuntimeError):
    """Raised when the CUDA path cannot allocate, compile or launch."""
