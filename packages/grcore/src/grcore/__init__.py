from __future__ import annotations

from .errors import (
    GRError,
    InvalidBufferError,
    InvalidDimensionsError,
    InvalidParamsError,
    UnknownPatternError,
    MissingCudaError,
)
from .device import get_device, cuda_info

__all__ = [
    "GRError", "InvalidBufferError", "InvalidDimensionsError",
    "InvalidParamsError", "UnknownPatternError", "MissingCudaError",
    "get_device", "cuda_info",
]
