# packages/grwf/src/grwf/__init__.py
from __future__ import annotations

from .api import atomic_write, ripple_name, detect_gpu

__all__ = [
    "atomic_write",
    "ripple_name",
    "detect_gpu",
    # pas d'import du sous-module cli ici (argparse/logging au top-level)
]

__version__ = "1.0.0"
