# packages/grproc/src/grproc/__init__.py
from __future__ import annotations

"""Cœur du filtre "ripple" : motifs d'onde, paramètres et application."""

from .patterns import WavePattern
from .api import FilterParams, ParamSpec, PatternInfo, PixelBuffer
from .registry import get, list_patterns, register
from .params import ParamCodec, UI_PARAM_SPECS
from .config import RippleConfig
from .ripple import apply_ripple, ripple_mask, border_zone, edge_distance

__all__ = [
    "WavePattern", "FilterParams", "ParamSpec", "PatternInfo", "PixelBuffer",
    "get", "list_patterns", "register",
    "ParamCodec", "UI_PARAM_SPECS", "RippleConfig",
    "apply_ripple", "ripple_mask", "border_zone", "edge_distance",
]
