from __future__ import annotations

from .api import side_by_side, pattern_sheet

__all__ = ["side_by_side", "pattern_sheet"]
