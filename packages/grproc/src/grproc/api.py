from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Any, Protocol, Union

import numpy as np
import torch

from .patterns import WavePattern
from grcore.errors import InvalidParamsError

ParamDict = dict[str, Any]

# RGBA uint8 [H, W, 4] ; numpy accepté en entrée, rendu dans le même type.
PixelBuffer = Union[torch.Tensor, np.ndarray]

@dataclass(frozen=True)
class ParamSpec:
    name: str
    type: str
    range: tuple[float, float] | None = None
    enum: tuple[Any, ...] | None = None
    units: str | None = None
    step: float | None = None
    default: Any = None

@dataclass(frozen=True)
class PatternInfo:
    name: str
    label: str
    default: bool = False

class WaveFn(Protocol):
    def __call__(self, xx: torch.Tensor, yy: torch.Tensor, f: float) -> torch.Tensor: ...

@dataclass(frozen=True)
class FilterParams:
    """Paramètres d'une invocation du filtre.

    intensity : int >= 1
        Largeur de référence de la bordure, en pixels. La zone d'ondulation
        couvre les pixels à moins de 2*intensity d'un bord.
    frequency : float > 0
        Fréquence de l'onde, en radians par pixel.
    pattern : WavePattern
        Générateur d'onde. Une chaîne est acceptée si elle désigne un motif
        connu ; sinon `UnknownPatternError`.
    """
    intensity: int
    frequency: float
    pattern: WavePattern = WavePattern.GOTHIC

    def __post_init__(self) -> None:
        if isinstance(self.intensity, bool) or not isinstance(self.intensity, (int, np.integer)):
            raise InvalidParamsError(f"intensity must be an integer, got {self.intensity!r}")
        if self.intensity < 1:
            raise InvalidParamsError(f"intensity must be >= 1, got {self.intensity}")
        try:
            f = float(self.frequency)
        except (TypeError, ValueError) as exc:
            raise InvalidParamsError(f"frequency must be a real number, got {self.frequency!r}") from exc
        if not math.isfinite(f) or f <= 0.0:
            raise InvalidParamsError(f"frequency must be finite and > 0, got {self.frequency!r}")
        object.__setattr__(self, "intensity", int(self.intensity))
        object.__setattr__(self, "frequency", f)
        object.__setattr__(self, "pattern", WavePattern.parse(self.pattern))
