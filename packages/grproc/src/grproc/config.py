# packages/grproc/src/grproc/config.py
from __future__ import annotations
import json
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .api import FilterParams
from .params import ParamCodec

__all__ = ["RippleConfig"]


def _is_int(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


@dataclass(frozen=True, slots=True)
class RippleConfig:
    """
    Configuration d'un run du filtre (CLI / scripts).

    Champs
    ------
    intensity : int, default=20
        Valeur "UI", ramenée dans [5, 50] par `ParamCodec.clamp`.
    frequency : float, default=0.02
        Valeur "UI", ramenée dans [0.005, 0.05].
    pattern : str, default="gothic"
        Nom ou libellé du motif ; un motif inconnu lève `UnknownPatternError`
        au moment de `filter_params()`.
    device : str, default="cpu"
        "cpu", "cuda" ou "auto". Si absent (JSON et CLI), pris dans l'ENV `GR_DEVICE`.
    band_rows : int | None, default=None
        Taille des bandes de lignes (None = image entière).
    workers : int, default=1
        Threads pour l'évaluation par bandes.
    """

    intensity: int = 20
    frequency: float = 0.02
    pattern: str = "gothic"
    device: str = "cpu"
    band_rows: int | None = None
    workers: int = 1

    def __post_init__(self) -> None:
        if self.band_rows is not None:
            if not _is_int(self.band_rows) or self.band_rows <= 0:
                raise ValueError(f"RippleConfig.band_rows must be an int > 0 or None, got {self.band_rows!r}")
        if not _is_int(self.workers) or self.workers < 1:
            raise ValueError(f"RippleConfig.workers must be an int >= 1, got {self.workers!r}")
        if not isinstance(self.device, str) or not self.device:
            raise ValueError("RippleConfig.device must be a non-empty string")

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "RippleConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"RippleConfig: unknown key(s) {sorted(unknown)}")
        d = dict(d)
        # GR_DEVICE ne complète que si ni le JSON ni la CLI n'ont fixé le device
        env_dev = os.getenv("GR_DEVICE")
        if env_dev and d.get("device") is None:
            d["device"] = env_dev
        return cls(**d)

    @classmethod
    def from_json(cls, path: str | Path) -> "RippleConfig":
        return cls.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))

    def filter_params(self) -> FilterParams:
        return ParamCodec().to_filter_params(
            {"intensity": self.intensity, "frequency": self.frequency, "pattern": self.pattern}
        )
