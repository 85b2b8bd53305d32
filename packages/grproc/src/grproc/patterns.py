from __future__ import annotations

import enum
import torch

from grcore.errors import UnknownPatternError

__all__ = ["WavePattern", "gothic", "organic", "flame", "thorns"]


class WavePattern(enum.Enum):
    GOTHIC = "gothic"
    ORGANIC = "organic"
    FLAME = "flame"
    THORNS = "thorns"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def default(cls) -> "WavePattern":
        return cls.GOTHIC

    @classmethod
    def parse(cls, value) -> "WavePattern":
        """Enum, valeur ("gothic") ou libellé ("Gothic Waves"), casse ignorée."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for p in cls:
                if key == p.value or key == p.label.lower():
                    return p
        raise UnknownPatternError(
            f"Motif inconnu: {value!r} (attendu: {', '.join(p.value for p in cls)})"
        )


_LABELS = {
    WavePattern.GOTHIC: "Gothic Waves",
    WavePattern.ORGANIC: "Organic Flow",
    WavePattern.FLAME: "Flame Pattern",
    WavePattern.THORNS: "Thorny Edges",
}


# ---------------------------------------------------------------------
# Générateurs d'onde : (xx, yy) en pixels, f en rad/pixel.
# L'ordre des produits (x*f*k) est celui de la formule de référence, à
# garder tel quel pour rester bit-exact en float64.
# ---------------------------------------------------------------------

@torch.no_grad()
def gothic(xx: torch.Tensor, yy: torch.Tensor, f: float) -> torch.Tensor:
    return (torch.sin(xx * f) * torch.cos(yy * f * 1.3)
            + torch.sin(yy * f * 0.7) * torch.cos(xx * f * 0.8))


@torch.no_grad()
def organic(xx: torch.Tensor, yy: torch.Tensor, f: float) -> torch.Tensor:
    return (torch.sin(xx * f * 1.2) + torch.cos(yy * f * 0.9)
            + torch.sin((xx + yy) * f * 0.5))


@torch.no_grad()
def flame(xx: torch.Tensor, yy: torch.Tensor, f: float) -> torch.Tensor:
    return (torch.sin(xx * f) * torch.sin(yy * f * 2)
            + torch.cos(xx * f * 0.3) * torch.sin(yy * f * 1.5))


@torch.no_grad()
def thorns(xx: torch.Tensor, yy: torch.Tensor, f: float) -> torch.Tensor:
    return (torch.abs(torch.sin(xx * f * 3)) * torch.cos(yy * f)
            + torch.abs(torch.cos(yy * f * 2)) * torch.sin(xx * f))
