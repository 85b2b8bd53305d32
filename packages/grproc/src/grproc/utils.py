from __future__ import annotations
import torch


def pixel_grid(h: int, w: int, *, row0: int = 0, device=None, dtype=None):
    """Grilles de coordonnées pixel (x, y) entières, pour les lignes [row0, row0+h).

    Contrairement aux grilles [-1,1] des générateurs de texture, le filtre
    travaille en unités pixel : x = colonne, y = ligne absolue dans l'image.
    """
    if device is None:
        device = torch.device("cpu")
    if dtype is None:
        dtype = torch.float64
    yy, xx = torch.meshgrid(
        torch.arange(row0, row0 + h, device=device, dtype=dtype),
        torch.arange(0, w, device=device, dtype=dtype),
        indexing="ij",
    )
    return xx, yy
