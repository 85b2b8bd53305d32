from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import torch

from .api import FilterParams, PixelBuffer
from .registry import get
from .utils import pixel_grid
from grcore.errors import InvalidBufferError, InvalidDimensionsError, InvalidParamsError

__all__ = ["edge_distance", "border_zone", "ripple_mask", "apply_ripple"]

log = logging.getLogger("gr.proc.ripple")

# Constantes du découpage (valeurs de référence, à ne pas "corriger")
OFFSET_GAIN = 0.3
CUTOFF_RATIO = 0.8
ZONE_FACTOR = 2


def edge_distance(h: int, w: int, *, row0: int = 0, rows: int | None = None,
                  device=None, dtype=torch.float64) -> torch.Tensor:
    """min(x, w - x, y, h - y) pour chaque pixel -> [rows, w].

    Distance asymétrique : le dernier pixel d'une ligne (x = w-1) est à 1, pas 0.
    `row0`/`rows` restreignent le calcul à une bande de lignes.
    """
    rows = h - row0 if rows is None else rows
    xx, yy = pixel_grid(rows, w, row0=row0, device=device, dtype=dtype)
    return _dist(xx, yy, h, w)


def _dist(xx: torch.Tensor, yy: torch.Tensor, h: int, w: int) -> torch.Tensor:
    return torch.minimum(torch.minimum(xx, w - xx), torch.minimum(yy, h - yy))


def border_zone(h: int, w: int, intensity: int, *, device=None) -> torch.Tensor:
    """Pixels soumis à l'ondulation (distance < 2*intensity)."""
    return edge_distance(h, w, device=device) < ZONE_FACTOR * intensity


@torch.no_grad()
def _band_mask(h: int, w: int, params: FilterParams, row0: int, rows: int, device) -> torch.Tensor:
    xx, yy = pixel_grid(rows, w, row0=row0, device=device, dtype=torch.float64)
    dist = _dist(xx, yy, h, w)
    interior = dist >= ZONE_FACTOR * params.intensity

    wave = get(params.pattern)(xx, yy, params.frequency)
    offset = wave * (params.intensity - dist) * OFFSET_GAIN
    cutoff = dist + offset
    return interior | ~(cutoff < params.intensity * CUTOFF_RATIO)


def _check_params(params: FilterParams) -> None:
    if not isinstance(params, FilterParams):
        raise InvalidParamsError(f"expected FilterParams, got {type(params).__name__}")


def ripple_mask(h: int, w: int, params: FilterParams, *, device=None) -> torch.Tensor:
    """Masque de conservation [h, w] (True = pixel gardé)."""
    _check_params(params)
    if h <= 0 or w <= 0:
        raise InvalidDimensionsError(f"width/height must be > 0, got {w}x{h}")
    return _band_mask(h, w, params, 0, h, device or torch.device("cpu"))


def _as_tensor(source: PixelBuffer) -> tuple[torch.Tensor, bool]:
    if isinstance(source, np.ndarray):
        if source.dtype != np.uint8:
            raise InvalidBufferError(f"expected uint8 pixels, got {source.dtype}")
        arr = np.ascontiguousarray(source)
        if not arr.flags.writeable:
            arr = arr.copy()
        return torch.from_numpy(arr), True
    if not isinstance(source, torch.Tensor):
        raise InvalidBufferError(f"expected torch.Tensor or numpy.ndarray, got {type(source).__name__}")
    if source.dtype != torch.uint8:
        raise InvalidBufferError(f"expected uint8 pixels, got {source.dtype}")
    return source, False


@torch.no_grad()
def apply_ripple(
    source: PixelBuffer,
    params: FilterParams,
    *,
    device=None,
    band_rows: int | None = None,
    workers: int = 1,
) -> PixelBuffer:
    """Applique le filtre "ripple" de bordure à un buffer RGBA [H, W, 4] uint8.

    Retourne un nouveau buffer de mêmes dimensions : chaque pixel y est soit
    la copie exacte du pixel source (alpha compris), soit (0, 0, 0, 0).
    La source n'est jamais modifiée. Une entrée numpy donne une sortie numpy.

    band_rows : traite l'image par bandes de `band_rows` lignes (mémoire bornée).
    workers   : nombre de threads pour les bandes ; chaque bande écrit dans une
                tranche disjointe de la sortie.
    """
    _check_params(params)
    src, from_numpy = _as_tensor(source)
    if src.ndim != 3 or src.shape[-1] != 4:
        raise InvalidBufferError(f"expected RGBA [H, W, 4], got shape {tuple(src.shape)}")
    h, w = int(src.shape[0]), int(src.shape[1])
    if h <= 0 or w <= 0:
        raise InvalidDimensionsError(f"width/height must be > 0, got {w}x{h}")
    if band_rows is not None and band_rows <= 0:
        raise InvalidParamsError(f"band_rows must be > 0, got {band_rows}")
    if workers < 1:
        raise InvalidParamsError(f"workers must be >= 1, got {workers}")

    if device is None:
        device = src.device
    src = src.to(device)
    out = torch.zeros_like(src)

    step = h if band_rows is None else min(band_rows, h)
    bands = [(r0, min(step, h - r0)) for r0 in range(0, h, step)]
    log.debug("ripple %dx%d intensity=%d frequency=%g pattern=%s bands=%d workers=%d device=%s",
              w, h, params.intensity, params.frequency, params.pattern.value,
              len(bands), workers, device)

    def _run(band: tuple[int, int]) -> None:
        r0, n = band
        keep = _band_mask(h, w, params, r0, n, device)
        sl = src[r0:r0 + n]
        out[r0:r0 + n] = torch.where(keep.unsqueeze(-1), sl, torch.zeros_like(sl))

    if workers > 1 and len(bands) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            # list() pour propager la première exception d'une bande
            list(pool.map(_run, bands))
    else:
        for band in bands:
            _run(band)

    if from_numpy:
        return out.cpu().numpy()
    return out
