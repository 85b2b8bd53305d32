from __future__ import annotations
from PIL import Image

from grdata.api import to_pil
from grproc import FilterParams, WavePattern, apply_ripple

def side_by_side(original, processed, *, gap: int = 8) -> Image.Image:
    """Original à gauche, résultat à droite, fond transparent."""
    a, b = to_pil(original), to_pil(processed)
    W = a.width + gap + b.width
    H = max(a.height, b.height)
    canvas = Image.new("RGBA", (W, H), (0, 0, 0, 0))
    canvas.paste(a, (0, 0))
    canvas.paste(b, (a.width + gap, 0))
    return canvas

def pattern_sheet(source, intensity: int, frequency: float, *, cols: int = 2, gap: int = 8) -> Image.Image:
    """Une vignette par motif (ordre de l'enum), même intensité/fréquence."""
    tiles = [to_pil(apply_ripple(source, FilterParams(intensity, frequency, p)))
             for p in WavePattern]
    W, H = tiles[0].size
    rows = (len(tiles) + cols - 1) // cols
    canvas = Image.new("RGBA", (cols * W + (cols - 1) * gap, rows * H + (rows - 1) * gap), (0, 0, 0, 0))
    for i, t in enumerate(tiles):
        r, c = divmod(i, cols)
        canvas.paste(t, (c * (W + gap), r * (H + gap)))
    return canvas
