from __future__ import annotations
import io
from pathlib import Path

import numpy as np
import torch
from PIL import Image

IMG_EXTS = {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tif", ".tiff", ".webp"}

def scan_images(root: str | Path) -> list[Path]:
    root = Path(root)
    return sorted(p for p in root.rglob("*") if p.is_file() and p.suffix.lower() in IMG_EXTS)

def from_pil(img: Image.Image, *, device=None) -> torch.Tensor:
    """PIL (tout mode) -> RGBA uint8 [H, W, 4]."""
    arr = np.array(img.convert("RGBA"), dtype=np.uint8)
    t = torch.from_numpy(arr)
    if device is not None:
        t = t.to(device)
    return t

def load_rgba(path: str | Path, *, device=None) -> torch.Tensor:
    # GIF animé : seule la première frame est décodée
    with Image.open(path) as img:
        return from_pil(img, device=device)

def to_pil(rgba) -> Image.Image:
    if isinstance(rgba, torch.Tensor):
        arr = rgba.detach().cpu().numpy()
    else:
        arr = np.asarray(rgba)
    if arr.ndim != 3 or arr.shape[-1] != 4 or arr.dtype != np.uint8:
        raise ValueError(f"expected RGBA uint8 [H, W, 4], got {arr.shape} {arr.dtype}")
    return Image.fromarray(arr)

def encode_png(rgba) -> bytes:
    img = rgba if isinstance(rgba, Image.Image) else to_pil(rgba)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
