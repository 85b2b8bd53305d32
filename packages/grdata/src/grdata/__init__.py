from __future__ import annotations

from .api import scan_images, load_rgba, from_pil, to_pil, encode_png, IMG_EXTS

__all__ = ["scan_images", "load_rgba", "from_pil", "to_pil", "encode_png", "IMG_EXTS"]
