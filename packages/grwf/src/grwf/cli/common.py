from __future__ import annotations
import json, logging, sys
from pathlib import Path
from typing import Any, Iterable, Optional

from grdata.api import IMG_EXTS, scan_images

def setup_logging(log_file: Optional[Path], verbose: bool = True) -> None:
    log_fmt = "[%(asctime)s] %(levelname)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    level = logging.DEBUG if verbose else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=log_fmt, datefmt=datefmt, handlers=handlers, force=True)

def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)

def collect_inputs(items: Iterable[str | Path]) -> list[Path]:
    """Fichiers tels quels, dossiers scannés récursivement ; dédoublonné, ordre stable."""
    seen: set[Path] = set()
    out: list[Path] = []
    for it in items:
        p = Path(it)
        if p.is_dir():
            found = scan_images(p)
        elif p.is_file() and p.suffix.lower() in IMG_EXTS:
            found = [p]
        else:
            logging.warning("Entrée ignorée (ni image ni dossier): %s", p)
            found = []
        for f in found:
            key = f.resolve()
            if key not in seen:
                seen.add(key)
                out.append(f)
    return out

def looks_like_png(p: Path) -> bool:
    try:
        with open(p, "rb") as f:
            return f.read(8) == b"\x89PNG\r\n\x1a\n"
    except OSError:
        return False

def read_json_config(path: Optional[str]) -> dict[str, Any]:
    if not path:
        return {}
    return json.loads(Path(path).read_text(encoding="utf-8"))
