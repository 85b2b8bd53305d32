from __future__ import annotations
import os
from pathlib import Path

from grproc.api import FilterParams

def atomic_write(path: Path | str, data: bytes) -> None:
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.parent.mkdir(parents=True, exist_ok=True)
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    os.replace(tmp, path)

def ripple_name(stem: str, params: FilterParams) -> str:
    return (f"{stem}_gothic-ripple__{params.pattern.value}"
            f"__i{params.intensity}__f{params.frequency:g}.png")

def detect_gpu() -> dict:
    from grcore.device import cuda_info
    return cuda_info()
