from __future__ import annotations
import os
from typing import Any

import torch

from .errors import MissingCudaError


def get_device(name: str | None = None, strict_gpu: bool = False) -> torch.device:
    """Résout le device de calcul.

    `name` vaut "cpu", "cuda" ou "auto" (None = valeur de GR_DEVICE, sinon "cpu").
    """
    if name is None:
        name = os.getenv("GR_DEVICE", "cpu")
    name = name.strip().lower()
    if name == "cpu":
        return torch.device("cpu")
    if name == "auto":
        return torch.device("cuda") if torch.cuda.is_available() else torch.device("cpu")
    if name.startswith("cuda"):
        if torch.cuda.is_available():
            return torch.device(name)
        if strict_gpu:
            raise MissingCudaError("Manque: GPU CUDA")
        return torch.device("cpu")
    raise ValueError(f"Device inconnu: {name!r}")


def cuda_info() -> dict[str, Any]:
    available = torch.cuda.is_available()
    return {
        "cuda_available": available,
        "device_count": torch.cuda.device_count() if available else 0,
        "name": torch.cuda.get_device_name(0) if available else None,
    }
