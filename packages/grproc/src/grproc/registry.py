from __future__ import annotations
from .api import PatternInfo, WaveFn
from .patterns import WavePattern, gothic, organic, flame, thorns
from grcore.errors import UnknownPatternError

_REG: dict[WavePattern, WaveFn] = {}

def register(pattern: WavePattern, fn: WaveFn) -> None:
    _REG[WavePattern.parse(pattern)] = fn

def get(pattern) -> WaveFn:
    p = WavePattern.parse(pattern)
    try:
        return _REG[p]
    except KeyError as exc:
        raise UnknownPatternError(f"Motif non enregistré: {p.value}") from exc

def list_patterns() -> list[PatternInfo]:
    return [PatternInfo(name=p.value, label=p.label, default=p is WavePattern.default())
            for p in WavePattern if p in _REG]

def register_all() -> list[str]:
    for p, fn in ((WavePattern.GOTHIC, gothic), (WavePattern.ORGANIC, organic),
                  (WavePattern.FLAME, flame), (WavePattern.THORNS, thorns)):
        register(p, fn)
    return [p.value for p in _REG]

register_all()
