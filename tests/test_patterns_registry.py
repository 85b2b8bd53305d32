import math

import pytest
import torch

from grproc import WavePattern, get, list_patterns, register
from grproc.patterns import gothic, organic, flame, thorns
from grcore.errors import UnknownPatternError

POINTS = [(0, 0), (3, 7), (120, 45), (511, 1023)]


@pytest.mark.parametrize("fn,ref", [
    (gothic, lambda x, y, f: math.sin(x * f) * math.cos(y * f * 1.3) + math.sin(y * f * 0.7) * math.cos(x * f * 0.8)),
    (organic, lambda x, y, f: math.sin(x * f * 1.2) + math.cos(y * f * 0.9) + math.sin((x + y) * f * 0.5)),
    (flame, lambda x, y, f: math.sin(x * f) * math.sin(y * f * 2) + math.cos(x * f * 0.3) * math.sin(y * f * 1.5)),
    (thorns, lambda x, y, f: abs(math.sin(x * f * 3)) * math.cos(y * f) + abs(math.cos(y * f * 2)) * math.sin(x * f)),
])
def test_wave_formulas(fn, ref):
    f = 0.023
    xx = torch.tensor([float(x) for x, _ in POINTS], dtype=torch.float64)
    yy = torch.tensor([float(y) for _, y in POINTS], dtype=torch.float64)
    got = fn(xx, yy, f)
    want = torch.tensor([ref(x, y, f) for x, y in POINTS], dtype=torch.float64)
    assert torch.allclose(got, want, rtol=0, atol=1e-12)
    assert (got.abs() <= 3.0).all()


@pytest.mark.parametrize("value,expected", [
    ("gothic", WavePattern.GOTHIC),
    ("  ORGANIC ", WavePattern.ORGANIC),
    ("Flame Pattern", WavePattern.FLAME),
    ("thorny edges", WavePattern.THORNS),
    (WavePattern.THORNS, WavePattern.THORNS),
])
def test_parse(value, expected):
    assert WavePattern.parse(value) is expected


@pytest.mark.parametrize("value", ["", "gothic waves!", "spiral", 0, None])
def test_parse_rejects_unknown(value):
    with pytest.raises(UnknownPatternError):
        WavePattern.parse(value)


def test_list_patterns():
    infos = list_patterns()
    assert [i.name for i in infos] == ["gothic", "organic", "flame", "thorns"]
    assert [i.name for i in infos if i.default] == ["gothic"]
    assert infos[1].label == "Organic Flow"


def test_registry_get_and_override():
    assert get("gothic") is gothic
    assert get(WavePattern.FLAME) is flame
    try:
        register(WavePattern.FLAME, lambda xx, yy, f: torch.zeros_like(xx))
        xx = torch.ones(2, dtype=torch.float64)
        assert get("flame")(xx, xx, 0.1).abs().sum() == 0
    finally:
        register(WavePattern.FLAME, flame)
    assert get("flame") is flame
    with pytest.raises(UnknownPatternError):
        get("nope")
