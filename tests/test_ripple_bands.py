import pytest
import torch

from grproc import FilterParams, WavePattern, apply_ripple
from grcore.device import get_device
from grcore.errors import InvalidParamsError, MissingCudaError


def _img(h, w):
    g = torch.Generator().manual_seed(42)
    return torch.randint(0, 256, (h, w, 4), generator=g, dtype=torch.uint8)


@pytest.mark.parametrize("band_rows,workers", [(1, 1), (7, 1), (7, 4), (16, 3), (500, 2)])
def test_bands_equal_whole_image(band_rows, workers):
    src = _img(53, 47)
    p = FilterParams(9, 0.041, WavePattern.ORGANIC)
    whole = apply_ripple(src, p)
    banded = apply_ripple(src, p, band_rows=band_rows, workers=workers)
    assert torch.equal(whole, banded)


@pytest.mark.parametrize("kwargs", [dict(band_rows=0), dict(band_rows=-2), dict(workers=0)])
def test_band_arguments_validated(kwargs):
    with pytest.raises(InvalidParamsError):
        apply_ripple(_img(4, 4), FilterParams(2, 0.02), **kwargs)


def test_get_device(monkeypatch):
    monkeypatch.delenv("GR_DEVICE", raising=False)
    assert get_device().type == "cpu"
    assert get_device("CPU").type == "cpu"
    assert get_device("auto").type in ("cpu", "cuda")
    monkeypatch.setenv("GR_DEVICE", "auto")
    assert get_device().type in ("cpu", "cuda")
    with pytest.raises(ValueError):
        get_device("tpu")


@pytest.mark.skipif(torch.cuda.is_available(), reason="CUDA présent")
def test_cuda_requested_without_gpu():
    assert get_device("cuda").type == "cpu"
    with pytest.raises(MissingCudaError):
        get_device("cuda", strict_gpu=True)


def test_explicit_device_cpu():
    src = _img(12, 12)
    p = FilterParams(3, 0.02, WavePattern.THORNS)
    assert torch.equal(apply_ripple(src, p, device="cpu"), apply_ripple(src, p))
