"""Gothic Ripple - unified API
Install once, import one namespace:

    pip install -e .

Usage:

    import gothicripple as gr
    img = gr.load_rgba("photo.jpg")
    out = gr.apply_ripple(img, gr.FilterParams(20, 0.02, gr.WavePattern.GOTHIC))
    open("photo_ripple.png", "wb").write(gr.encode_png(out))

Or detailed modules:

    from gothicripple import core, proc, data, viz, wf
"""

__version__ = "1.0.0"

# Sous-paquets du monorepo (packages/*/src)
import grcore as core
import grproc as proc
import grdata as data
import grviz as viz
import grwf as wf

from grcore import (
    GRError, InvalidBufferError, InvalidDimensionsError,
    InvalidParamsError, UnknownPatternError, get_device,
)
from grproc import (
    WavePattern, FilterParams, ParamCodec, RippleConfig,
    apply_ripple, ripple_mask, border_zone, edge_distance, list_patterns,
)
from grdata import load_rgba, from_pil, to_pil, encode_png, scan_images
from grviz import side_by_side, pattern_sheet
from grwf import atomic_write, ripple_name

__all__ = [
    # sub-namespaces
    "core", "proc", "data", "viz", "wf",
    # errors
    "GRError", "InvalidBufferError", "InvalidDimensionsError",
    "InvalidParamsError", "UnknownPatternError",
    # convenience
    "get_device",
    "WavePattern", "FilterParams", "ParamCodec", "RippleConfig",
    "apply_ripple", "ripple_mask", "border_zone", "edge_distance", "list_patterns",
    "load_rgba", "from_pil", "to_pil", "encode_png", "scan_images",
    "side_by_side", "pattern_sheet",
    "atomic_write", "ripple_name",
    "__version__",
]
