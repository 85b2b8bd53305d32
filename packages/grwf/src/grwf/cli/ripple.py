from __future__ import annotations
import argparse, logging, sys
from pathlib import Path
from typing import Any, Dict

from .common import setup_logging, ensure_dir, collect_inputs, looks_like_png, read_json_config
from grcore.device import get_device
from grcore.errors import GRError
from grdata.api import load_rgba, encode_png
from grproc import RippleConfig, apply_ripple
from grwf.api import atomic_write, ripple_name, detect_gpu

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Gothic Ripple : bordure ondulée/transparente sur des images (PNG RGBA)")
    p.add_argument("images", nargs="+", help="Fichiers images et/ou dossiers")
    p.add_argument("--out", required=True, help="Dossier de sortie")
    p.add_argument("--config", default=None, help="(Optionnel) JSON cfg (intensity/frequency/pattern/device/...)")
    p.add_argument("--intensity", type=int, help="Largeur de bordure en px (5..50)")
    p.add_argument("--frequency", type=float, help="Fréquence en rad/px (0.005..0.05)")
    p.add_argument("--pattern", help="gothic | organic | flame | thorns")
    p.add_argument("--device", help="cpu | cuda | auto")
    p.add_argument("--band-rows", type=int, help="Traitement par bandes de N lignes")
    p.add_argument("--workers", type=int, help="Threads pour les bandes")
    p.add_argument("--preview", action="store_true", help="Écrit aussi <stem>_preview.png (original | résultat)")
    p.add_argument("--sheet", action="store_true", help="Écrit aussi <stem>_patterns.png (les 4 motifs)")
    p.add_argument("--resume", action="store_true", help="Skip si sortie existe et valide")
    p.add_argument("--log-file", default=None)
    p.add_argument("--verbose", action="store_true")
    return p.parse_args(argv)

def _merge_cfg(args) -> Dict[str, Any]:
    cfg = read_json_config(args.config)
    if args.intensity is not None: cfg["intensity"] = args.intensity
    if args.frequency is not None: cfg["frequency"] = args.frequency
    if args.pattern is not None: cfg["pattern"] = args.pattern
    if args.device is not None: cfg["device"] = args.device
    if args.band_rows is not None: cfg["band_rows"] = args.band_rows
    if args.workers is not None: cfg["workers"] = args.workers
    return cfg

def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(Path(args.log_file) if args.log_file else None, verbose=args.verbose)

    try:
        cfg = RippleConfig.from_dict(_merge_cfg(args))
        params = cfg.filter_params()
        device = get_device(cfg.device, strict_gpu=cfg.device.startswith("cuda"))
    except (GRError, ValueError, TypeError, OSError) as e:
        logging.error("Configuration invalide: %s", e)
        return 2
    logging.info("params: intensity=%d frequency=%g pattern=%s device=%s",
                 params.intensity, params.frequency, params.pattern.value, device)
    if device.type == "cuda":
        logging.debug("gpu: %s", detect_gpu())

    imgs = collect_inputs(args.images)
    if not imgs:
        logging.error("Aucune image trouvée dans %s", ", ".join(args.images))
        return 2
    out_dir = Path(args.out); ensure_dir(out_dir)

    ok = 0
    for i, path in enumerate(imgs, 1):
        out_png = out_dir / ripple_name(path.stem, params)
        if args.resume and out_png.exists() and looks_like_png(out_png):
            logging.info("[%d/%d] skip: %s", i, len(imgs), out_png)
            ok += 1; continue
        try:
            logging.info("[%d/%d] ripple: %s", i, len(imgs), path)
            src = load_rgba(path, device=device)
            res = apply_ripple(src, params, band_rows=cfg.band_rows, workers=cfg.workers)
            atomic_write(out_png, encode_png(res))
            if args.preview:
                from grviz import side_by_side
                atomic_write(out_dir / f"{path.stem}_preview.png", encode_png(side_by_side(src, res)))
            if args.sheet:
                from grviz import pattern_sheet
                sheet = pattern_sheet(src, params.intensity, params.frequency)
                atomic_write(out_dir / f"{path.stem}_patterns.png", encode_png(sheet))
            visible = int((res[..., 3] > 0).sum())
            logging.info("→ OK %dx%d (%d px visibles) → %s", src.shape[1], src.shape[0], visible, out_png)
            ok += 1
        except Exception as e:
            logging.exception("Échec ripple %s: %s", path, e)

    logging.info("Terminé: %d/%d images", ok, len(imgs))
    return 0 if ok == len(imgs) else 1

if __name__ == "__main__":
    sys.exit(main())
