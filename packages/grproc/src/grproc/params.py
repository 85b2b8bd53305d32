from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .api import FilterParams, ParamSpec, ParamDict
from .patterns import WavePattern
from grcore.errors import InvalidParamsError, UnknownPatternError

log = logging.getLogger("gr.proc.params")

# Bornes côté interface : le cœur accepte plus large (intensity >= 1, frequency > 0).
UI_PARAM_SPECS: tuple[ParamSpec, ...] = (
    ParamSpec("intensity", "int", (5, 50), units="px", step=1, default=20),
    ParamSpec("frequency", "float", (0.005, 0.05), units="rad/px", step=0.001, default=0.02),
    ParamSpec("pattern", "enum", enum=tuple(p.value for p in WavePattern),
              default=WavePattern.default().value),
)


@dataclass
class ParamCodec:
    specs: tuple[ParamSpec, ...] = UI_PARAM_SPECS

    def _specs(self) -> dict[str, ParamSpec]:
        return {p.name: p for p in self.specs}

    def defaults(self) -> ParamDict:
        return {p.name: p.default for p in self.specs}

    # -------------------------
    # Validation stricte
    # -------------------------
    def validate(self, params: ParamDict) -> None:
        specs = self._specs()
        for k, v in params.items():
            if k not in specs:
                raise InvalidParamsError(f"Unknown param '{k}'")
            p = specs[k]
            if p.type in ("float", "int"):
                x = self._number(p, v)
                if p.type == "int" and not x.is_integer():
                    raise InvalidParamsError(f"{k}={v!r} is not an integer")
                if p.range is not None:
                    lo, hi = p.range
                    if not (float(lo) <= x <= float(hi)):
                        raise InvalidParamsError(f"{k}={x} ∉ [{lo}, {hi}]")
            elif p.type == "enum":
                assert p.enum is not None
                # parse() accepte aussi les libellés ("Flame Pattern")
                if WavePattern.parse(v).value not in p.enum:
                    raise UnknownPatternError(f"{k}={v!r} not in {p.enum}")
            else:
                raise InvalidParamsError(f"Unsupported param type '{p.type}' for {k}")

        for p in self.specs:
            if p.name not in params:
                raise InvalidParamsError(f"Missing required param '{p.name}'")

    # -------------------------
    # Clamp "UI" : défauts + bornes
    # -------------------------
    def clamp(self, params: ParamDict) -> ParamDict:
        """Complète les clés absentes et ramène les numériques dans leurs bornes.

        Un motif inconnu n'est jamais remplacé par le défaut : il lève.
        """
        specs = self._specs()
        unknown = set(params) - set(specs)
        if unknown:
            raise InvalidParamsError(f"Unknown param(s): {', '.join(sorted(unknown))}")
        out: ParamDict = {}
        for p in self.specs:
            v = params.get(p.name)
            if v is None:
                v = p.default
            if p.type in ("float", "int"):
                x = self._number(p, v)
                if p.range is not None:
                    lo, hi = p.range
                    c = min(max(x, float(lo)), float(hi))
                    if c != x:
                        log.warning("%s=%s hors [%s, %s] → %s", p.name, x, lo, hi, c)
                    x = c
                out[p.name] = int(round(x)) if p.type == "int" else x
            else:
                out[p.name] = WavePattern.parse(v).value
        return out

    def to_filter_params(self, params: ParamDict) -> FilterParams:
        c = self.clamp(params)
        return FilterParams(intensity=c["intensity"], frequency=c["frequency"],
                            pattern=WavePattern.parse(c["pattern"]))

    @staticmethod
    def _number(p: ParamSpec, v) -> float:
        if isinstance(v, bool):
            raise InvalidParamsError(f"{p.name}={v!r} is not a number")
        try:
            x = float(v)
        except (TypeError, ValueError) as exc:
            raise InvalidParamsError(f"{p.name}={v!r} is not a number") from exc
        if not math.isfinite(x):
            raise InvalidParamsError(f"{p.name}={v!r} is not finite")
        return x
