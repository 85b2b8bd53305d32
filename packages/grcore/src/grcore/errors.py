from __future__ import annotations


class GRError(Exception):
    """Base de toutes les erreurs gothic-ripple."""


class InvalidBufferError(GRError, ValueError):
    """Le buffer source n'est pas un RGBA uint8 [H, W, 4]."""


class InvalidDimensionsError(InvalidBufferError):
    """Largeur ou hauteur nulle."""


class InvalidParamsError(GRError, ValueError):
    pass


class UnknownPatternError(InvalidParamsError):
    pass


class MissingCudaError(GRError, RuntimeError):
    pass
