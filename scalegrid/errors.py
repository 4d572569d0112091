from __future__ import annotations


class ScaleGridError(ValueError):
    """Base class for invalid grid, scale and tracker arguments."""


class DegenerateIntervalError(ScaleGridError):
    pass


class SizeMismatchError(ScaleGridError):
    pass


class InvalidTickCountError(ScaleGridError):
    pass


class InvalidSmoothFactorError(ScaleGridError):
    pass
