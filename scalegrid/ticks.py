from __future__ import annotations

from decimal import Decimal, InvalidOperation
import math

import numpy as np

from scalegrid.errors import InvalidTickCountError


_BOUND_EPS = 1e-9


def tick_step(n_ticks: int) -> float:
    if n_ticks <= 0:
        raise InvalidTickCountError(f"n_ticks must be > 0, got {n_ticks}")
    return 1.0 / n_ticks


def tick_positions(vmin: float, vmax: float, n_ticks: int) -> np.ndarray:
    """Positions ``vmin + k / n_ticks`` up to and including ``vmax``.

    Positions are computed from an integer index so the upper bound does not
    drift with repeated float additions. Values within ``step * 1e-9`` of zero
    snap to exactly 0.
    """
    step = tick_step(n_ticks)
    if vmax < vmin:
        return np.empty(0, dtype=np.float64)
    count = int(math.floor((vmax - vmin) / step + _BOUND_EPS)) + 1
    ticks = vmin + np.arange(count, dtype=np.float64) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * _BOUND_EPS)] = 0.0
    return ticks


def grid_tick_range(scale_x: tuple[float, float], scale_y: tuple[float, float]) -> tuple[float, float]:
    return (min(scale_x[0], scale_y[0]), max(scale_x[1], scale_y[1]))


def format_tick(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    d = Decimal(str(value))
    try:
        q = d.quantize(Decimal("1").scaleb(-decimals))
    except InvalidOperation:
        q = d
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    # 1/3 has no finite decimal form; cap precision.
    exp = Decimal(str(step)).normalize().as_tuple().exponent
    return min(6, max(0, -int(exp)))
