from __future__ import annotations

from typing import Protocol, Sequence

import numpy as np

from scalegrid.errors import InvalidSmoothFactorError


def moving_average(values: Sequence[float] | np.ndarray, factor: int, zero_padding: bool = False) -> np.ndarray:
    """Trailing simple moving average with the same length as ``values``.

    Output ``i`` averages the ``factor`` samples ending at input ``i``. The
    left edge is padded with ``factor - 1`` copies of the first sample, or
    with zeros when ``zero_padding`` is set.
    """
    if factor < 1:
        raise InvalidSmoothFactorError(f"smooth factor must be >= 1, got {factor}")
    arr = np.asarray(values, dtype=np.float64).reshape(-1)
    if arr.size == 0:
        return arr.copy()
    pad_value = 0.0 if zero_padding else arr[0]
    padded = np.concatenate((np.full(factor - 1, pad_value, dtype=np.float64), arr))
    csum = np.concatenate(([0.0], np.cumsum(padded)))
    # padded[i : i + factor] ends on input sample i
    ends = np.arange(factor, padded.size + 1)
    return (csum[ends] - csum[ends - factor]) / factor


def smooth_pair(
    now: Sequence[float] = (0.0, 0.0),
    last: Sequence[float | None] | None = (0.0, 0.0),
    factor: float = 1.0,
) -> tuple[float, float]:
    x_now, y_now = now
    x_last, y_last = last if last is not None else (0.0, 0.0)
    x_last = 0.0 if x_last is None else x_last
    y_last = 0.0 if y_last is None else y_last
    return (
        x_now * factor + (1.0 - factor) * x_last,
        y_now * factor + (1.0 - factor) * y_last,
    )


def path_length(points: Sequence[Sequence[float]] | np.ndarray) -> float:
    arr = _as_points(points)
    if arr.shape[0] < 2:
        return 0.0
    deltas = np.diff(arr, axis=0)
    return float(np.sum(np.hypot(deltas[:, 0], deltas[:, 1])))


class SmoothingStrategy(Protocol):
    def smooth(self, points: np.ndarray) -> np.ndarray:
        ...


class MovingAverageSmoother:
    def __init__(self, factor: int = 1, zero_padding: bool = False) -> None:
        if factor < 1:
            raise InvalidSmoothFactorError(f"smooth factor must be >= 1, got {factor}")
        self.factor = factor
        self.zero_padding = zero_padding

    def smooth(self, points: np.ndarray) -> np.ndarray:
        arr = _as_points(points)
        if arr.shape[0] == 0:
            return arr
        xs = moving_average(arr[:, 0], self.factor, self.zero_padding)
        ys = moving_average(arr[:, 1], self.factor, self.zero_padding)
        return np.column_stack((xs, ys))


class ExponentialSmoother:
    """Blends each sample into the previous output: ``f * now + (1 - f) * last``."""

    def __init__(self, factor: float = 0.5) -> None:
        if not 0.0 < factor <= 1.0:
            raise InvalidSmoothFactorError(f"exponential factor must be in (0, 1], got {factor}")
        self.factor = factor

    def smooth(self, points: np.ndarray) -> np.ndarray:
        arr = _as_points(points)
        out = np.empty_like(arr)
        if arr.shape[0] == 0:
            return out
        out[0] = arr[0]
        for i in range(1, arr.shape[0]):
            out[i] = smooth_pair(arr[i], out[i - 1], self.factor)
        return out


def _as_points(points: Sequence[Sequence[float]] | np.ndarray) -> np.ndarray:
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2), dtype=np.float64)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"points must have shape (N, 2), got {arr.shape}")
    return arr
