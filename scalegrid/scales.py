from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Sequence

import numpy as np

from scalegrid.errors import DegenerateIntervalError, SizeMismatchError


Interval = tuple[float, float]


@dataclass(frozen=True)
class AffineScale:
    """Linear map sending ``domain`` onto ``image`` endpoint to endpoint."""

    domain: Interval
    image: Interval

    def __post_init__(self) -> None:
        lo, hi = self.domain
        if not all(math.isfinite(v) for v in (lo, hi, *self.image)):
            raise DegenerateIntervalError(f"scale bounds must be finite: {self.domain} -> {self.image}")
        if hi == lo:
            raise DegenerateIntervalError(f"scale domain has zero width: {self.domain}")

    @property
    def ratio(self) -> float:
        return (self.image[1] - self.image[0]) / (self.domain[1] - self.domain[0])

    def apply(self, value: float) -> float:
        return self.ratio * (float(value) - self.domain[0]) + self.image[0]

    def __call__(self, value: float) -> float:
        return self.apply(value)

    def apply_array(self, values: np.ndarray | Sequence[float]) -> np.ndarray:
        arr = np.asarray(values, dtype=np.float64)
        return self.ratio * (arr - self.domain[0]) + self.image[0]

    def inverse(self) -> "AffineScale":
        return AffineScale(domain=self.image, image=self.domain)

    def diff(self) -> "AffineScale":
        # Zero-anchored: maps deltas, never translates.
        return AffineScale(
            domain=(0.0, self.domain[1] - self.domain[0]),
            image=(0.0, self.image[1] - self.image[0]),
        )


def scale(domain: Sequence[float], image: Sequence[float]) -> AffineScale:
    return AffineScale(domain=_interval(domain, "domain"), image=_interval(image, "image"))


def inverse_scale(fn_scale: AffineScale) -> AffineScale:
    return fn_scale.inverse()


def diff_scale(fn_scale: AffineScale) -> AffineScale:
    return fn_scale.diff()


def zip_points(xs: Sequence[float], ys: Sequence[float]) -> list[tuple[float, float]]:
    if len(xs) != len(ys):
        raise SizeMismatchError(f"x and y length mismatch: {len(xs)} != {len(ys)}")
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def sample_range(initial: float, final: float, n: int) -> list[float]:
    """Return ``n`` evenly spaced values from ``initial`` to ``final`` inclusive."""
    if n <= 0:
        raise ValueError("n must be > 0")
    if n == 1:
        return [float(initial)]
    fn_scale = scale((0.0, float(n - 1)), (initial, final))
    return [fn_scale(i) for i in range(n)]


def _interval(value: Sequence[float], label: str) -> Interval:
    if len(value) != 2:
        raise ValueError(f"{label} must have exactly two bounds")
    return (float(value[0]), float(value[1]))
