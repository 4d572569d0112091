from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

import numpy as np

from scalegrid.errors import SizeMismatchError
from scalegrid.scales import AffineScale, scale


@dataclass(frozen=True)
class AxisTransform:
    """Maps mathematical (x, y) onto canvas pixels, y growing downward on screen."""

    fn_x: AffineScale
    fn_y: AffineScale

    @classmethod
    def from_extents(
        cls,
        scale_x: Sequence[float],
        scale_y: Sequence[float],
        width: float,
        height: float,
        padding: tuple[float, float] = (0.0, 0.0),
    ) -> "AxisTransform":
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        pad_x, pad_y = float(padding[0]), float(padding[1])
        if pad_x < 0 or pad_y < 0:
            raise ValueError("padding must be >= 0")
        if width - 2 * pad_x <= 0 or height - 2 * pad_y <= 0:
            raise ValueError("padding leaves no drawable area")
        fn_x = scale(scale_x, (pad_x, float(width) - pad_x))
        fn_y = scale(scale_y, (float(height) - pad_y, pad_y))
        return cls(fn_x=fn_x, fn_y=fn_y)

    @property
    def origin(self) -> tuple[float, float]:
        return self.project(0.0, 0.0)

    @property
    def scale_x(self) -> tuple[float, float]:
        return self.fn_x.domain

    @property
    def scale_y(self) -> tuple[float, float]:
        return self.fn_y.domain

    def project(self, x: float, y: float) -> tuple[float, float]:
        return (self.fn_x(x), self.fn_y(y))

    def project_many(self, xs: Sequence[float] | np.ndarray, ys: Sequence[float] | np.ndarray) -> np.ndarray:
        x_arr = np.atleast_1d(np.asarray(xs, dtype=np.float64))
        y_arr = np.atleast_1d(np.asarray(ys, dtype=np.float64))
        if x_arr.ndim != 1 or y_arr.ndim != 1:
            raise ValueError(f"x and y must be 1-D, got shapes {x_arr.shape} and {y_arr.shape}")
        if x_arr.shape != y_arr.shape:
            raise SizeMismatchError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
        return np.column_stack((self.fn_x.apply_array(x_arr), self.fn_y.apply_array(y_arr)))

    def project_vector(self, dx: float, dy: float) -> tuple[float, float]:
        return (self.fn_x.diff()(dx), self.fn_y.diff()(dy))

    def unproject(self, px: float, py: float) -> tuple[float, float]:
        return (self.fn_x.inverse()(px), self.fn_y.inverse()(py))


def xy_scale(base: AffineScale) -> Callable[[float, float], tuple[float, float]]:
    """Use one scale for both axes, flipping the image for y."""
    fn_x = base
    fn_y = scale(base.domain, (base.image[1], base.image[0]))

    def project(x: float, y: float) -> tuple[float, float]:
        return (fn_x(x), fn_y(y))

    return project
