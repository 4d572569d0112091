from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from pathlib import Path
import tomllib
from typing import Any, Mapping

from scalegrid.errors import DegenerateIntervalError, InvalidSmoothFactorError, InvalidTickCountError

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stroke:
    width: float = 2.0
    color: str = "black"

    def __post_init__(self) -> None:
        if self.width < 0:
            raise ValueError("stroke width must be >= 0")

    def as_attrs(self) -> dict[str, Any]:
        return {"width": self.width, "color": self.color}


@dataclass(frozen=True)
class GridConfig:
    """Declared mathematical extents of the grid and how it sits on the canvas.

    ``padding`` is the pixel inset on each side (x, y); the default of zero
    stretches the extents over the whole canvas.
    """

    scale_x: tuple[float, float] = (-5.0, 5.0)
    scale_y: tuple[float, float] = (-5.0, 5.0)
    padding: tuple[float, float] = (0.0, 0.0)
    axis_stroke: Stroke = field(default_factory=Stroke)

    def __post_init__(self) -> None:
        for label, bounds in (("scale_x", self.scale_x), ("scale_y", self.scale_y)):
            if len(bounds) != 2:
                raise ValueError(f"{label} must have exactly two bounds")
            if not all(math.isfinite(float(v)) for v in bounds):
                raise DegenerateIntervalError(f"{label} bounds must be finite")
            if bounds[0] >= bounds[1]:
                raise DegenerateIntervalError(f"{label} must be increasing, got {tuple(bounds)}")
        if len(self.padding) != 2 or min(self.padding) < 0:
            raise ValueError("padding must be two values >= 0")


@dataclass(frozen=True)
class PlotOptions:
    name: str = "default"
    stroke: Stroke = field(default_factory=lambda: Stroke(width=2.0, color="#7777ff"))
    fill: str = "#00000000"

    def __post_init__(self) -> None:
        if not self.name or not isinstance(self.name, str):
            raise ValueError("plot name must be a non-empty string")


@dataclass(frozen=True)
class TickOptions:
    n_ticks: int = 1
    tick_size: float = 5.0
    stroke: Stroke = field(default_factory=lambda: Stroke(width=2.0, color="black"))

    def __post_init__(self) -> None:
        if self.n_ticks <= 0:
            raise InvalidTickCountError(f"n_ticks must be > 0, got {self.n_ticks}")
        if self.tick_size < 0:
            raise ValueError("tick_size must be >= 0")


@dataclass(frozen=True)
class TickTextOptions:
    """``n_ticks`` of None reuses the count of the last ``draw_ticks`` call."""

    n_ticks: int | None = None
    offset: float = 10.0

    def __post_init__(self) -> None:
        if self.n_ticks is not None and self.n_ticks <= 0:
            raise InvalidTickCountError(f"n_ticks must be > 0, got {self.n_ticks}")


@dataclass(frozen=True)
class LabelOptions:
    offset: float = 25.0


@dataclass(frozen=True)
class TrackerConfig:
    origin: tuple[float, float] = (0.0, 0.0)
    smooth_factor: int = 1
    zero_padding: bool = False
    stroke: Stroke = field(default_factory=lambda: Stroke(width=2.0, color="#ff5522"))

    def __post_init__(self) -> None:
        if self.smooth_factor < 1:
            raise InvalidSmoothFactorError(f"smooth_factor must be >= 1, got {self.smooth_factor}")


def load_grid_config(path: str | Path) -> GridConfig:
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"grid config not found: {config_path}")
    with config_path.open("rb") as f:
        raw = tomllib.load(f)
    config = grid_config_from_mapping(raw)
    LOGGER.debug("loaded grid config from %s: %s", config_path, config)
    return config


def grid_config_from_mapping(raw: Mapping[str, Any]) -> GridConfig:
    defaults = GridConfig()
    scale_x = _coerce_pair(raw.get("scale_x", defaults.scale_x), "scale_x")
    scale_y = _coerce_pair(raw.get("scale_y", defaults.scale_y), "scale_y")
    padding = _coerce_pair(raw.get("padding", defaults.padding), "padding")
    stroke_raw = raw.get("axis_stroke", {})
    if not isinstance(stroke_raw, Mapping):
        raise ValueError("axis_stroke must be a table")
    axis_stroke = Stroke(
        width=_coerce_number(stroke_raw.get("width", defaults.axis_stroke.width), "axis_stroke.width"),
        color=_coerce_str(stroke_raw.get("color", defaults.axis_stroke.color), "axis_stroke.color"),
    )
    return GridConfig(scale_x=scale_x, scale_y=scale_y, padding=padding, axis_stroke=axis_stroke)


def _coerce_pair(value: object, field_name: str) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"{field_name} must be a list of two numbers")
    return (_coerce_number(value[0], field_name), _coerce_number(value[1], field_name))


def _coerce_number(value: object, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number")
    return float(value)


def _coerce_str(value: object, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{field_name} must be a string")
    return value
