from __future__ import annotations

import logging
from typing import Any, Mapping, Protocol

import numpy as np

from scalegrid.canvas import DrawingCanvas
from scalegrid.config import Stroke, TrackerConfig
from scalegrid.smoothing import MovingAverageSmoother, SmoothingStrategy, path_length

LOGGER = logging.getLogger(__name__)


class Positional(Protocol):
    """Externally driven object whose position the tracker records."""

    def set(self, pos: Mapping[str, float], value: Any = None) -> Any:
        ...

    def get(self, key: str, force_read: bool = False) -> Any:
        ...

    def render(self, force_render: bool = False) -> Any:
        ...


class PathTracker:
    """Wraps a positional object and records its path while ``tracking`` is set.

    Points are stored in the object's local coordinates and drawn translated
    by ``config.origin``. ``tracking`` may also be toggled directly by the
    caller's input handling.
    """

    def __init__(
        self,
        canvas: DrawingCanvas,
        target: Positional,
        config: TrackerConfig | None = None,
        *,
        smoother: SmoothingStrategy | None = None,
        tracking: bool = False,
    ) -> None:
        self.config = config or TrackerConfig()
        self.target = target
        self.smoother = smoother or MovingAverageSmoother(self.config.smooth_factor, self.config.zero_padding)
        self.tracking = tracking
        self.track_path = canvas.polyline().fill("#00000000")
        self._points: list[tuple[float, float]] = []

    @property
    def path(self) -> np.ndarray:
        if not self._points:
            return np.empty((0, 2), dtype=np.float64)
        return np.asarray(self._points, dtype=np.float64)

    def start_tracking(self, stroke: Stroke | None = None) -> None:
        stroke = stroke or self.config.stroke
        self._points = []
        self.track_path.plot([]).stroke(stroke.as_attrs())
        self.tracking = True
        LOGGER.debug("tracking started")

    def stop_tracking(self) -> None:
        self.tracking = False
        LOGGER.debug("tracking stopped after %d points", len(self._points))

    def set(self, pos: Mapping[str, float], value: Any = None) -> Any:
        if self.tracking:
            self._points.append((float(pos["x"]), float(pos["y"])))
            self.track_path.plot(self._translate(self.path))
        return self.target.set(pos, value)

    def get(self, key: str, force_read: bool = False) -> Any:
        return self.target.get(key, force_read)

    def render(self, force_render: bool = False) -> Any:
        return self.target.render(force_render)

    def smooth(self) -> np.ndarray | None:
        if not self.tracking or not self._points:
            return None
        smoothed = self.smoother.smooth(self.path)
        self.track_path.plot(self._translate(smoothed))
        LOGGER.debug("smoothed %d tracked points", len(smoothed))
        return smoothed

    def get_covered_space(self) -> float:
        return path_length(self.path)

    def _translate(self, points: np.ndarray) -> list[tuple[float, float]]:
        ox, oy = self.config.origin
        return [(float(x) + ox, float(y) + oy) for x, y in points]
