from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

import numpy as np

from scalegrid.canvas import DrawingCanvas, LineHandle, PolylineHandle, TextHandle
from scalegrid.config import GridConfig, LabelOptions, PlotOptions, TickOptions, TickTextOptions
from scalegrid.errors import InvalidTickCountError
from scalegrid.ticks import format_tick, grid_tick_range, tick_positions, tick_step
from scalegrid.transform import AxisTransform

LOGGER = logging.getLogger(__name__)


@dataclass
class Plot:
    name: str
    handle: PolylineHandle
    points: np.ndarray


class ScaleGrid:
    """Cartesian grid drawn on a canvas, with named plots, ticks and labels.

    Every operation takes mathematical coordinates and projects them through
    ``transform`` before calling the canvas.
    """

    def __init__(self, canvas: DrawingCanvas, config: GridConfig | None = None) -> None:
        self.canvas = canvas
        self.config = config or GridConfig()
        self.size = (float(canvas.cx()) * 2.0, float(canvas.cy()) * 2.0)
        self.transform = AxisTransform.from_extents(
            self.config.scale_x,
            self.config.scale_y,
            self.size[0],
            self.size[1],
            padding=self.config.padding,
        )
        self._plots: dict[str, Plot] = {}
        self._n_ticks: int | None = None
        self._tick_lines: list[LineHandle] = []
        self._tick_texts: list[TextHandle] = []
        self._labels: list[TextHandle] = []

        ox, oy = self.origin
        width, height = self.size
        axis_style = self.config.axis_stroke.as_attrs()
        self.x_axis = canvas.line(0.0, oy, width, oy).stroke(axis_style)
        self.y_axis = canvas.line(ox, 0.0, ox, height).stroke(axis_style)

    @property
    def origin(self) -> tuple[float, float]:
        return self.transform.origin

    @property
    def plot_names(self) -> list[str]:
        return list(self._plots)

    @property
    def tick_lines(self) -> list[LineHandle]:
        return list(self._tick_lines)

    @property
    def tick_texts(self) -> list[TextHandle]:
        return list(self._tick_texts)

    @property
    def labels(self) -> list[TextHandle]:
        return list(self._labels)

    def has_plot(self, name: str) -> bool:
        return name in self._plots

    def plot_points(self, name: str) -> np.ndarray:
        return self._plots[name].points.copy()

    def plot(self, xs: Sequence[float], ys: Sequence[float], options: PlotOptions | None = None) -> "ScaleGrid":
        options = options or PlotOptions()
        points = self.transform.project_many(xs, ys)
        entry = self._plots.get(options.name)
        if entry is None:
            handle = self.canvas.polyline().fill(options.fill)
            entry = Plot(name=options.name, handle=handle, points=points)
            self._plots[options.name] = entry
            LOGGER.debug("created plot %r with %d points", options.name, len(points))
        else:
            entry.points = points
            LOGGER.debug("updated plot %r with %d points", options.name, len(points))
        entry.handle.plot(_as_point_list(points)).stroke(options.stroke.as_attrs())
        return self

    def delete_plot(self, name: str) -> None:
        entry = self._plots.pop(name, None)
        if entry is None:
            LOGGER.debug("delete_plot ignored unknown plot %r", name)
            return
        entry.handle.remove()
        LOGGER.debug("deleted plot %r", name)

    def animate_plot(self, xs: Sequence[float], ys: Sequence[float], name: str = "default") -> "ScaleGrid":
        points = self.transform.project_many(xs, ys)
        entry = self._plots.get(name)
        if entry is None:
            LOGGER.debug("animate_plot ignored unknown plot %r", name)
            return self
        entry.points = points
        entry.handle.animate().plot(_as_point_list(points))
        return self

    def tick_positions(self, n_ticks: int) -> np.ndarray:
        lo, hi = grid_tick_range(self.transform.scale_x, self.transform.scale_y)
        return tick_positions(lo, hi, n_ticks)

    def draw_ticks(self, options: TickOptions | None = None) -> "ScaleGrid":
        options = options or TickOptions()
        positions = self.tick_positions(options.n_ticks)
        self._remove_all(self._tick_lines)
        self._n_ticks = options.n_ticks

        ox, oy = self.origin
        size = options.tick_size
        style = options.stroke.as_attrs()
        for pos in positions:
            if pos == 0.0:
                continue
            px = self.transform.fn_x(pos)
            py = self.transform.fn_y(pos)
            line_x = self.canvas.line(px, oy + size, px, oy - size).stroke(style)
            line_y = self.canvas.line(ox + size, py, ox - size, py).stroke(style)
            self._tick_lines.extend((line_x, line_y))
        LOGGER.debug("drew %d tick lines (n_ticks=%d)", len(self._tick_lines), options.n_ticks)
        return self

    def draw_ticks_text(self, options: TickTextOptions | None = None) -> "ScaleGrid":
        options = options or TickTextOptions()
        n_ticks = options.n_ticks if options.n_ticks is not None else self._n_ticks
        if n_ticks is None:
            raise InvalidTickCountError("no tick count given and draw_ticks has not been called")
        positions = self.tick_positions(n_ticks)
        step = tick_step(n_ticks)
        self._remove_all(self._tick_texts)

        ox, oy = self.origin
        for pos in positions:
            label = format_tick(float(pos), step=step)
            px = self.transform.fn_x(pos)
            self._tick_texts.append(self.canvas.text(label).move(px, oy + options.offset))
            if pos != 0.0:
                py = self.transform.fn_y(pos)
                self._tick_texts.append(self.canvas.text(label).move(ox + options.offset, py))
        return self

    def clear_ticks(self) -> None:
        self._remove_all(self._tick_texts)
        self._remove_all(self._tick_lines)

    def add_label(self, text_x: str, text_y: str, options: LabelOptions | None = None) -> "ScaleGrid":
        options = options or LabelOptions()
        self._remove_all(self._labels)
        ox, oy = self.origin
        width, height = self.size
        label_x = self.canvas.text(text_x).center(width / 2.0, oy + options.offset)
        label_y = self.canvas.text(text_y).center(ox - options.offset, height / 2.0)
        self._labels.extend((label_x, label_y))
        return self

    @staticmethod
    def _remove_all(handles: list) -> None:
        for handle in handles:
            handle.remove()
        handles.clear()


def _as_point_list(points: np.ndarray) -> list[tuple[float, float]]:
    return [(float(x), float(y)) for x, y in points]
