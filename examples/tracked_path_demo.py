from __future__ import annotations

from pathlib import Path

import numpy as np

from scalegrid import GridConfig, PathTracker, PlotOptions, ScaleGrid, SvgCanvas, TickOptions, TrackerConfig


class Marker:
    """Stand-in for a dragged on-screen object."""

    def __init__(self) -> None:
        self.state: dict[str, float] = {"x": 0.0, "y": 0.0}

    def set(self, pos, value=None):
        self.state.update(pos)
        return self.state

    def get(self, key: str, force_read: bool = False) -> float:
        return self.state[key]

    def render(self, force_render: bool = False) -> None:
        return None


def main() -> None:
    canvas = SvgCanvas(600, 600)
    g = ScaleGrid(canvas, GridConfig(scale_x=(-3.0, 3.0), scale_y=(-3.0, 3.0), padding=(20.0, 20.0)))
    g.draw_ticks(TickOptions(n_ticks=2)).draw_ticks_text().add_label("x", "y")

    xs = np.linspace(-3.0, 3.0, 121)
    g.plot(xs, np.sin(xs), PlotOptions(name="sin"))

    tracker = PathTracker(canvas, Marker(), TrackerConfig(origin=g.origin, smooth_factor=4))
    tracker.start_tracking()
    rng = np.random.default_rng(7)
    for t in np.linspace(0.0, 2.0 * np.pi, 80):
        jitter = rng.normal(scale=4.0, size=2)
        tracker.set({"x": 150.0 * np.cos(t) + jitter[0], "y": 150.0 * np.sin(t) + jitter[1]})
    tracker.smooth()
    tracker.stop_tracking()

    out = canvas.write(Path(__file__).with_name("tracked_path_demo.svg"))
    print(f"covered {tracker.get_covered_space():.1f}px, wrote {out}")


if __name__ == "__main__":
    main()
