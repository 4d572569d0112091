from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from scalegrid import LabelOptions, PlotOptions, ScaleGridError, TickOptions, grid


def _parse_points(values: list[str]) -> tuple[list[float], list[float]]:
    xs: list[float] = []
    ys: list[float] = []
    for raw in values:
        try:
            x_str, y_str = raw.split(",", 1)
            xs.append(float(x_str))
            ys.append(float(y_str))
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"point must look like `x,y`: {raw!r}") from exc
    return xs, ys


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="scalegrid")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING"], default="WARNING")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a Cartesian grid to an SVG file.")
    render.add_argument("out", type=Path)
    render.add_argument("--config", type=Path, default=None, help="TOML grid config (scale_x, scale_y, padding).")
    render.add_argument("--width", type=float, default=500.0)
    render.add_argument("--height", type=float, default=500.0)
    render.add_argument("--ticks", type=int, default=1, help="Ticks per unit.")
    render.add_argument("--tick-size", type=float, default=5.0)
    render.add_argument("--no-tick-text", action="store_true")
    render.add_argument("--labels", nargs=2, metavar=("X", "Y"), default=None)
    render.add_argument("--points", nargs="+", default=None, help="Polyline points as `x,y` pairs.")
    render.add_argument("--sine", action="store_true", help="Plot sin(x) across the x extent.")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.command == "render":
        try:
            out = _render(args)
        except (ScaleGridError, ValueError, FileNotFoundError, argparse.ArgumentTypeError) as exc:
            parser.error(str(exc))
        print(f"wrote {out}")
        return

    parser.error(f"unknown command: {args.command}")


def _render(args: argparse.Namespace) -> Path:
    g = grid(args.width, args.height, config_path=args.config)
    g.draw_ticks(TickOptions(n_ticks=args.ticks, tick_size=args.tick_size))
    if not args.no_tick_text:
        g.draw_ticks_text()
    if args.labels:
        g.add_label(args.labels[0], args.labels[1], LabelOptions())
    if args.points:
        xs, ys = _parse_points(args.points)
        g.plot(xs, ys, PlotOptions(name="points"))
    if args.sine:
        lo, hi = g.transform.scale_x
        xs_arr = np.linspace(lo, hi, 200)
        g.plot(xs_arr, np.sin(xs_arr), PlotOptions(name="sine"))
    return g.canvas.write(args.out)


if __name__ == "__main__":
    main()
