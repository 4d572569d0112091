from __future__ import annotations

from pathlib import Path
import tempfile
import unittest

from scalegrid import (
    DegenerateIntervalError,
    GridConfig,
    InvalidSmoothFactorError,
    InvalidTickCountError,
    PlotOptions,
    Stroke,
    TickOptions,
    TickTextOptions,
    TrackerConfig,
    grid,
    load_grid_config,
)


class ConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = GridConfig()
        self.assertEqual(cfg.scale_x, (-5.0, 5.0))
        self.assertEqual(cfg.axis_stroke.as_attrs(), {"width": 2.0, "color": "black"})
        self.assertEqual(PlotOptions().stroke.color, "#7777ff")
        self.assertEqual(TrackerConfig().stroke.color, "#ff5522")

    def test_validation(self) -> None:
        with self.assertRaises(DegenerateIntervalError):
            GridConfig(scale_x=(1.0, 1.0))
        with self.assertRaises(ValueError):
            GridConfig(padding=(-1.0, 0.0))
        with self.assertRaises(InvalidTickCountError):
            TickOptions(n_ticks=0)
        with self.assertRaises(InvalidTickCountError):
            TickTextOptions(n_ticks=-2)
        with self.assertRaises(InvalidSmoothFactorError):
            TrackerConfig(smooth_factor=0)
        with self.assertRaises(ValueError):
            PlotOptions(name="")
        with self.assertRaises(ValueError):
            Stroke(width=-1)

    def test_load_grid_config_from_toml(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "grid.toml"
            path.write_text(
                'scale_x = [-2, 6]\npadding = [10, 5]\n\n[axis_stroke]\ncolor = "#333333"\n',
                encoding="utf-8",
            )
            cfg = load_grid_config(path)
            self.assertEqual(cfg.scale_x, (-2.0, 6.0))
            self.assertEqual(cfg.scale_y, (-5.0, 5.0))
            self.assertEqual(cfg.padding, (10.0, 5.0))
            self.assertEqual(cfg.axis_stroke, Stroke(width=2.0, color="#333333"))

            g = grid(200, 100, config_path=path)
            self.assertEqual(g.origin, (55.0, 50.0))

    def test_load_grid_config_errors(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                load_grid_config(Path(tmp) / "missing.toml")
            bad = Path(tmp) / "bad.toml"
            bad.write_text('scale_x = [1, "a"]\n', encoding="utf-8")
            with self.assertRaises(ValueError):
                load_grid_config(bad)
            flat = Path(tmp) / "flat.toml"
            flat.write_text("scale_y = [3, 3]\n", encoding="utf-8")
            with self.assertRaises(DegenerateIntervalError):
                load_grid_config(flat)


if __name__ == "__main__":
    unittest.main()
