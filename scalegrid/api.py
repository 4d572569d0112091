from __future__ import annotations

from pathlib import Path

from scalegrid.canvas import SvgCanvas
from scalegrid.config import GridConfig, load_grid_config
from scalegrid.grid import ScaleGrid


def grid(
    width: float = 500.0,
    height: float = 500.0,
    *,
    config: GridConfig | None = None,
    config_path: str | Path | None = None,
) -> ScaleGrid:
    if config is not None and config_path is not None:
        raise ValueError("pass either config or config_path, not both")
    if config_path is not None:
        config = load_grid_config(config_path)
    return ScaleGrid(SvgCanvas(width, height), config)
