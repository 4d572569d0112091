from scalegrid.api import grid
from scalegrid.canvas import DrawingCanvas, SvgCanvas
from scalegrid.config import (
    GridConfig,
    LabelOptions,
    PlotOptions,
    Stroke,
    TickOptions,
    TickTextOptions,
    TrackerConfig,
    load_grid_config,
)
from scalegrid.errors import (
    DegenerateIntervalError,
    InvalidSmoothFactorError,
    InvalidTickCountError,
    ScaleGridError,
    SizeMismatchError,
)
from scalegrid.grid import ScaleGrid
from scalegrid.scales import AffineScale, diff_scale, inverse_scale, sample_range, scale, zip_points
from scalegrid.smoothing import (
    ExponentialSmoother,
    MovingAverageSmoother,
    SmoothingStrategy,
    moving_average,
    path_length,
    smooth_pair,
)
from scalegrid.tracker import PathTracker, Positional
from scalegrid.transform import AxisTransform, xy_scale

__all__ = [
    "AffineScale",
    "AxisTransform",
    "DegenerateIntervalError",
    "DrawingCanvas",
    "ExponentialSmoother",
    "GridConfig",
    "InvalidSmoothFactorError",
    "InvalidTickCountError",
    "LabelOptions",
    "MovingAverageSmoother",
    "PathTracker",
    "PlotOptions",
    "Positional",
    "ScaleGrid",
    "ScaleGridError",
    "SizeMismatchError",
    "SmoothingStrategy",
    "Stroke",
    "SvgCanvas",
    "TickOptions",
    "TickTextOptions",
    "TrackerConfig",
    "diff_scale",
    "grid",
    "inverse_scale",
    "load_grid_config",
    "moving_average",
    "path_length",
    "sample_range",
    "scale",
    "smooth_pair",
    "xy_scale",
    "zip_points",
]
