"""Symmetric shadowcasting field of view for 2-D grids."""

from .environment.grid import (
    VisibleSet,
    blocking_from_transparent,
    compute_fov_array,
    visible_positions,
)
from .fov import compute_fov, scan, scan_iterative
from .quadrant import Cardinal, Quadrant
from .row import Row, is_symmetric, slope
from .util.rational import (
    ExactFraction,
    SlopeOverflowError,
    round_ties_down,
    round_ties_up,
)

__all__ = [
    "Cardinal",
    "ExactFraction",
    "Quadrant",
    "Row",
    "SlopeOverflowError",
    "VisibleSet",
    "blocking_from_transparent",
    "compute_fov",
    "compute_fov_array",
    "is_symmetric",
    "round_ties_down",
    "round_ties_up",
    "scan",
    "scan_iterative",
    "slope",
    "visible_positions",
]
