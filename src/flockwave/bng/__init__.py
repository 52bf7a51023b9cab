"""Conversion between WGS84 coordinates and the British National Grid."""

from .errors import ConvergenceError, DatumMismatchError, Error
from .grid import gps_to_grid, grid_to_gps
from .vectors import GPSCoordinate, GridCoordinate
from .version import __version__, __version_info__

__all__ = (
    "__version__",
    "__version_info__",
    "ConvergenceError",
    "DatumMismatchError",
    "Error",
    "GPSCoordinate",
    "GridCoordinate",
    "gps_to_grid",
    "grid_to_gps",
)
