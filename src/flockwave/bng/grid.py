"""Conversion between WGS84 geodetic coordinates and the British National
Grid.

The forward direction converts the WGS84 coordinate to cartesian
coordinates on GRS80, shifts them to the OSGB36 datum with a Helmert
transformation, converts them back to geodetic coordinates on Airy 1830 and
projects them onto the grid. The inverse direction runs the same steps
backwards.
"""

import logging

from .cartesian import GeodeticToCartesianTransformation
from .constants import AIRY_1830, GRS80, NATIONAL_GRID, OSGB36_HELMERT
from .helmert import HelmertTransformation
from .projection import TransverseMercatorProjection
from .vectors import GeodeticCoordinate, GPSCoordinate, GridCoordinate

__all__ = ("geodetic_to_grid", "gps_to_grid", "grid_to_geodetic", "grid_to_gps")

log = logging.getLogger(__name__)

_GRS80_CARTESIAN = GeodeticToCartesianTransformation(GRS80)
_AIRY_1830_CARTESIAN = GeodeticToCartesianTransformation(AIRY_1830)
_TO_OSGB36 = HelmertTransformation(OSGB36_HELMERT)
_PROJECTION = TransverseMercatorProjection(NATIONAL_GRID)


def geodetic_to_grid(coord: GeodeticCoordinate) -> GridCoordinate:
    """Converts a geodetic coordinate on the GRS80 ellipsoid to the British
    National Grid.

    Parameters:
        coord: the coordinate to convert

    Returns:
        the grid coordinate

    Raises:
        DatumMismatchError: if the coordinate is not on GRS80
        ConvergenceError: if the coordinate is numerically degenerate
    """
    cartesian = _TO_OSGB36.apply(_GRS80_CARTESIAN.to_cartesian(coord))
    result = _PROJECTION.project(_AIRY_1830_CARTESIAN.to_geodetic(cartesian))
    log.debug("Converted %r to %r", coord, result)
    return result


def grid_to_geodetic(coord: GridCoordinate) -> GeodeticCoordinate:
    """Converts a coordinate of the British National Grid to a geodetic
    coordinate on the GRS80 ellipsoid.

    Parameters:
        coord: the coordinate to convert

    Returns:
        the geodetic coordinate; its height is the ellipsoidal height of
        a point at zero OSGB36 height and carries no meaning on its own

    Raises:
        ConvergenceError: if the coordinate is numerically degenerate or
            far outside the grid
    """
    cartesian = _AIRY_1830_CARTESIAN.to_cartesian(_PROJECTION.unproject(coord))
    result = _GRS80_CARTESIAN.to_geodetic(_TO_OSGB36.apply_inverse(cartesian))
    log.debug("Converted %r to %r", coord, result)
    return result


def gps_to_grid(coord: GPSCoordinate) -> GridCoordinate:
    """Converts a WGS84 latitude-longitude pair, given in degrees, to the
    British National Grid.
    """
    return geodetic_to_grid(GeodeticCoordinate.from_gps(coord, GRS80))


def grid_to_gps(coord: GridCoordinate) -> GPSCoordinate:
    """Converts a coordinate of the British National Grid to a WGS84
    latitude-longitude pair, in degrees.
    """
    return grid_to_geodetic(coord).to_gps()
