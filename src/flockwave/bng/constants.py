"""Constants of the datums and the projection of the British National Grid.

The parameters below are the published values of the Ordnance Survey for
converting between ETRS89 / WGS84 and OSGB36 (National Grid) coordinates.
"""

from math import radians

from .ellipsoid import Ellipsoid
from .vectors import GridProjectionParameters, HelmertParameters

__all__ = (
    "AIRY_1830",
    "FOOTPOINT_TOLERANCE",
    "GRID_MAX_EASTING",
    "GRID_MAX_NORTHING",
    "GRS80",
    "LATITUDE_TOLERANCE",
    "MAX_FOOTPOINT_ITERATIONS",
    "MAX_LATITUDE_ITERATIONS",
    "NATIONAL_GRID",
    "OSGB36_HELMERT",
)


GRS80 = Ellipsoid(
    name="GRS80", semi_major_axis=6378137.000, semi_minor_axis=6356752.3141
)
"""GRS80 ellipsoid; used for WGS84 coordinates at the precision of the
National Grid transformation.
"""

AIRY_1830 = Ellipsoid(
    name="Airy 1830", semi_major_axis=6377563.396, semi_minor_axis=6356256.909
)
"""Airy 1830 ellipsoid that the OSGB36 datum and the National Grid are
defined on.
"""

OSGB36_HELMERT = HelmertParameters.from_arcseconds(
    source=GRS80,
    target=AIRY_1830,
    scale=20.4894e-6,
    tx=-446.448,
    ty=125.157,
    tz=-542.060,
    rx=-0.1502,
    ry=-0.2470,
    rz=-0.8421,
)
"""Helmert transformation parameters from GRS80 (WGS84) to Airy 1830
(OSGB36) cartesian coordinates. Use the ``inverse`` property for the
opposite direction.
"""

NATIONAL_GRID = GridProjectionParameters(
    ellipsoid=AIRY_1830,
    scale_factor=0.9996012717,
    origin_latitude=radians(49),
    origin_longitude=radians(-2),
    origin_northing=-100000.0,
    origin_easting=400000.0,
)
"""Transverse Mercator projection parameters of the National Grid."""

GRID_MAX_EASTING = 700000.0
"""Largest easting of the National Grid, in metres"""

GRID_MAX_NORTHING = 1300000.0
"""Largest northing of the National Grid, in metres"""

LATITUDE_TOLERANCE = 1e-16
"""Tolerance of the iterative latitude computation when converting from
cartesian to geodetic coordinates, in radians
"""

MAX_LATITUDE_ITERATIONS = 50
"""Maximum number of iterations in the cartesian to geodetic conversion"""

FOOTPOINT_TOLERANCE = 1e-5
"""Tolerance of the footpoint latitude computation of the inverse
projection, expressed as a meridional distance in metres (0.01 mm)
"""

MAX_FOOTPOINT_ITERATIONS = 100
"""Maximum number of iterations in the footpoint latitude computation"""
