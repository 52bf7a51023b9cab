"""Classes representing coordinates in the coordinate systems involved in
the conversion between WGS84 and the British National Grid, along with the
parameter sets of the transformations between them.

Geodetic and cartesian coordinates are tagged with the ellipsoid they are
expressed on; all angles are stored in radians, except in GPSCoordinate_,
which uses degrees.
"""

from __future__ import annotations

from collections import namedtuple
from math import degrees, hypot, radians
from typing import TYPE_CHECKING

from .errors import DatumMismatchError

if TYPE_CHECKING:
    from .ellipsoid import Ellipsoid


__all__ = (
    "CartesianCoordinate",
    "GeodeticCoordinate",
    "GPSCoordinate",
    "GridCoordinate",
    "GridProjectionParameters",
    "HelmertParameters",
)


_GPSCoordinate = namedtuple("GPSCoordinate", "lat lon")


class GPSCoordinate(_GPSCoordinate):
    """A WGS84 latitude-longitude pair, in degrees."""

    __slots__ = ()

    @classmethod
    def from_json(cls, data) -> GPSCoordinate:
        """Creates a GPS coordinate from its JSON representation."""
        if len(data) < 2:
            raise ValueError("GPS coordinate needs a latitude and a longitude")
        return cls(lat=data[0] * 1e-7, lon=data[1] * 1e-7)

    def __new__(cls, lat: float, lon: float):
        return super().__new__(cls, float(lat), float(lon))

    def format(self) -> str:
        """Formats the GPS coordinate as a string."""
        return f"{self.lat:.7f}°, {self.lon:.7f}°"

    @property
    def json(self) -> list[int]:
        """Returns the JSON representation of the coordinate."""
        return [int(round(self.lat * 1e7)), int(round(self.lon * 1e7))]

    def to_grid(self) -> GridCoordinate:
        """Converts this coordinate to the British National Grid."""
        from .grid import gps_to_grid

        return gps_to_grid(self)


_GeodeticCoordinate = namedtuple(
    "GeodeticCoordinate", "latitude longitude ellipsoid height", defaults=(0.0,)
)


class GeodeticCoordinate(_GeodeticCoordinate):
    """Latitude, longitude (both in radians) and ellipsoidal height (in
    metres) on a given ellipsoid.
    """

    __slots__ = ()

    @classmethod
    def from_gps(
        cls, coord: GPSCoordinate, ellipsoid: Ellipsoid, height: float = 0.0
    ) -> GeodeticCoordinate:
        """Creates a geodetic coordinate from a GPS coordinate given in
        degrees.

        Parameters:
            coord: the coordinate to convert
            ellipsoid: the ellipsoid that the coordinate is expressed on
            height: the ellipsoidal height of the coordinate

        Returns:
            the geodetic coordinate, in radians
        """
        return cls(
            latitude=radians(coord.lat),
            longitude=radians(coord.lon),
            ellipsoid=ellipsoid,
            height=float(height),
        )

    def to_gps(self) -> GPSCoordinate:
        """Returns the latitude and longitude of this coordinate in degrees.
        The height is dropped.
        """
        return GPSCoordinate(lat=degrees(self.latitude), lon=degrees(self.longitude))


_CartesianCoordinate = namedtuple("CartesianCoordinate", "x y z ellipsoid")


class CartesianCoordinate(_CartesianCoordinate):
    """Earth-centered cartesian coordinate, in metres, in the frame of the
    datum of a given ellipsoid.
    """

    __slots__ = ()

    def distance(self, other: CartesianCoordinate) -> float:
        """Returns the distance between this coordinate and another one in
        the same frame.
        """
        if not isinstance(other, CartesianCoordinate):
            raise TypeError(
                "expected CartesianCoordinate, got {0!r}".format(type(other))
            )
        if other.ellipsoid != self.ellipsoid:
            raise DatumMismatchError(self.ellipsoid, other.ellipsoid)
        return (
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        ) ** 0.5


_GridCoordinate = namedtuple("GridCoordinate", "easting northing")


class GridCoordinate(_GridCoordinate):
    """Location on the British National Grid (also known as the Ordnance
    Survey National Grid), given as an easting and a northing in metres.

    See https://en.wikipedia.org/wiki/Ordnance_Survey_National_Grid

    The JSON representation of this class stores the easting and the
    northing as integers in mm instead of the raw floating-point values.
    """

    __slots__ = ()

    @classmethod
    def from_gps(cls, coord: GPSCoordinate) -> GridCoordinate:
        """Creates a grid coordinate from a WGS84 GPS coordinate."""
        from .grid import gps_to_grid

        return gps_to_grid(coord)

    @classmethod
    def from_grid_reference(cls, value: str) -> GridCoordinate:
        """Creates a grid coordinate from an Ordnance Survey grid reference
        like ``SK 001 718``. The result is the south-west corner of the
        referenced square.
        """
        from .formatting import parse_grid_reference

        return parse_grid_reference(value)

    @classmethod
    def from_json(cls, data) -> GridCoordinate:
        """Creates a grid coordinate from its JSON representation."""
        if len(data) < 2:
            raise ValueError("grid coordinate needs an easting and a northing")
        return cls(easting=data[0] * 1e-3, northing=data[1] * 1e-3)

    def __new__(cls, easting: float, northing: float):
        return super().__new__(cls, float(easting), float(northing))

    def distance(self, other: GridCoordinate) -> float:
        """Returns the distance between this grid coordinate and another one
        on the plane of the grid, in metres.
        """
        if isinstance(other, GridCoordinate):
            return hypot(self.easting - other.easting, self.northing - other.northing)
        else:
            raise TypeError("expected GridCoordinate, got {0!r}".format(type(other)))

    def format(self) -> str:
        """Formats the grid coordinate as a string."""
        return f"{self.easting:.3f} E, {self.northing:.3f} N"

    @property
    def is_within_grid(self) -> bool:
        """Whether the coordinate lies within the extent of the National
        Grid.
        """
        from .constants import GRID_MAX_EASTING, GRID_MAX_NORTHING

        return (
            0 <= self.easting <= GRID_MAX_EASTING
            and 0 <= self.northing <= GRID_MAX_NORTHING
        )

    @property
    def json(self) -> list[int]:
        """Returns the JSON representation of the coordinate."""
        return [int(round(self.easting * 1e3)), int(round(self.northing * 1e3))]

    def to_gps(self) -> GPSCoordinate:
        """Converts this grid coordinate to a WGS84 GPS coordinate."""
        from .grid import grid_to_gps

        return grid_to_gps(self)


_HelmertParameters = namedtuple(
    "HelmertParameters", "source target scale tx ty tz rx ry rz"
)


class HelmertParameters(_HelmertParameters):
    """Parameters of a seven-parameter Helmert transformation between the
    cartesian frames of two datums.

    ``scale`` is the scale factor minus one, ``tx``, ``ty`` and ``tz`` are
    the translations in metres and ``rx``, ``ry`` and ``rz`` are the
    rotations around the axes, in radians.
    """

    __slots__ = ()

    @classmethod
    def from_arcseconds(
        cls,
        source: Ellipsoid,
        target: Ellipsoid,
        scale: float,
        tx: float,
        ty: float,
        tz: float,
        rx: float,
        ry: float,
        rz: float,
    ) -> HelmertParameters:
        """Creates a parameter set where the rotations are given in
        arc-seconds, as they are usually published.
        """
        return cls(
            source=source,
            target=target,
            scale=scale,
            tx=tx,
            ty=ty,
            tz=tz,
            rx=radians(rx / 3600.0),
            ry=radians(ry / 3600.0),
            rz=radians(rz / 3600.0),
        )

    @property
    def inverse(self) -> HelmertParameters:
        """The parameter set of the opposite direction.

        All seven parameters are negated. This is only an approximation of
        the exact inverse, valid for small rotations and scale changes.
        """
        return self.__class__(
            source=self.target,
            target=self.source,
            scale=-self.scale,
            tx=-self.tx,
            ty=-self.ty,
            tz=-self.tz,
            rx=-self.rx,
            ry=-self.ry,
            rz=-self.rz,
        )


GridProjectionParameters = namedtuple(
    "GridProjectionParameters",
    "ellipsoid scale_factor origin_latitude origin_longitude "
    "origin_northing origin_easting",
)
GridProjectionParameters.__doc__ = """\
Parameters of a Transverse Mercator grid: the ellipsoid, the scale factor on
the central meridian, the latitude and longitude of the true origin (in
radians) and the northing and easting of the true origin (in metres).
"""
