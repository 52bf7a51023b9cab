"""Conversion between geodetic and earth-centered cartesian coordinates on a
given ellipsoid.
"""

from math import atan2, cos, pi, sin, sqrt, ulp

from .constants import LATITUDE_TOLERANCE, MAX_LATITUDE_ITERATIONS
from .ellipsoid import Ellipsoid
from .errors import DatumMismatchError
from .utils import iterate_until_converged
from .vectors import CartesianCoordinate, GeodeticCoordinate

__all__ = ("GeodeticToCartesianTransformation",)


class GeodeticToCartesianTransformation:
    """Transformation that converts geodetic coordinates on an ellipsoid to
    earth-centered cartesian coordinates and vice versa.
    """

    _ellipsoid: Ellipsoid

    def __init__(self, ellipsoid: Ellipsoid):
        """Constructor.

        Parameters:
            ellipsoid: the ellipsoid that the transformation is bound to
        """
        self._ellipsoid = ellipsoid

    @property
    def ellipsoid(self) -> Ellipsoid:
        """The ellipsoid that the transformation is bound to."""
        return self._ellipsoid

    def _check_ellipsoid(self, ellipsoid: Ellipsoid) -> None:
        if ellipsoid != self._ellipsoid:
            raise DatumMismatchError(self._ellipsoid, ellipsoid)

    def to_cartesian(self, coord: GeodeticCoordinate) -> CartesianCoordinate:
        """Converts the given geodetic coordinate to cartesian coordinates.

        Parameters:
            coord: the coordinate to convert

        Returns:
            the converted coordinate

        Raises:
            DatumMismatchError: if the coordinate is not on the ellipsoid of
                the transformation
        """
        self._check_ellipsoid(coord.ellipsoid)

        lat, lon, height = coord.latitude, coord.longitude, coord.height
        e2 = self._ellipsoid.eccentricity_squared
        nu = self._ellipsoid.prime_vertical_radius(lat)

        cos_lat = cos(lat)
        x = (nu + height) * cos_lat * cos(lon)
        y = (nu + height) * cos_lat * sin(lon)
        z = ((1 - e2) * nu + height) * sin(lat)
        return CartesianCoordinate(x=x, y=y, z=z, ellipsoid=self._ellipsoid)

    def to_geodetic(
        self, coord: CartesianCoordinate, max_iterations: int = MAX_LATITUDE_ITERATIONS
    ) -> GeodeticCoordinate:
        """Converts the given cartesian coordinate to geodetic coordinates.

        The latitude is found with a fixed-point iteration that stops when
        two consecutive estimates differ by at most ``LATITUDE_TOLERANCE``
        (or by at most one unit in the last place). The height is unstable
        near the poles.

        Parameters:
            coord: the coordinate to convert
            max_iterations: the maximum number of iterations to perform when
                resolving the latitude

        Returns:
            the converted coordinate

        Raises:
            DatumMismatchError: if the coordinate is not in the frame of the
                ellipsoid of the transformation
            ConvergenceError: if the latitude did not converge
        """
        self._check_ellipsoid(coord.ellipsoid)

        x, y, z = coord.x, coord.y, coord.z
        ellipsoid = self._ellipsoid
        e2 = ellipsoid.eccentricity_squared
        p = sqrt(x * x + y * y)

        def step(state: tuple[float, float]) -> tuple[float, float]:
            _, lat = state
            nu = ellipsoid.prime_vertical_radius(lat)
            return lat, atan2(z + e2 * nu * sin(lat), p)

        def converged(state: tuple[float, float]) -> bool:
            previous, lat = state
            return abs(lat - previous) <= max(LATITUDE_TOLERANCE, ulp(lat))

        _, lat = iterate_until_converged(
            step,
            (2 * pi, atan2(z, p * (1 - e2))),
            converged,
            max_iterations=max_iterations,
            what="Latitude iteration",
        )

        lon = atan2(y, x)
        height = p / cos(lat) - ellipsoid.prime_vertical_radius(lat)
        return GeodeticCoordinate(
            latitude=lat, longitude=lon, ellipsoid=ellipsoid, height=height
        )
