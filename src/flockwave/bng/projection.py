"""Transverse Mercator projection of an ellipsoid onto a plane, using the
truncated series published by the Ordnance Survey for the National Grid.

See "A guide to coordinate systems in Great Britain", Annex C, by the
Ordnance Survey for the derivation of the terms. The coefficients below must
be kept as they are; they are not independently re-derivable without error.
"""

from math import cos, sin, tan

from .constants import FOOTPOINT_TOLERANCE, MAX_FOOTPOINT_ITERATIONS
from .ellipsoid import Ellipsoid
from .errors import DatumMismatchError
from .utils import iterate_until_converged
from .vectors import GeodeticCoordinate, GridCoordinate, GridProjectionParameters

__all__ = ("meridional_arc", "TransverseMercatorProjection")


def meridional_arc(
    ellipsoid: Ellipsoid, scale_factor: float, lat: float, lat0: float
) -> float:
    """Returns the length of the meridian arc between two latitudes on the
    given ellipsoid, scaled by the scale factor of the projection.

    Parameters:
        ellipsoid: the ellipsoid
        scale_factor: scale factor on the central meridian
        lat: the latitude where the arc ends, in radians
        lat0: the latitude where the arc starts, in radians

    Returns:
        the scaled length of the arc, in metres; negative if ``lat`` is
        south of ``lat0``
    """
    n = ellipsoid.n
    n2, n3 = n**2, n**3
    d_lat, s_lat = lat - lat0, lat + lat0

    m1 = (1 + n + (5 / 4) * n2 + (5 / 4) * n3) * d_lat
    m2 = (3 * n + 3 * n2 + (21 / 8) * n3) * sin(d_lat) * cos(s_lat)
    m3 = ((15 / 8) * n2 + (15 / 8) * n3) * sin(2 * d_lat) * cos(2 * s_lat)
    m4 = (35 / 24) * n3 * sin(3 * d_lat) * cos(3 * s_lat)

    return ellipsoid.b * scale_factor * (m1 - m2 + m3 - m4)


class TransverseMercatorProjection:
    """Transverse Mercator projection between geodetic coordinates on an
    ellipsoid and a planar grid.
    """

    _params: GridProjectionParameters

    def __init__(self, params: GridProjectionParameters):
        """Constructor.

        Parameters:
            params: the parameters of the grid
        """
        self._params = params

    @property
    def parameters(self) -> GridProjectionParameters:
        """The parameters of the grid."""
        return self._params

    def _radii(self, lat: float) -> tuple[float, float, float]:
        """Returns the scaled radii of curvature (nu and rho) and eta squared
        at the given latitude.
        """
        ellipsoid, f0 = self._params.ellipsoid, self._params.scale_factor
        nu = ellipsoid.prime_vertical_radius(lat, scale=f0)
        rho = ellipsoid.meridional_radius(lat, scale=f0)
        return nu, rho, nu / rho - 1

    def project(self, coord: GeodeticCoordinate) -> GridCoordinate:
        """Projects a geodetic coordinate onto the grid.

        Parameters:
            coord: the coordinate to project; it must be on the ellipsoid of
                the grid

        Returns:
            the easting and northing of the coordinate

        Raises:
            DatumMismatchError: if the coordinate is on another ellipsoid
        """
        params = self._params
        if coord.ellipsoid != params.ellipsoid:
            raise DatumMismatchError(params.ellipsoid, coord.ellipsoid)

        lat = coord.latitude
        nu, rho, eta2 = self._radii(lat)
        sin_lat, cos_lat, tan_lat = sin(lat), cos(lat), tan(lat)
        tan2, tan4 = tan_lat**2, tan_lat**4

        M = meridional_arc(
            params.ellipsoid, params.scale_factor, lat, params.origin_latitude
        )

        I = M + params.origin_northing  # noqa: E741
        II = nu / 2 * sin_lat * cos_lat
        III = nu / 24 * sin_lat * cos_lat**3 * (5 - tan2 + 9 * eta2)
        IIIA = nu / 720 * sin_lat * cos_lat**5 * (61 - 58 * tan2 + tan4)
        IV = nu * cos_lat
        V = nu / 6 * cos_lat**3 * (nu / rho - tan2)
        VI = (
            nu
            / 120
            * cos_lat**5
            * (5 - 18 * tan2 + tan4 + 14 * eta2 - 58 * tan2 * eta2)
        )

        d_lon = coord.longitude - params.origin_longitude
        northing = I + II * d_lon**2 + III * d_lon**4 + IIIA * d_lon**6
        easting = params.origin_easting + IV * d_lon + V * d_lon**3 + VI * d_lon**5

        return GridCoordinate(easting=easting, northing=northing)

    def footpoint_latitude(
        self, northing: float, max_iterations: int = MAX_FOOTPOINT_ITERATIONS
    ) -> float:
        """Returns the latitude on the central meridian whose meridional arc
        from the true origin matches the given northing.

        Parameters:
            northing: the northing, in metres
            max_iterations: the maximum number of iterations to perform

        Returns:
            the footpoint latitude, in radians

        Raises:
            ConvergenceError: if the iteration did not converge
        """
        params = self._params
        ellipsoid, f0 = params.ellipsoid, params.scale_factor
        lat0, n0 = params.origin_latitude, params.origin_northing

        def step(state: tuple[float, float]) -> tuple[float, float]:
            lat, M = state
            lat = (northing - n0 - M) / (ellipsoid.a * f0) + lat
            return lat, meridional_arc(ellipsoid, f0, lat, lat0)

        def converged(state: tuple[float, float]) -> bool:
            return abs(northing - n0 - state[1]) < FOOTPOINT_TOLERANCE

        lat, _ = iterate_until_converged(
            step,
            (lat0, 0.0),
            converged,
            max_iterations=max_iterations,
            what="Footpoint latitude iteration",
        )
        return lat

    def unproject(
        self, coord: GridCoordinate, max_iterations: int = MAX_FOOTPOINT_ITERATIONS
    ) -> GeodeticCoordinate:
        """Converts a grid coordinate back to a geodetic coordinate on the
        ellipsoid of the grid.

        Parameters:
            coord: the grid coordinate to convert
            max_iterations: the maximum number of iterations to perform when
                resolving the footpoint latitude

        Returns:
            the geodetic coordinate, with zero ellipsoidal height

        Raises:
            ConvergenceError: if the footpoint latitude did not converge
        """
        params = self._params

        lat = self.footpoint_latitude(coord.northing, max_iterations=max_iterations)
        nu, rho, eta2 = self._radii(lat)
        tan_lat = tan(lat)
        tan2, tan4, tan6 = tan_lat**2, tan_lat**4, tan_lat**6
        sec_lat = 1.0 / cos(lat)

        VII = tan_lat / (2 * rho * nu)
        VIII = (
            tan_lat
            / (24 * rho * nu**3)
            * (5 + 3 * tan2 + eta2 - 9 * tan2 * eta2)
        )
        IX = tan_lat / (720 * rho * nu**5) * (61 + 90 * tan2 + 45 * tan4)
        X = sec_lat / nu
        XI = sec_lat / (6 * nu**3) * (nu / rho + 2 * tan2)
        XII = sec_lat / (120 * nu**5) * (5 + 28 * tan2 + 24 * tan4)
        XIIA = (
            sec_lat
            / (5040 * nu**7)
            * (61 + 662 * tan2 + 1320 * tan4 + 720 * tan6)
        )

        d_e = coord.easting - params.origin_easting
        latitude = lat - VII * d_e**2 + VIII * d_e**4 - IX * d_e**6
        longitude = (
            params.origin_longitude
            + X * d_e
            - XI * d_e**3
            + XII * d_e**5
            - XIIA * d_e**7
        )

        return GeodeticCoordinate(
            latitude=latitude, longitude=longitude, ellipsoid=params.ellipsoid
        )
