"""Reference ellipsoid model."""

from collections import namedtuple
from math import sin, sqrt

__all__ = ("Ellipsoid",)

_Ellipsoid = namedtuple("Ellipsoid", "name semi_major_axis semi_minor_axis")


class Ellipsoid(_Ellipsoid):
    """Reference ellipsoid given by its semi-major (equatorial) and
    semi-minor (polar) axes, in metres.
    """

    __slots__ = ()

    @property
    def a(self) -> float:
        """Shorthand for the semi-major axis."""
        return self.semi_major_axis

    @property
    def b(self) -> float:
        """Shorthand for the semi-minor axis."""
        return self.semi_minor_axis

    @property
    def eccentricity_squared(self) -> float:
        """The square of the first eccentricity of the ellipsoid."""
        return 1 - (self.b * self.b) / (self.a * self.a)

    @property
    def n(self) -> float:
        """The flattening ratio ``(a - b) / (a + b)`` that the meridional
        arc series is expanded in.
        """
        return (self.a - self.b) / (self.a + self.b)

    def prime_vertical_radius(self, lat: float, scale: float = 1.0) -> float:
        """Returns the radius of curvature in the prime vertical (nu) at the
        given latitude.

        Parameters:
            lat: the latitude, in radians
            scale: optional scale factor to multiply the radius with

        Returns:
            the radius of curvature, in metres
        """
        return self.a * scale / sqrt(1 - self.eccentricity_squared * sin(lat) ** 2)

    def meridional_radius(self, lat: float, scale: float = 1.0) -> float:
        """Returns the meridional radius of curvature (rho) at the given
        latitude.

        Parameters:
            lat: the latitude, in radians
            scale: optional scale factor to multiply the radius with

        Returns:
            the radius of curvature, in metres
        """
        e2 = self.eccentricity_squared
        return self.a * scale * (1 - e2) * (1 - e2 * sin(lat) ** 2) ** -1.5
