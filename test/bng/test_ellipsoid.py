"""Unit tests for ``flockwave.bng.ellipsoid``."""

from math import radians

from flockwave.bng.constants import AIRY_1830, GRS80, NATIONAL_GRID
from flockwave.bng.ellipsoid import Ellipsoid

import unittest


class EllipsoidTest(unittest.TestCase):
    """Unit tests for the Ellipsoid_ class."""

    def test_axes(self):
        self.assertEqual(6377563.396, AIRY_1830.a)
        self.assertEqual(6356256.909, AIRY_1830.b)
        self.assertEqual(6378137.0, GRS80.semi_major_axis)
        self.assertEqual(6356752.3141, GRS80.semi_minor_axis)

    def test_eccentricity_squared(self):
        """Tests the eccentricity against the values published by the
        Ordnance Survey.
        """
        self.assertAlmostEqual(0.0066705397616, AIRY_1830.eccentricity_squared, places=8)
        self.assertAlmostEqual(0.0066943800229, GRS80.eccentricity_squared, places=8)

    def test_flattening_ratio(self):
        ellipsoid = Ellipsoid(name="Test", semi_major_axis=3, semi_minor_axis=1)
        self.assertEqual(0.5, ellipsoid.n)
        self.assertAlmostEqual(8 / 9, ellipsoid.eccentricity_squared)

    def test_sphere(self):
        sphere = Ellipsoid(name="Sphere", semi_major_axis=10, semi_minor_axis=10)
        self.assertEqual(0, sphere.eccentricity_squared)
        self.assertEqual(0, sphere.n)
        self.assertAlmostEqual(10, sphere.prime_vertical_radius(radians(33)))
        self.assertAlmostEqual(10, sphere.meridional_radius(radians(33)))

    def test_radii_of_curvature(self):
        """Tests the scaled radii of curvature against the worked example in
        the guide to coordinate systems of the Ordnance Survey.
        """
        lat = radians(52 + 39 / 60 + 27.2531 / 3600)
        f0 = NATIONAL_GRID.scale_factor

        nu = AIRY_1830.prime_vertical_radius(lat, scale=f0)
        rho = AIRY_1830.meridional_radius(lat, scale=f0)

        self.assertAlmostEqual(6388502.3333, nu, delta=1e-3)
        self.assertAlmostEqual(6372756.4399, rho, delta=1e-3)
        self.assertAlmostEqual(2.4708136169e-3, nu / rho - 1, places=8)

    def test_radii_at_equator_and_pole(self):
        e2 = GRS80.eccentricity_squared
        self.assertAlmostEqual(GRS80.a, GRS80.prime_vertical_radius(0))
        self.assertAlmostEqual(GRS80.a * (1 - e2), GRS80.meridional_radius(0))
        self.assertAlmostEqual(
            GRS80.a ** 2 / GRS80.b, GRS80.prime_vertical_radius(radians(90)), places=3
        )

    def test_equality(self):
        self.assertEqual(
            AIRY_1830,
            Ellipsoid(
                name="Airy 1830",
                semi_major_axis=6377563.396,
                semi_minor_axis=6356256.909,
            ),
        )
        self.assertNotEqual(AIRY_1830, GRS80)
