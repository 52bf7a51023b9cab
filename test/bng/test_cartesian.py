"""Unit tests for ``flockwave.bng.cartesian``."""

from math import degrees, nan, radians

from flockwave.bng.cartesian import GeodeticToCartesianTransformation
from flockwave.bng.constants import AIRY_1830, GRS80
from flockwave.bng.errors import ConvergenceError, DatumMismatchError
from flockwave.bng.vectors import CartesianCoordinate, GeodeticCoordinate, GPSCoordinate

import unittest


def dms(deg: int, minutes: int, seconds: float) -> float:
    return radians(deg + minutes / 60 + seconds / 3600)


class GeodeticToCartesianTransformationTest(unittest.TestCase):
    """Unit tests for the GeodeticToCartesianTransformation_ class."""

    def test_ellipsoid(self):
        trans = GeodeticToCartesianTransformation(AIRY_1830)
        self.assertEqual(AIRY_1830, trans.ellipsoid)

    def test_to_cartesian(self):
        """Tests whether the ``to_cartesian()`` method works."""
        trans = GeodeticToCartesianTransformation(GRS80)

        # Calculations verified with:
        # http://www.oc.nps.edu/oc2902w/coord/llhxyz.htm
        coord = GeodeticCoordinate.from_gps(
            GPSCoordinate(lat=49, lon=17), GRS80, height=1000
        )
        cartesian = trans.to_cartesian(coord)
        self.assertAlmostEqual(4009873, cartesian.x, places=0)
        self.assertAlmostEqual(1225941, cartesian.y, places=0)
        self.assertAlmostEqual(4791313, cartesian.z, places=0)
        self.assertEqual(GRS80, cartesian.ellipsoid)

    def test_to_cartesian_on_airy_1830(self):
        """Tests the conversion against the worked example in the guide to
        coordinate systems of the Ordnance Survey.
        """
        trans = GeodeticToCartesianTransformation(AIRY_1830)
        coord = GeodeticCoordinate(
            latitude=dms(52, 39, 27.2531),
            longitude=dms(1, 43, 4.5177),
            ellipsoid=AIRY_1830,
            height=24.7,
        )
        cartesian = trans.to_cartesian(coord)
        self.assertAlmostEqual(3874938.849, cartesian.x, places=2)
        self.assertAlmostEqual(116218.624, cartesian.y, places=2)
        self.assertAlmostEqual(5047168.208, cartesian.z, places=2)

    def test_to_geodetic(self):
        """Tests whether the ``to_geodetic()`` method works."""
        trans = GeodeticToCartesianTransformation(GRS80)

        # Calculations verified with:
        # http://www.oc.nps.edu/oc2902w/coord/llhxyz.htm
        cartesian = CartesianCoordinate(
            x=4009873, y=1225941, z=4791313, ellipsoid=GRS80
        )
        coord = trans.to_geodetic(cartesian)
        self.assertAlmostEqual(49, degrees(coord.latitude), places=5)
        self.assertAlmostEqual(17, degrees(coord.longitude), places=5)
        self.assertAlmostEqual(1000, coord.height, places=0)
        self.assertEqual(GRS80, coord.ellipsoid)

    def test_round_trip(self):
        for ellipsoid in (GRS80, AIRY_1830):
            trans = GeodeticToCartesianTransformation(ellipsoid)
            for lat, lon, height in (
                (53.25, -1.9, 0),
                (49.9, -6.3, 120.5),
                (60.8, -0.8, -45),
                (51.48, 0.0, 3000),
            ):
                coord = GeodeticCoordinate(
                    radians(lat), radians(lon), ellipsoid, height
                )
                result = trans.to_geodetic(trans.to_cartesian(coord))
                self.assertAlmostEqual(coord.latitude, result.latitude, places=12)
                self.assertAlmostEqual(coord.longitude, result.longitude, places=12)
                self.assertAlmostEqual(coord.height, result.height, places=5)

    def test_to_geodetic_converges_quickly(self):
        trans = GeodeticToCartesianTransformation(AIRY_1830)
        coord = GeodeticCoordinate(radians(57.5), radians(-4.5), AIRY_1830, 1300)
        result = trans.to_geodetic(trans.to_cartesian(coord), max_iterations=10)
        self.assertAlmostEqual(coord.latitude, result.latitude, places=12)

    def test_to_geodetic_iteration_limit(self):
        trans = GeodeticToCartesianTransformation(AIRY_1830)
        cartesian = trans.to_cartesian(
            GeodeticCoordinate(radians(57.5), radians(-4.5), AIRY_1830, 1300)
        )
        with self.assertRaises(ConvergenceError) as context:
            trans.to_geodetic(cartesian, max_iterations=1)
        self.assertEqual(1, context.exception.iterations)

    def test_to_geodetic_with_nan(self):
        trans = GeodeticToCartesianTransformation(GRS80)
        with self.assertRaises(ConvergenceError):
            trans.to_geodetic(CartesianCoordinate(nan, nan, nan, GRS80))

    def test_datum_mismatch(self):
        trans = GeodeticToCartesianTransformation(GRS80)

        with self.assertRaises(DatumMismatchError) as context:
            trans.to_cartesian(GeodeticCoordinate(0.9, -0.03, AIRY_1830))
        self.assertEqual(GRS80, context.exception.expected)
        self.assertEqual(AIRY_1830, context.exception.actual)

        with self.assertRaises(DatumMismatchError):
            trans.to_geodetic(CartesianCoordinate(3874938, 116218, 5047168, AIRY_1830))
