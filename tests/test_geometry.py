import math
import unittest

from gesture_text.models.geometry import angle, distance
from gesture_text.models.landmarks import Point3


class TestDistance(unittest.TestCase):
    def test_3d_distance(self):
        self.assertAlmostEqual(distance(Point3(0, 0, 0), Point3(1, 2, 2)), 3.0)

    def test_point_without_depth_defaults_to_zero(self):
        self.assertAlmostEqual(distance(Point3(0, 0), Point3(3, 4)), 5.0)

    def test_2d_sequence_makes_both_sides_2d(self):
        # The depth of the 3D point must not be used against a point without depth
        self.assertAlmostEqual(distance((0.0, 0.0), Point3(3, 4, 12)), 5.0)


class TestAngle(unittest.TestCase):
    def test_straight_joint(self):
        self.assertAlmostEqual(angle(Point3(0, 0), Point3(0, 1), Point3(0, 2)), 180.0)

    def test_right_angle(self):
        self.assertAlmostEqual(angle(Point3(1, 0), Point3(0, 0), Point3(0, 1)), 90.0)

    def test_folded_back(self):
        self.assertAlmostEqual(angle(Point3(1, 0), Point3(0, 0), Point3(2, 0)), 0.0)

    def test_coincident_points_give_zero(self):
        self.assertEqual(angle(Point3(0, 0), Point3(0, 0), Point3(1, 1)), 0.0)
        self.assertEqual(angle(Point3(1, 1), Point3(0, 0), Point3(0, 0)), 0.0)

    def test_floating_point_drift_is_clamped(self):
        result = angle(Point3(0.1, 0.1, 0.1), Point3(0.2, 0.2, 0.2), Point3(0.3, 0.3, 0.3))
        self.assertFalse(math.isnan(result))
        self.assertAlmostEqual(result, 180.0, places=4)
