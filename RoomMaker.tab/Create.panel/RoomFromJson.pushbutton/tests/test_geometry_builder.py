import os
import sys
import unittest

THIS_DIR = os.path.dirname(__file__)
ROOT_DIR = os.path.dirname(THIS_DIR)
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from geometry_builder import build_closed_loop, build_room_corners, build_room_ft, loop_is_closed, segment_length
from room_errors import GeometryDegenerate
from room_spec import RoomSpec


class GeometryBuilderTests(unittest.TestCase):
    def test_corners_counter_clockwise_on_base_plane(self):
        corners = build_room_corners(13.0, 9.0)
        self.assertEqual(corners, [(0.0, 0.0, 0.0), (13.0, 0.0, 0.0), (13.0, 9.0, 0.0), (0.0, 9.0, 0.0)])

    def test_corners_not_validated(self):
        corners = build_room_corners(0.0, -2.0)
        self.assertEqual(corners[2], (0.0, -2.0, 0.0))

    def test_loop_closes_exactly(self):
        for L, W in ((1.0, 1.0), (13.1234, 9.8425), (0.1, 250.0)):
            loop = build_closed_loop(build_room_corners(L, W))
            self.assertEqual(len(loop), 4)
            self.assertEqual(loop[-1][1], loop[0][0])
            self.assertTrue(loop_is_closed(loop))

    def test_loop_segments_follow_corner_order(self):
        corners = build_room_corners(4.0, 3.0)
        loop = build_closed_loop(corners)
        self.assertEqual(loop[0], (corners[0], corners[1]))
        self.assertEqual(loop[1], (corners[1], corners[2]))
        self.assertEqual(loop[2], (corners[2], corners[3]))
        self.assertEqual(loop[3], (corners[3], corners[0]))
        self.assertEqual(segment_length(loop[1]), 3.0)

    def test_zero_width_rejected(self):
        with self.assertRaises(GeometryDegenerate):
            build_closed_loop(build_room_corners(4.0, 0.0))

    def test_short_edge_below_tolerance_rejected(self):
        with self.assertRaises(GeometryDegenerate):
            build_closed_loop(build_room_corners(4.0, 0.001), min_edge_length=0.0026)

    def test_nan_edge_rejected(self):
        inf = float("inf")
        with self.assertRaises(GeometryDegenerate):
            build_closed_loop(build_room_corners(inf, 3.0))

    def test_overflowing_room_rejected(self):
        with self.assertRaises(GeometryDegenerate):
            build_room_ft(RoomSpec(1e308, 3.0, 2.5))
        with self.assertRaises(GeometryDegenerate):
            build_room_ft(RoomSpec(4.0, 3.0, 1e308))

    def test_too_few_corners(self):
        with self.assertRaises(GeometryDegenerate):
            build_closed_loop([(0.0, 0.0, 0.0), (1.0, 0.0, 0.0)])

    def test_open_loop_detected(self):
        loop = [((0.0, 0.0, 0.0), (1.0, 0.0, 0.0)), ((1.0, 0.0, 0.0), (1.0, 1.0, 0.0))]
        self.assertFalse(loop_is_closed(loop))
        self.assertFalse(loop_is_closed([]))

    def test_build_room_ft(self):
        room = build_room_ft(RoomSpec(4.0, 3.0, 2.5))
        self.assertAlmostEqual(room["length_ft"], 13.1234, places=4)
        self.assertAlmostEqual(room["width_ft"], 9.8425, places=4)
        self.assertAlmostEqual(room["height_ft"], 8.2021, places=4)
        self.assertAlmostEqual(room["corners"][2][0], 13.1234, places=4)
        self.assertAlmostEqual(room["corners"][2][1], 9.8425, places=4)
        self.assertEqual(room["loop"][0][0], room["corners"][0])


if __name__ == "__main__":
    unittest.main()
