import json
import os
import shutil
import sys
import tempfile
import unittest

THIS_DIR = os.path.dirname(__file__)
ROOT_DIR = os.path.dirname(THIS_DIR)
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from room_errors import GeometryDegenerate, InvalidRoomSpec
from room_spec import RoomSpec, find_room_spec, load_room_spec, parse_room_spec, room_spec_to_dict, validate_room_spec


class RoomSpecTests(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.mkdtemp(prefix="roomspec_")

    def tearDown(self):
        shutil.rmtree(self.tmp, ignore_errors=True)

    def test_parse(self):
        spec = parse_room_spec({"room": {"length_m": 4, "width_m": 3.0, "height_m": 2.5}})
        self.assertEqual(spec, RoomSpec(4.0, 3.0, 2.5))
        self.assertIsInstance(spec.length_m, float)

    def test_missing_field(self):
        with self.assertRaises(InvalidRoomSpec) as ctx:
            parse_room_spec({"room": {"length_m": 4, "width_m": 3.0}})
        self.assertIn("height_m", str(ctx.exception))

    def test_missing_room_object(self):
        with self.assertRaises(InvalidRoomSpec):
            parse_room_spec({"length_m": 4, "width_m": 3.0, "height_m": 2.5})
        with self.assertRaises(InvalidRoomSpec):
            parse_room_spec([1, 2, 3])

    def test_non_numeric_values(self):
        for bad in ("4", None, True, [4]):
            with self.assertRaises(InvalidRoomSpec):
                parse_room_spec({"room": {"length_m": bad, "width_m": 3.0, "height_m": 2.5}})

    def test_validate_rejects_degenerate(self):
        for spec in (RoomSpec(0.0, 3.0, 2.5), RoomSpec(4.0, -1.0, 2.5), RoomSpec(4.0, 3.0, 0.0),
                     RoomSpec(float("nan"), 3.0, 2.5), RoomSpec(4.0, float("inf"), 2.5)):
            with self.assertRaises(GeometryDegenerate):
                validate_room_spec(spec)

    def test_validate_accepts_positive(self):
        spec = RoomSpec(4.0, 3.0, 2.5)
        self.assertIs(validate_room_spec(spec), spec)

    def test_load_and_find(self):
        path = os.path.join(self.tmp, "room.json")
        with open(path, "w") as f:
            json.dump({"room": {"length_m": 5.5, "width_m": 4.0, "height_m": 3.0}}, f)

        self.assertEqual(find_room_spec(self.tmp), path)
        self.assertEqual(load_room_spec(path), RoomSpec(5.5, 4.0, 3.0))

    def test_load_with_bom(self):
        path = os.path.join(self.tmp, "room.json")
        with open(path, "wb") as f:
            f.write(b"\xef\xbb\xbf" + b"{\"room\": {\"length_m\": 4.0, \"width_m\": 3.0, \"height_m\": 2.5}}")
        self.assertEqual(load_room_spec(path), RoomSpec(4.0, 3.0, 2.5))

    def test_find_missing(self):
        with self.assertRaises(InvalidRoomSpec):
            find_room_spec(self.tmp)

    def test_load_malformed(self):
        path = os.path.join(self.tmp, "room.json")
        with open(path, "w") as f:
            f.write("{not json")
        with self.assertRaises(InvalidRoomSpec):
            load_room_spec(path)

    def test_to_dict(self):
        out = room_spec_to_dict(RoomSpec(4.0, 3.0, 2.5))
        self.assertEqual(out["room"]["width_m"], 3.0)


if __name__ == "__main__":
    unittest.main()
