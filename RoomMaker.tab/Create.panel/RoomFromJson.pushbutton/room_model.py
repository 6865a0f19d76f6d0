"""Plain records exchanged between the pipeline and a document host.

Points are (x, y, z) tuples in feet. A loop is a list of (start, end) segments.
"""

from collections import namedtuple


LevelRef = namedtuple("LevelRef", ["id", "name", "elevation"])

TypeRef = namedtuple("TypeRef", ["id", "name", "kind"])

WallRecord = namedtuple("WallRecord", ["id", "start", "end", "wall_type_id", "level_id", "height"])

FloorRecord = namedtuple("FloorRecord", ["id", "loop", "floor_type_id", "level_id"])

ResolvedEntities = namedtuple("ResolvedEntities", ["level", "wall_type", "floor_type", "level_created"])
