# -*- coding: utf-8 -*-
"""Create the bounding walls and floor of a room on an open document host."""

from room_errors import CreationFailure, RoomMakerError
from room_model import FloorRecord, WallRecord


def create_walls(host, loop, wall_type, level, height_ft, base_offset_ft=0.0):
    walls = []
    for i, (start, end) in enumerate(loop):
        try:
            wall_id = host.create_wall(start, end, wall_type.id, level.id, height_ft, base_offset_ft, False, False)
        except RoomMakerError:
            raise
        except Exception as ex:
            raise CreationFailure("Wall {} of {} ({} -> {}) was rejected: {}".format(i + 1, len(loop), start, end, ex))
        walls.append(WallRecord(wall_id, start, end, wall_type.id, level.id, height_ft))
    return walls


def create_floor(host, loop, floor_type, level):
    try:
        floor_id = host.create_floor(loop, floor_type.id, level.id)
    except RoomMakerError:
        raise
    except Exception as ex:
        raise CreationFailure("Floor was rejected: {}".format(ex))
    return FloorRecord(floor_id, list(loop), floor_type.id, level.id)
