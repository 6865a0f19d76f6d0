# -*- coding: utf-8 -*-
"""Locate (or create) the level, wall type and floor type a room depends on.

Type lookups are read-only and run before the level is created, so a
document without usable types fails before any mutation.
"""

from room_errors import MissingHostEntity, ResolutionFailure, RoomMakerError
from room_model import ResolvedEntities


def first_or_none(iterable):
    for item in iterable:
        return item
    return None


def find_level_at_elevation(host, elevation, tolerance):
    return first_or_none(l for l in host.list_levels() if abs(l.elevation - elevation) < tolerance)


def resolve_level(host, config):
    elevation = config["level_elevation_ft"]
    try:
        level = find_level_at_elevation(host, elevation, config["level_tolerance_ft"])
        if level is not None:
            return level, False
        return host.create_level(elevation, config["level_name"]), True
    except RoomMakerError:
        raise
    except Exception as ex:
        raise ResolutionFailure("Level lookup/creation at elevation {} failed: {}".format(elevation, ex))


def _list_types(what, lister):
    try:
        return list(lister())
    except Exception as ex:
        raise ResolutionFailure("Listing {} types failed: {}".format(what, ex))


def resolve_wall_type(host, kind="Basic"):
    wall_type = first_or_none(wt for wt in _list_types("wall", host.list_wall_types) if wt.kind == kind)
    if wall_type is None:
        raise MissingHostEntity("No {} WallType found in document.".format(kind))
    return wall_type


def resolve_floor_type(host):
    floor_type = first_or_none(_list_types("floor", host.list_floor_types))
    if floor_type is None:
        raise MissingHostEntity("No FloorType found in document.")
    return floor_type


def resolve_dependencies(host, config, snapshot=None):
    wall_type = resolve_wall_type(host, config["wall_kind"])
    floor_type = resolve_floor_type(host)
    level, created = resolve_level(host, config)

    if snapshot is not None:
        snapshot.log("Resolved level '{}' (created={}), wall type '{}', floor type '{}'".format(
            level.name, created, wall_type.name, floor_type.name))

    return ResolvedEntities(level, wall_type, floor_type, created)
