# -*- coding: utf-8 -*-
"""Room-from-JSON pipeline: four walls + one floor on the zero-elevation level.

This module is Revit-free. ``host`` is any object implementing the document
host protocol (see revit_host.RevitDocumentHost), so the pipeline can be
unit-tested outside Revit.
"""

import traceback

from element_builder import create_floor, create_walls
from geometry_builder import build_room_ft
from model_resolver import resolve_dependencies
from room_config import resolve_config
from room_errors import InvalidRoomSpec, RoomMakerError
from room_spec import find_room_spec, load_room_spec, room_spec_to_dict, validate_room_spec
from room_transaction import RoomTransaction
from unit_conversion import to_meters


class RoomResult(object):
    def __init__(self, ok, error_kind=None, message=None, spec=None, geometry=None,
                 level=None, level_created=False, walls=None, floor=None):
        self.ok = ok
        self.error_kind = error_kind
        self.message = message
        self.spec = spec
        self.geometry = geometry
        self.level = level
        self.level_created = level_created
        self.walls = walls or []
        self.floor = floor

    @classmethod
    def failure(cls, ex, spec=None, geometry=None):
        kind = getattr(ex, "kind", "UnexpectedError")
        return cls(False, error_kind=kind, message=str(ex), spec=spec, geometry=geometry)

    def to_dict(self):
        out = {
            "ok": self.ok,
            "error_kind": self.error_kind,
            "message": self.message,
            "level_created": self.level_created,
            "level": None,
            "wall_ids": [w.id for w in self.walls],
            "floor_id": self.floor.id if self.floor else None,
        }
        if self.spec is not None:
            out["spec"] = dict(self.spec._asdict())
        if self.level is not None:
            out["level"] = {"id": self.level.id, "name": self.level.name, "elevation_ft": self.level.elevation}
        if self.geometry is not None:
            out["dimensions"] = {
                "length_ft": self.geometry["length_ft"],
                "width_ft": self.geometry["width_ft"],
                "height_ft": self.geometry["height_ft"],
                "length_m": to_meters(self.geometry["length_ft"]),
                "width_m": to_meters(self.geometry["width_ft"]),
                "height_m": to_meters(self.geometry["height_ft"]),
            }
        return out


def _log(snapshot, message):
    if snapshot is not None:
        snapshot.log(message)


def create_room(host, spec, config=None, snapshot=None):
    """Create the room inside one transaction; raises RoomMakerError on failure."""
    cfg = resolve_config(config)

    validate_room_spec(spec)
    room = build_room_ft(spec, cfg["min_edge_length_ft"])
    _log(snapshot, "Room {:.4f} x {:.4f} x {:.4f} ft".format(room["length_ft"], room["width_ft"], room["height_ft"]))
    if snapshot is not None:
        snapshot.save_stage("geometry", {
            "units": "ft",
            "corners": room["corners"],
            "loop": room["loop"],
            "height_ft": room["height_ft"],
        })

    with RoomTransaction(host, cfg["transaction_name"], snapshot):
        deps = resolve_dependencies(host, cfg, snapshot)
        walls = create_walls(
            host,
            room["loop"],
            deps.wall_type,
            deps.level,
            room["height_ft"],
            cfg["wall_base_offset_ft"],
        )
        _log(snapshot, "Created walls {}".format([w.id for w in walls]))
        floor = create_floor(host, room["loop"], deps.floor_type, deps.level)
        _log(snapshot, "Created floor {}".format(floor.id))

    return RoomResult(
        True,
        spec=spec,
        geometry=room,
        level=deps.level,
        level_created=deps.level_created,
        walls=walls,
        floor=floor,
    )


def make_room(host, spec, config=None, snapshot=None):
    """Run create_room and report the outcome as a RoomResult instead of raising."""
    try:
        return create_room(host, spec, config, snapshot)
    except RoomMakerError as ex:
        _log(snapshot, "[{}] {}".format(ex.kind, ex))
        return RoomResult.failure(ex, spec=spec)
    except Exception as ex:
        if snapshot is not None:
            snapshot.save_error("create_room", ex)
        else:
            traceback.print_exc()
        return RoomResult.failure(ex, spec=spec)


def run_room_job(host, work_dir, config=None, snapshot=None):
    """Batch entry: read <work_dir>/room.json, build the room, record snapshots."""
    cfg = resolve_config(config)
    _log(snapshot, "Room job started in {}".format(work_dir))

    try:
        spec = load_room_spec(find_room_spec(work_dir, cfg["spec_file_name"]))
    except InvalidRoomSpec as ex:
        _log(snapshot, "[{}] {}".format(ex.kind, ex))
        result = RoomResult.failure(ex)
    else:
        if snapshot is not None:
            snapshot.save_stage("spec", room_spec_to_dict(spec))
        result = make_room(host, spec, cfg, snapshot)

    if snapshot is not None:
        snapshot.save_result(result)
    _log(snapshot, "Room job {}".format("succeeded" if result.ok else "failed"))
    return result
