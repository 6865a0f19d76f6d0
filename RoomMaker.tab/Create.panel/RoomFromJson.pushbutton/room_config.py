# -*- coding: utf-8 -*-
"""Settings for the room-from-JSON command.

Defaults can be overridden by a room_config.json placed next to script.py.
"""

import json
import os

CONFIG_FILE_NAME = "room_config.json"


def default_room_config():
    return {
        "spec_file_name": "room.json",
        "level_name": "Level 0",
        "level_elevation_ft": 0.0,
        "level_tolerance_ft": 0.001,
        "wall_kind": "Basic",
        "wall_base_offset_ft": 0.0,
        "min_edge_length_ft": 0.0,
        "transaction_name": "Create Room from JSON",
    }


def _merge(base, patch):
    out = dict(base)
    for k, v in (patch or {}).items():
        out[k] = v
    return out


def load_room_config(path):
    data = default_room_config()
    try:
        if path and os.path.isfile(path):
            with open(path, "r") as f:
                parsed = json.load(f)
            if isinstance(parsed, dict):
                data = _merge(data, parsed)
    except Exception:
        pass
    return data


def resolve_config(config):
    """Fill missing keys of a partial config dict with defaults."""
    return _merge(default_room_config(), config)
