"""Per-run snapshot folder for room-from-JSON jobs.

A run folder holds run_log.txt, one JSON file per pipeline stage and, on
failure, errors.json. Runs under IronPython (pyRevit) and CPython tests.
"""

import datetime
import json
import os
import traceback

ROOT_ENV_VAR = "ROOMMAKER_SNAPSHOT_ROOT"
LOG_FILE = "run_log.txt"
ERROR_FILE = "errors.json"

STAGE_FILES = {
    "spec": "00_room_spec.json",
    "geometry": "01_geometry.json",
    "result": "02_room_result.json",
}


def snapshot_root_candidates(preferred=None):
    found = [preferred, os.environ.get(ROOT_ENV_VAR), os.path.join(os.path.expanduser("~"), "dev", "roommaker")]
    return [c for i, c in enumerate(found) if c and c not in found[:i]]


def resolve_snapshot_root(preferred=None):
    """First candidate folder that exists or can be created; <cwd>/roommaker otherwise."""
    for root in snapshot_root_candidates(preferred):
        if os.path.isdir(root):
            return root
        try:
            os.makedirs(root)
            return root
        except OSError:
            continue

    fallback = os.path.join(os.getcwd(), "roommaker")
    if not os.path.isdir(fallback):
        os.makedirs(fallback)
    return fallback


def new_run_name(now=None):
    now = now or datetime.datetime.now()
    return now.strftime("room_%Y%m%d_%H%M%S_") + now.strftime("%f")[:4]


class SnapshotRun(object):
    def __init__(self, root=None, run_name=None):
        self.root = resolve_snapshot_root(root)
        self.run_name = run_name or new_run_name()
        self.run_dir = os.path.join(self.root, self.run_name)
        if not os.path.isdir(self.run_dir):
            os.makedirs(self.run_dir)

    def path(self, name):
        return os.path.join(self.run_dir, name)

    def save_json(self, name, payload):
        target = self.path(name)
        with open(target, "w") as f:
            json.dump(payload, f, indent=2, sort_keys=True)
        return target

    def save_stage(self, stage, payload):
        return self.save_json(STAGE_FILES[stage], payload)

    def log(self, message):
        stamp = datetime.datetime.now().strftime("%H:%M:%S")
        with open(self.path(LOG_FILE), "a") as f:
            f.write("[{}] {}\n".format(stamp, message))

    def save_error(self, stage, exc):
        kind = getattr(exc, "kind", type(exc).__name__)
        self.save_json(ERROR_FILE, {
            "stage": stage,
            "kind": kind,
            "error": str(exc),
            "traceback": traceback.format_exc(),
        })
        self.log("[ERROR] {} ({}): {}".format(stage, kind, exc))

    def save_result(self, result):
        return self.save_stage("result", result.to_dict())
