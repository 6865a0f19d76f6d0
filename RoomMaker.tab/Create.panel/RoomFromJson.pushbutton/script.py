# -*- coding: utf-8 -*-
__title__ = "Room From JSON"
__doc__ = "Read room.json (length/width/height in m) and create 4 walls + floor on Level 0."

import os

import clr

clr.AddReference("System.Windows.Forms")
from System.Windows.Forms import DialogResult, OpenFileDialog

from Autodesk.Revit.UI import TaskDialog

from revit_host import RevitDocumentHost
from room_config import CONFIG_FILE_NAME, load_room_config
from room_maker import run_room_job
from snapshot_manager import SnapshotRun


TITLE = "Room From JSON"

doc = __revit__.ActiveUIDocument.Document


def pick_room_json_path(file_name):
    dialog = OpenFileDialog()
    dialog.Filter = "Room JSON|*.json"
    dialog.Multiselect = False
    dialog.Title = "Select room specification ({} not found in working folder)".format(file_name)
    if dialog.ShowDialog() == DialogResult.OK:
        return dialog.FileName
    return None


def locate_work_dir(config):
    cwd = os.getcwd()
    if os.path.isfile(os.path.join(cwd, config["spec_file_name"])):
        return cwd

    picked = pick_room_json_path(config["spec_file_name"])
    if not picked:
        return None
    config["spec_file_name"] = os.path.basename(picked)
    return os.path.dirname(picked)


def format_result(result, snapshot):
    if result.ok:
        dims = result.to_dict()["dimensions"]
        return "Room {:.2f} x {:.2f} x {:.2f} m created on '{}'{}.\n4 walls + 1 floor.\nSnapshots saved to:\n{}".format(
            dims["length_m"],
            dims["width_m"],
            dims["height_m"],
            result.level.name,
            " (new level)" if result.level_created else "",
            snapshot.run_dir,
        )
    return "Room was not created. Nothing was changed.\n[{}] {}\nSnapshots saved to:\n{}".format(
        result.error_kind, result.message, snapshot.run_dir)


def run_command():
    config = load_room_config(os.path.join(os.path.dirname(__file__), CONFIG_FILE_NAME))

    snapshot = SnapshotRun()
    snapshot.log("Run started")

    work_dir = locate_work_dir(config)
    if work_dir is None:
        snapshot.log("Canceled at room JSON selection")
        TaskDialog.Show(TITLE, "Canceled.")
        return

    try:
        host = RevitDocumentHost(doc)
    except ValueError as ex:
        snapshot.save_error("host", ex)
        TaskDialog.Show(TITLE, str(ex))
        return

    result = run_room_job(host, work_dir, config, snapshot)
    TaskDialog.Show(TITLE, format_result(result, snapshot))


# Avoid side effects when pyRevit inspects/imports this module at startup.
if __name__ == "__main__":
    run_command()
