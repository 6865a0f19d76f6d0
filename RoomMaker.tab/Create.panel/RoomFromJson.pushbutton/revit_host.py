# -*- coding: utf-8 -*-
"""Revit document host used by the room pipeline.

This module keeps Autodesk imports inside runtime functions so the rest of the
pipeline can be imported and unit-tested outside Revit. Element ids cross the
host boundary as plain integers.
"""

from room_errors import TransactionFailure
from room_model import LevelRef, TypeRef


def element_id_value(element_id):
    try:
        return int(element_id.Value)
    except AttributeError:
        return int(element_id.IntegerValue)


def _element_name(element):
    try:
        return element.Name
    except Exception:
        pass
    try:
        from Autodesk.Revit.DB import BuiltInParameter
        p = element.get_Parameter(BuiltInParameter.SYMBOL_NAME_PARAM)
        if p and p.HasValue:
            return p.AsString()
    except Exception:
        pass
    return ""


def _to_xyz(pt):
    from Autodesk.Revit.DB import XYZ
    return XYZ(float(pt[0]), float(pt[1]), float(pt[2]))


def _to_line(start, end):
    from Autodesk.Revit.DB import Line
    return Line.CreateBound(_to_xyz(start), _to_xyz(end))


class RevitTransaction(object):
    def __init__(self, tx):
        self.tx = tx

    def commit(self):
        from Autodesk.Revit.DB import TransactionStatus
        status = self.tx.Commit()
        if status != TransactionStatus.Committed:
            raise TransactionFailure("Revit refused to commit '{}' (status {}).".format(self.tx.GetName(), status))

    def rollback(self):
        if self.tx.HasStarted() and (not self.tx.HasEnded()):
            self.tx.RollBack()


class RevitDocumentHost(object):
    def __init__(self, doc):
        if doc is None:
            raise ValueError("No Revit document is open.")
        self.doc = doc
        self._ids = {}

    def _ref_id(self, element_id):
        value = element_id_value(element_id)
        self._ids[value] = element_id
        return value

    def _element_id(self, value):
        return self._ids[value]

    def list_levels(self):
        from Autodesk.Revit.DB import FilteredElementCollector, Level
        return [
            LevelRef(self._ref_id(l.Id), _element_name(l), l.Elevation)
            for l in FilteredElementCollector(self.doc).OfClass(Level)
        ]

    def create_level(self, elevation, name):
        from Autodesk.Revit.DB import Level
        level = Level.Create(self.doc, elevation)
        level.Name = name
        return LevelRef(self._ref_id(level.Id), name, level.Elevation)

    def list_wall_types(self):
        from Autodesk.Revit.DB import FilteredElementCollector, WallKind, WallType
        out = []
        for wt in FilteredElementCollector(self.doc).OfClass(WallType):
            kind = "Basic" if wt.Kind == WallKind.Basic else str(wt.Kind)
            out.append(TypeRef(self._ref_id(wt.Id), _element_name(wt), kind))
        return out

    def list_floor_types(self):
        from Autodesk.Revit.DB import FilteredElementCollector, FloorType
        return [
            TypeRef(self._ref_id(ft.Id), _element_name(ft), None)
            for ft in FilteredElementCollector(self.doc).OfClass(FloorType)
        ]

    def create_wall(self, start, end, wall_type_id, level_id, height, base_offset, flip, structural):
        from Autodesk.Revit.DB import Wall
        wall = Wall.Create(
            self.doc,
            _to_line(start, end),
            self._element_id(wall_type_id),
            self._element_id(level_id),
            height,
            base_offset,
            flip,
            structural,
        )
        return self._ref_id(wall.Id)

    def create_floor(self, loop, floor_type_id, level_id):
        from Autodesk.Revit.DB import CurveLoop, Floor
        from System.Collections.Generic import List

        curve_loop = CurveLoop()
        for start, end in loop:
            curve_loop.Append(_to_line(start, end))

        loops = List[CurveLoop]()
        loops.Add(curve_loop)
        floor = Floor.Create(self.doc, loops, self._element_id(floor_type_id), self._element_id(level_id))
        return self._ref_id(floor.Id)

    def start_transaction(self, name):
        from Autodesk.Revit.DB import Transaction, TransactionStatus
        tx = Transaction(self.doc, name)
        status = tx.Start()
        if status != TransactionStatus.Started:
            raise TransactionFailure("Revit refused to start '{}' (status {}).".format(name, status))
        return RevitTransaction(tx)
