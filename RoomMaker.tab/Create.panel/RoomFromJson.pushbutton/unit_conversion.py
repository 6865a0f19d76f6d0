"""Metric to Revit internal length conversion (ft domain)."""

M_TO_FT = 3.2808399


def to_internal_length(value_m):
    return float(value_m) * M_TO_FT


def to_meters(value_ft):
    return float(value_ft) / M_TO_FT
