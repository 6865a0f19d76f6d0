"""Pure geometry computation for the room footprint (ft domain)."""

import math

from room_errors import GeometryDegenerate
from unit_conversion import to_internal_length


def build_room_corners(length_ft, width_ft):
    L = float(length_ft)
    W = float(width_ft)

    # Counter-clockwise from the origin, on the level's base plane.
    p1 = (0.0, 0.0, 0.0)
    p2 = (L, 0.0, 0.0)
    p3 = (L, W, 0.0)
    p4 = (0.0, W, 0.0)
    return [p1, p2, p3, p4]


def segment_length(segment):
    a, b = segment
    dx = b[0] - a[0]
    dy = b[1] - a[1]
    dz = b[2] - a[2]
    return math.sqrt((dx * dx) + (dy * dy) + (dz * dz))


def loop_is_closed(loop):
    if not loop:
        return False
    for i in range(len(loop)):
        if loop[i][1] != loop[(i + 1) % len(loop)][0]:
            return False
    return True


def build_closed_loop(corners, min_edge_length=0.0):
    """Join consecutive corners into bounded segments, wrapping last to first.

    Raises GeometryDegenerate for coincident corners or an open loop.
    """
    if len(corners) < 3:
        raise GeometryDegenerate("Need at least 3 corners, got {}.".format(len(corners)))

    loop = []
    for i in range(len(corners)):
        seg = (corners[i], corners[(i + 1) % len(corners)])
        ln = segment_length(seg)
        # NaN lengths from overflowed coordinates must fail too.
        if not (ln > min_edge_length):
            raise GeometryDegenerate(
                "Edge {} from {} to {} is too short ({:.6f} ft).".format(i + 1, seg[0], seg[1], ln)
            )
        loop.append(seg)

    if not loop_is_closed(loop):
        raise GeometryDegenerate("Boundary loop does not close.")
    return loop


def build_room_ft(spec, min_edge_length=0.0):
    length_ft = to_internal_length(spec.length_m)
    width_ft = to_internal_length(spec.width_m)
    height_ft = to_internal_length(spec.height_m)
    for name, value in (("length", length_ft), ("width", width_ft), ("height", height_ft)):
        if math.isinf(value) or math.isnan(value):
            raise GeometryDegenerate("{} is not finite in feet: {}".format(name, value))

    corners = build_room_corners(length_ft, width_ft)
    loop = build_closed_loop(corners, min_edge_length)

    return {
        "length_ft": length_ft,
        "width_ft": width_ft,
        "height_ft": height_ft,
        "corners": corners,
        "loop": loop,
    }
