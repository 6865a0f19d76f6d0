"""Failure kinds raised by the room-from-JSON pipeline.

Every error carries a ``kind`` string so the entry point can report it
without the caller inspecting exception types.
"""


class RoomMakerError(Exception):
    kind = "RoomMakerError"


class MissingHostEntity(RoomMakerError):
    kind = "MissingHostEntity"


class GeometryDegenerate(RoomMakerError, ValueError):
    kind = "GeometryDegenerate"


class ResolutionFailure(RoomMakerError):
    kind = "ResolutionFailure"


class CreationFailure(RoomMakerError):
    kind = "CreationFailure"


class TransactionFailure(RoomMakerError):
    kind = "TransactionFailure"


class InvalidRoomSpec(RoomMakerError, ValueError):
    kind = "InvalidRoomSpec"
