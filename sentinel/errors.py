"""
Error taxonomy for coordination events.

Components raise these; the socket handlers turn them into the
``admin_auth_error`` / ``error`` events sent back to the caller.
"""
from __future__ import annotations


class SentinelError(Exception):
    """Base class for errors reported back to a connection."""


class AuthorizationError(SentinelError):
    pass


class NotFoundError(SentinelError):
    pass


class CapacityError(SentinelError):
    pass


class RoomNotFoundError(NotFoundError):
    def __init__(self, room_id: str):
        super().__init__("Room not found")
        self.room_id = room_id


class RoomFullError(CapacityError):
    def __init__(self, room_id: str, capacity: int):
        super().__init__(f"Room is full (max {capacity} members)")
        self.room_id = room_id
        self.capacity = capacity
