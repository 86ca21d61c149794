from __future__ import annotations

from .admin import AdminChannel
from .coordinator import Coordinator
from .rooms import RoomManager
from .sessions import SessionRegistry

__all__ = [
    "AdminChannel",
    "Coordinator",
    "RoomManager",
    "SessionRegistry",
]
