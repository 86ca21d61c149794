from __future__ import annotations

from .session import Session
from .room import ChatMessage, Room

__all__ = [
    "Session",
    "Room",
    "ChatMessage",
]
