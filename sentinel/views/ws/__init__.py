from __future__ import annotations

from .admin import register_socket_handlers as register_admin_handlers
from .connection import register as register_connection
from .rooms import register_socket_handlers as register_room_handlers
from .sessions import register_socket_handlers as register_session_handlers

__all__ = [
    "register_socket_handlers",
]


def register_socket_handlers() -> None:
    register_connection()
    register_session_handlers()
    register_admin_handlers()
    register_room_handlers()
