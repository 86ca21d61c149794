from __future__ import annotations

from .chat import register as register_room_chat
from .create import register as register_room_create
from .join import register as register_room_join
from .leave import register as register_room_leave
from .sync_action import register as register_sync_action

__all__ = [
    "register_socket_handlers",
]


def register_socket_handlers() -> None:
    register_room_create()
    register_room_join()
    register_sync_action()
    register_room_chat()
    register_room_leave()
