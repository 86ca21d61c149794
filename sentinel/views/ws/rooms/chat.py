from __future__ import annotations

from ....extensions import socketio
from ...middleware import require_room_member, with_connection


def register() -> None:
    @socketio.on("room_chat_message")
    @with_connection
    @require_room_member
    def _on_room_chat_message(coordinator, conn_id: str, text):
        coordinator.rooms.post_chat(conn_id, text)
