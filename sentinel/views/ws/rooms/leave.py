from __future__ import annotations

from ....extensions import socketio
from ...middleware import require_room_member, with_connection


def register() -> None:
    @socketio.on("leave_room")
    @with_connection
    @require_room_member
    def _on_leave_room(coordinator, conn_id: str, _data):
        coordinator.rooms.leave_room(conn_id)
