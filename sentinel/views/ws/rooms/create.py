from __future__ import annotations

from ....extensions import socketio
from ...middleware import with_connection


def register() -> None:
    @socketio.on("create_room")
    @with_connection
    def _on_create_room(coordinator, conn_id: str, media):
        coordinator.rooms.create_room(conn_id, media)
