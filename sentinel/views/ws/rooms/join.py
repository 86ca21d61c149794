from __future__ import annotations

import logging

from ....errors import SentinelError
from ....extensions import socketio
from ...middleware import with_connection


def register() -> None:
    @socketio.on("join_room")
    @with_connection
    def _on_join_room(coordinator, conn_id: str, data):
        data = data if isinstance(data, dict) else {}
        room_id = data.get("roomId")
        if isinstance(room_id, int) and not isinstance(room_id, bool):
            room_id = str(room_id)
        try:
            coordinator.rooms.join_room(conn_id, room_id, data.get("userMetadata"))
        except SentinelError as e:
            logging.info("join_room: %s could not join %r: %s", conn_id, room_id, e)
            socketio.emit("error", str(e), to=conn_id)
