from __future__ import annotations

from ....extensions import socketio
from ...middleware import with_connection


def register() -> None:
    @socketio.on("register_user")
    @with_connection
    def _on_register_user(coordinator, conn_id: str, data):
        coordinator.sessions.register(conn_id, data)
