from __future__ import annotations

from ....extensions import socketio
from ...middleware import with_connection


def register() -> None:
    @socketio.on("client_data")
    @with_connection
    def _on_client_data(coordinator, conn_id: str, data):
        if not isinstance(data, dict):
            return
        coordinator.sessions.apply_data(conn_id, data.get("type"), data.get("data"))
