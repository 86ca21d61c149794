from __future__ import annotations

from ....extensions import socketio
from ...middleware import with_connection


def register() -> None:
    # Also re-registers connections whose session was reaped or never created
    @socketio.on("heartbeat")
    @with_connection
    def _on_heartbeat(coordinator, conn_id: str, data):
        coordinator.sessions.heartbeat(conn_id, data)
