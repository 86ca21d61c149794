from __future__ import annotations

from ....extensions import socketio
from ...middleware import with_connection


def register() -> None:
    @socketio.on("admin_login")
    @with_connection
    def _on_admin_login(coordinator, conn_id: str, identity):
        coordinator.admin.login(conn_id, identity)
