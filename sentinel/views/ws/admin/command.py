from __future__ import annotations

from ....extensions import socketio
from ...middleware import with_connection


def register() -> None:
    # Blind relay: commands from non-admins are dropped without a reply
    @socketio.on("admin_command")
    @with_connection
    def _on_admin_command(coordinator, conn_id: str, data):
        if not isinstance(data, dict):
            return
        coordinator.admin.issue_command(conn_id, data.get("targetId"), data.get("command"))
