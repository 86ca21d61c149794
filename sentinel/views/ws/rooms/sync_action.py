from __future__ import annotations

from ....extensions import socketio
from ...middleware import require_room_member, with_connection


def register() -> None:
    # Playback kinds are leader-only; CHAT is accepted from any member
    @socketio.on("sync_action")
    @with_connection
    @require_room_member
    def _on_sync_action(coordinator, conn_id: str, action):
        coordinator.rooms.dispatch_sync_action(conn_id, action)
