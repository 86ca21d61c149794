from __future__ import annotations

import logging
from typing import Callable, Iterable

from ..helpers.ws import ConnectionChannel
from ..lib.utils import now_ms
from .admin import AdminChannel
from .rooms import RoomManager
from .sessions import SessionRegistry

DEFAULT_MAX_IDLE_MS = 5 * 60 * 1000


class Coordinator:
    """Owns the session, admin and room state for one server process.

    Every inbound event runs one of these methods to completion before the next
    is processed, so the registries are never touched concurrently.
    """

    def __init__(
        self,
        channel: ConnectionChannel,
        admin_identities: Iterable[str] | str = (),
        clock: Callable[[], int] = now_ms,
        max_idle_ms: int = DEFAULT_MAX_IDLE_MS,
    ):
        self.channel = channel
        self.clock = clock
        self.max_idle_ms = max_idle_ms
        self.sessions = SessionRegistry(clock=clock)
        self.admin = AdminChannel(channel, self.sessions, admin_identities)
        self.sessions.bind_admin(self.admin)
        self.rooms = RoomManager(channel, self.sessions, clock=clock)

    def disconnect(self, conn_id: str) -> None:
        """Release everything held by a closed connection."""
        self.rooms.leave_room(conn_id)
        self.admin.logout(conn_id)
        self.sessions.remove(conn_id)
        logging.info("coordinator: cleaned up %s", conn_id)

    def reap(self) -> list[str]:
        return self.sessions.reap(self.clock(), self.max_idle_ms)
