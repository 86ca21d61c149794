"""
Session registry: one record per live connection.

Every mutation that an observer cares about is pushed to the admin channel
immediately. Whole-list broadcasts are reserved for membership changes
(register, remove, reap); field changes go out as single-session updates.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, TYPE_CHECKING

from ..lib.events import ClientDataKind
from ..lib.utils import now_ms
from ..models import Session
from ..models.session import new_session

if TYPE_CHECKING:
    from .admin import AdminChannel


class SessionRegistry:
    def __init__(self, clock: Callable[[], int] = now_ms):
        self.clock = clock
        self._sessions: dict[str, Session] = {}
        self._admin: Optional["AdminChannel"] = None

    def bind_admin(self, admin: "AdminChannel") -> None:
        self._admin = admin

    def __contains__(self, conn_id: str) -> bool:
        return conn_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def get(self, conn_id: str) -> Optional[Session]:
        return self._sessions.get(conn_id)

    def snapshot(self) -> list[dict[str, Any]]:
        return [session.to_dict() for session in self._sessions.values()]

    def register(self, conn_id: str, fields: Any) -> Session:
        now = self.clock()
        previous = self._sessions.get(conn_id)
        if previous is not None:
            now = max(now, previous.last_active)
        session = new_session(conn_id, fields, now)
        self._sessions[conn_id] = session
        logging.info("sessions: registered %s (total=%s)", conn_id, len(self._sessions))
        self._broadcast_full_list()
        return session

    def heartbeat(self, conn_id: str, fields: Any) -> Session:
        session = self._sessions.get(conn_id)
        if session is None:
            logging.debug("sessions: heartbeat from unregistered %s, registering", conn_id)
            return self.register(conn_id, fields)
        session.merge(fields)
        session.touch(self.clock())
        self._broadcast_session_update(conn_id)
        return session

    def apply_data(self, conn_id: str, kind: Any, value: Any) -> bool:
        session = self._sessions.get(conn_id)
        if session is None:
            return False
        data_kind = kind if isinstance(kind, ClientDataKind) else ClientDataKind.parse(kind)
        if data_kind is None:
            logging.debug("sessions: ignoring client_data kind=%r from %s", kind, conn_id)
            return False
        session.set_field(data_kind.field, value)
        self._broadcast_session_update(conn_id)
        return True

    def remove(self, conn_id: str) -> bool:
        if self._sessions.pop(conn_id, None) is None:
            return False
        logging.info("sessions: removed %s (total=%s)", conn_id, len(self._sessions))
        self._broadcast_full_list()
        return True

    def reap(self, now: int, max_idle_ms: int) -> list[str]:
        """Evict every session idle for longer than ``max_idle_ms``.

        Sends a single full-list broadcast when anything was evicted.
        """
        stale = [
            conn_id
            for conn_id, session in self._sessions.items()
            if now - session.last_active > max_idle_ms
        ]
        for conn_id in stale:
            del self._sessions[conn_id]
        if stale:
            logging.info("sessions: reaped %s stale session(s): %s", len(stale), stale)
            self._broadcast_full_list()
        return stale

    def _broadcast_full_list(self) -> None:
        if self._admin is not None:
            self._admin.broadcast_full_list()

    def _broadcast_session_update(self, conn_id: str) -> None:
        if self._admin is not None:
            self._admin.broadcast_session_update(conn_id)
