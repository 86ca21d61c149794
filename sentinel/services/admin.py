from __future__ import annotations

import logging
from typing import Any, Iterable

from ..errors import AuthorizationError
from ..helpers.ws import ConnectionChannel
from ..lib.utils import split_csv
from .sessions import SessionRegistry


class AdminChannel:
    """Authorization gate plus session fan-out to authorized observers."""

    def __init__(
        self,
        channel: ConnectionChannel,
        sessions: SessionRegistry,
        allowed_identities: Iterable[str] | str = (),
    ):
        self.channel = channel
        self.sessions = sessions
        self.allowed = frozenset(split_csv(allowed_identities))
        self._admins: dict[str, None] = {}

    def is_admin(self, conn_id: str) -> bool:
        return conn_id in self._admins

    @property
    def admins(self) -> list[str]:
        return list(self._admins)

    def authorize(self, identity: Any) -> None:
        if not isinstance(identity, str) or identity not in self.allowed:
            raise AuthorizationError("Unauthorized email")

    def login(self, conn_id: str, identity: Any) -> bool:
        try:
            self.authorize(identity)
        except AuthorizationError as e:
            logging.warning("admin: login denied for %s", conn_id)
            self.channel.send(conn_id, "admin_auth_error", str(e))
            return False
        self._admins[conn_id] = None
        logging.info("admin: %s logged in (admins=%s)", conn_id, len(self._admins))
        self.channel.send(conn_id, "admin_auth_success", True)
        self.channel.send(conn_id, "sessions_list", self.sessions.snapshot())
        return True

    def logout(self, conn_id: str) -> bool:
        if conn_id not in self._admins:
            return False
        del self._admins[conn_id]
        logging.info("admin: %s logged out (admins=%s)", conn_id, len(self._admins))
        return True

    def issue_command(self, conn_id: str, target_id: Any, command: Any) -> bool:
        if not self.is_admin(conn_id):
            logging.debug("admin: dropping command from non-admin %s", conn_id)
            return False
        if not isinstance(target_id, str) or not target_id:
            return False
        if target_id not in self.sessions:
            logging.debug("admin: relaying command to %s which has no session", target_id)
        self.channel.send(target_id, "server_command", command)
        return True

    def broadcast_full_list(self) -> None:
        if not self._admins:
            return
        payload = self.sessions.snapshot()
        for admin_id in self.admins:
            self.channel.send(admin_id, "sessions_list", payload)

    def broadcast_session_update(self, conn_id: str) -> None:
        if not self._admins:
            return
        session = self.sessions.get(conn_id)
        if session is None:
            return
        payload = session.to_dict()
        for admin_id in self.admins:
            self.channel.send(admin_id, "session_update", payload)
