from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional, TYPE_CHECKING

from flask import current_app
from flask_socketio import SocketIO

if TYPE_CHECKING:
    from ..services.coordinator import Coordinator


class ConnectionChannel(ABC):
    """Delivery primitives the coordination services are allowed to use."""

    @abstractmethod
    def send(self, peer_id: str, event: str, payload: Any = None) -> None:
        ...

    @abstractmethod
    def join_group(self, peer_id: str, group_id: str) -> None:
        ...

    @abstractmethod
    def leave_group(self, peer_id: str, group_id: str) -> None:
        ...

    @abstractmethod
    def group_members(self, group_id: str) -> list[str]:
        ...

    def send_group(
        self,
        group_id: str,
        event: str,
        payload: Any = None,
        exclude: Optional[str] = None,
    ) -> None:
        for peer_id in self.group_members(group_id):
            if peer_id != exclude:
                self.send(peer_id, event, payload)


class SocketIOChannel(ConnectionChannel):
    """Connection channel backed by Flask-SocketIO.

    Groups are tracked here (group id -> connection ids) rather than with
    Socket.IO rooms, so fan-out is a plain loop of per-connection emits.
    """

    def __init__(self, socketio: SocketIO, namespace: str = "/"):
        self.socketio = socketio
        self.namespace = namespace
        self._groups: dict[str, dict[str, None]] = {}

    def send(self, peer_id: str, event: str, payload: Any = None) -> None:
        if payload is None:
            self.socketio.emit(event, to=peer_id, namespace=self.namespace)
        else:
            self.socketio.emit(event, payload, to=peer_id, namespace=self.namespace)

    def join_group(self, peer_id: str, group_id: str) -> None:
        self._groups.setdefault(group_id, {})[peer_id] = None

    def leave_group(self, peer_id: str, group_id: str) -> None:
        members = self._groups.get(group_id)
        if members is None:
            return
        members.pop(peer_id, None)
        if not members:
            del self._groups[group_id]
            logging.debug("channel: group %s emptied", group_id)

    def group_members(self, group_id: str) -> list[str]:
        return list(self._groups.get(group_id, ()))


def get_coordinator() -> "Coordinator":
    return current_app.extensions["sentinel"]
