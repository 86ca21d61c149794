from __future__ import annotations

from typing import Any

import pytest

from sentinel import create_app
from sentinel.extensions import socketio
from sentinel.helpers.ws import ConnectionChannel
from sentinel.services.coordinator import Coordinator

ADMIN_EMAIL = "admin@example.com"


class RecordingChannel(ConnectionChannel):
    """In-memory channel that records every delivery."""

    def __init__(self):
        self.sent: list[tuple[str, str, Any]] = []
        self.groups: dict[str, dict[str, None]] = {}

    def send(self, peer_id, event, payload=None):
        self.sent.append((peer_id, event, payload))

    def join_group(self, peer_id, group_id):
        self.groups.setdefault(group_id, {})[peer_id] = None

    def leave_group(self, peer_id, group_id):
        self.groups.get(group_id, {}).pop(peer_id, None)

    def group_members(self, group_id):
        return list(self.groups.get(group_id, ()))

    def events_for(self, peer_id: str) -> list[tuple[str, Any]]:
        return [(event, payload) for peer, event, payload in self.sent if peer == peer_id]

    def named(self, event: str) -> list[tuple[str, Any]]:
        return [(peer, payload) for peer, name, payload in self.sent if name == event]

    def clear(self) -> None:
        self.sent.clear()


class FakeClock:
    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


@pytest.fixture
def channel():
    return RecordingChannel()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def coordinator(channel, clock):
    return Coordinator(channel, admin_identities=[ADMIN_EMAIL], clock=clock)


@pytest.fixture
def app():
    return create_app(
        {
            "TESTING": True,
            "ADMIN_EMAILS": ADMIN_EMAIL,
            "REAPER_ENABLED": False,
            "SOCKETIO_ASYNC_MODE": "threading",
        }
    )


@pytest.fixture
def connect(app):
    clients = []

    def _connect():
        client = socketio.test_client(app)
        clients.append(client)
        hello = [msg for msg in client.get_received() if msg["name"] == "hello"]
        return client, hello[0]["args"][0]["id"]

    yield _connect
    for client in clients:
        if client.is_connected():
            client.disconnect()
