from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Keys owned by the server; caller-supplied values under these names are ignored
RESERVED_KEYS = frozenset({"id", "lastActive", "isLive"})


# A session is the ephemeral record kept for one live connection
@dataclass
class Session:
    # Connection id the session belongs to
    id: str
    # Caller fields plus the distinguished ones (photo, screenPreview, ...);
    # heartbeats shallow-merge here and client_data replaces single keys
    fields: dict[str, Any] = field(default_factory=dict)
    # Epoch milliseconds of the last event received from the connection
    last_active: int = 0
    # True for as long as the session is registered
    is_live: bool = True

    def merge(self, fields: dict[str, Any]) -> None:
        self.fields.update(_clean(fields))

    def set_field(self, name: str, value: Any) -> None:
        self.fields[name] = value

    def touch(self, now: int) -> None:
        self.last_active = max(self.last_active, now)
        self.is_live = True

    @property
    def name(self) -> Any:
        return self.fields.get("name")

    def to_dict(self) -> dict[str, Any]:
        payload = dict(self.fields)
        payload["id"] = self.id
        payload["lastActive"] = self.last_active
        payload["isLive"] = self.is_live
        return payload


def _clean(fields: Any) -> dict[str, Any]:
    if not isinstance(fields, dict):
        return {}
    return {key: value for key, value in fields.items() if key not in RESERVED_KEYS}


def new_session(conn_id: str, fields: Any, now: int) -> Session:
    return Session(id=conn_id, fields=_clean(fields), last_active=now, is_live=True)
