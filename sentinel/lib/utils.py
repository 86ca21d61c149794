from __future__ import annotations

import secrets
import time
from typing import Container, Iterable


def now_ms() -> int:
    return int(time.time() * 1000)


def generate_room_id(taken: Container[str] = (), length: int = 6) -> str:
    """Return a random fixed-width numeric room id not present in ``taken``."""
    while True:
        room_id = "".join(secrets.choice("0123456789") for _ in range(length))
        if room_id not in taken:
            return room_id


def split_csv(value: str | Iterable[str] | None) -> list[str]:
    """Split a comma-separated config value, dropping blanks."""
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [item.strip() for item in value if item and item.strip()]
