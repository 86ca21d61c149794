from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Optional

# Hard limits for a watch party room
MAX_ROOM_MEMBERS = 8
MAX_CHAT_MESSAGES = 50


@dataclass(frozen=True)
class ChatMessage:
    # Strictly increasing per room; doubles as the send time in epoch milliseconds
    id: int
    user_id: str
    user_name: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "userId": self.user_id,
            "userName": self.user_name,
            "text": self.text,
            "timestamp": self.id,
        }


# A room is a synchronized-playback group with a single leader
@dataclass
class Room:
    # Short numeric code clients use to join
    id: str
    # Member with playback-control authority; always one of ``members``
    leader_id: str
    # Member connection ids; dict keys keep insertion order for leader succession
    members: dict[str, None] = field(default_factory=dict)
    # Opaque description of what is playing
    current_media: Any = None
    is_playing: bool = False
    current_time: float = 0
    # Bounded chat log, oldest first
    messages: deque = field(default_factory=lambda: deque(maxlen=MAX_CHAT_MESSAGES))

    @property
    def group(self) -> str:
        return f"room:{self.id}"

    @property
    def is_full(self) -> bool:
        return len(self.members) >= MAX_ROOM_MEMBERS

    def add_member(self, conn_id: str) -> None:
        self.members[conn_id] = None

    def remove_member(self, conn_id: str) -> None:
        self.members.pop(conn_id, None)

    def next_leader(self) -> Optional[str]:
        """Earliest-added remaining member, or None when the room is empty."""
        return next(iter(self.members), None)

    def append_message(self, user_id: str, user_name: str, text: str, now: int) -> ChatMessage:
        last_id = self.messages[-1].id if self.messages else 0
        message = ChatMessage(id=max(now, last_id + 1), user_id=user_id, user_name=user_name, text=text)
        # deque(maxlen=...) evicts the oldest entry once the bound is exceeded
        self.messages.append(message)
        return message

    def snapshot(self, conn_id: str, members: list[dict[str, Any]]) -> dict[str, Any]:
        return {
            "roomId": self.id,
            "isLeader": conn_id == self.leader_id,
            "leaderId": self.leader_id,
            "members": members,
            "currentMedia": self.current_media,
            "isPlaying": self.is_playing,
            "currentTime": self.current_time,
            "messages": [message.to_dict() for message in self.messages],
        }
