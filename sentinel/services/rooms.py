"""
Watch party rooms: membership, leader election, synchronized playback and
a bounded chat log.

A connection belongs to at most one room. ``_member_rooms`` maps each
member connection to its room so room-scoped events never scan every room;
it is updated on every create, join, leave and destroy.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..errors import RoomFullError, RoomNotFoundError
from ..helpers.ws import ConnectionChannel
from ..lib.events import SyncAction, SyncActionKind, as_number
from ..lib.utils import generate_room_id, now_ms
from ..models import ChatMessage, Room
from ..models.room import MAX_ROOM_MEMBERS
from .sessions import SessionRegistry

DEFAULT_USER_NAME = "Anonymous"


class RoomManager:
    def __init__(
        self,
        channel: ConnectionChannel,
        sessions: SessionRegistry,
        clock: Callable[[], int] = now_ms,
        id_factory: Callable[..., str] = generate_room_id,
    ):
        self.channel = channel
        self.sessions = sessions
        self.clock = clock
        self.id_factory = id_factory
        self._rooms: dict[str, Room] = {}
        self._member_rooms: dict[str, str] = {}

    def get(self, room_id: str) -> Optional[Room]:
        return self._rooms.get(room_id)

    def room_of(self, conn_id: str) -> Optional[Room]:
        room_id = self._member_rooms.get(conn_id)
        return self._rooms.get(room_id) if room_id is not None else None

    def __len__(self) -> int:
        return len(self._rooms)

    def create_room(self, creator_id: str, media: Any = None) -> Room:
        # One room per connection: creating a new room leaves the current one
        self.leave_room(creator_id)

        room_id = self.id_factory(self._rooms)
        room = Room(id=room_id, leader_id=creator_id, current_media=media)
        room.add_member(creator_id)
        self._rooms[room_id] = room
        self._member_rooms[creator_id] = room_id
        self.channel.join_group(creator_id, room.group)
        logging.info("rooms: %s created room %s", creator_id, room_id)

        self.channel.send(creator_id, "room_created", self._snapshot(room, creator_id))
        return room

    def join_room(self, conn_id: str, room_id: Any, fallback_identity: Any = None) -> Room:
        room = self._rooms.get(room_id) if isinstance(room_id, str) else None
        if room is None:
            raise RoomNotFoundError(str(room_id))
        if conn_id in room.members:
            self.channel.send(conn_id, "room_joined", self._snapshot(room, conn_id))
            return room
        if room.is_full:
            raise RoomFullError(room.id, MAX_ROOM_MEMBERS)

        self.leave_room(conn_id)

        room.add_member(conn_id)
        self._member_rooms[conn_id] = room.id
        self.channel.join_group(conn_id, room.group)
        logging.info("rooms: %s joined room %s (members=%s)", conn_id, room.id, len(room.members))

        self.channel.send(conn_id, "room_joined", self._snapshot(room, conn_id))
        session = self.sessions.get(conn_id)
        user = session.to_dict() if session is not None else fallback_identity
        self.channel.send_group(
            room.group,
            "room_user_joined",
            {"userId": conn_id, "user": user},
            exclude=conn_id,
        )
        return room

    def dispatch_sync_action(self, conn_id: str, action: Any) -> bool:
        room = self.room_of(conn_id)
        if room is None:
            return False
        if not isinstance(action, SyncAction):
            action = SyncAction.parse(action)
        if action is None:
            logging.debug("rooms: ignoring malformed sync_action from %s", conn_id)
            return False

        if action.kind is SyncActionKind.CHAT:
            return self.post_chat(conn_id, action.payload) is not None

        if conn_id != room.leader_id:
            logging.debug("rooms: dropping %s from non-leader %s in %s", action.kind.value, conn_id, room.id)
            return False
        self._apply_playback(room, action)

        self.channel.send_group(room.group, "sync_update", action.to_dict(), exclude=conn_id)
        return True

    def post_chat(self, conn_id: str, text: Any) -> Optional[ChatMessage]:
        room = self.room_of(conn_id)
        if room is None:
            return None
        if isinstance(text, dict) and "text" in text:
            text = text["text"]
        if not isinstance(text, str):
            text = "" if text is None else str(text)
        message = room.append_message(conn_id, self._user_name(conn_id), text, self.clock())
        self.channel.send_group(room.group, "room_message", message.to_dict())
        return message

    def leave_room(self, conn_id: str) -> Optional[Room]:
        room = self.room_of(conn_id)
        if room is None:
            return None

        room.remove_member(conn_id)
        del self._member_rooms[conn_id]
        self.channel.leave_group(conn_id, room.group)

        if not room.members:
            del self._rooms[room.id]
            logging.info("rooms: room %s destroyed", room.id)
            return room

        self.channel.send_group(room.group, "room_user_left", {"userId": conn_id})
        if room.leader_id == conn_id:
            room.leader_id = room.next_leader()
            logging.info("rooms: %s is the new leader of %s", room.leader_id, room.id)
            self.channel.send_group(room.group, "room_leader_changed", {"newLeaderId": room.leader_id})
            self.channel.send(room.leader_id, "you_are_leader", {"roomId": room.id})
        return room

    def _apply_playback(self, room: Room, action: SyncAction) -> None:
        position = as_number(action.payload)
        if action.kind is SyncActionKind.PLAY:
            room.is_playing = True
            if position is not None:
                room.current_time = position
        elif action.kind is SyncActionKind.PAUSE:
            room.is_playing = False
            if position is not None:
                room.current_time = position
        elif action.kind is SyncActionKind.SEEK:
            # Non-numeric positions are still relayed; only the stored time is skipped
            if position is not None:
                room.current_time = position
        elif action.kind is SyncActionKind.URL:
            room.current_media = action.payload
            room.current_time = 0
            room.is_playing = False
        else:
            raise ValueError(f"unhandled playback action {action.kind!r}")

    def _snapshot(self, room: Room, conn_id: str) -> dict[str, Any]:
        return room.snapshot(conn_id, self._resolve_members(room))

    def _resolve_members(self, room: Room) -> list[dict[str, Any]]:
        members = []
        for member_id in room.members:
            session = self.sessions.get(member_id)
            members.append(session.to_dict() if session is not None else {"id": member_id})
        return members

    def _user_name(self, conn_id: str) -> str:
        session = self.sessions.get(conn_id)
        name = session.name if session is not None else None
        return str(name) if name else DEFAULT_USER_NAME
