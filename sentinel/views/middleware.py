from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable, Optional

from flask import request

from ..helpers.ws import get_coordinator


def _event_name() -> Optional[str]:
    try:
        if getattr(request, "event", None):
            return request.event.get("message")
    except Exception:
        return None
    return None


def with_connection(handler: Callable) -> Callable:
    """
    Decorator for socket handlers that act on behalf of the calling connection.

    Resolves the app's coordinator and the caller's connection id and passes
    (coordinator, conn_id, data) to the handler. Any exception escaping the
    handler is logged with the event name and swallowed so the registries are
    left as the handler last saw them.

    Usage:
        @socketio.on("heartbeat")
        @with_connection
        def _on_heartbeat(coordinator, conn_id, data):
            ...
    """
    @wraps(handler)
    def wrapper(data: Any = None, *_args) -> None:
        conn_id = request.sid
        try:
            handler(get_coordinator(), conn_id, data)
        except Exception:
            logging.exception(
                "%s handler error (sid=%s, event=%s)",
                handler.__name__,
                conn_id,
                _event_name(),
            )
    return wrapper


def require_room_member(handler: Callable) -> Callable:
    """
    Decorator for room-scoped handlers; use after ``with_connection``.

    Events from a connection that is not in any room are dropped quietly.
    """
    @wraps(handler)
    def wrapper(coordinator, conn_id: str, data: Any) -> None:
        room = coordinator.rooms.room_of(conn_id)
        if room is None:
            logging.debug(
                "require_room_member: %s is not in a room (handler=%s, event=%s)",
                conn_id,
                handler.__name__,
                _event_name(),
            )
            return
        handler(coordinator, conn_id, data)
    return wrapper
