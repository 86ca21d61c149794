from __future__ import annotations

import logging

from flask import request

from ...extensions import socketio
from ...helpers.ws import get_coordinator


def register() -> None:
    @socketio.on("connect")
    def _on_connect(*_args):
        logging.info("SOCK connect sid=%s ua=%s", request.sid, request.headers.get("User-Agent"))
        socketio.emit("hello", {"id": request.sid}, to=request.sid)

    @socketio.on("disconnect")
    def _on_disconnect(*_args):
        try:
            get_coordinator().disconnect(request.sid)
        except Exception:
            logging.exception("disconnect handler error")
        logging.info("SOCK disconnect sid=%s", request.sid)

    @socketio.on_error_default
    def _default_error_handler(e):
        logging.exception("SOCK error sid=%s: %s", getattr(request, "sid", None), e)
