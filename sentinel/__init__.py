from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask, Response
from flask_cors import CORS

from .config import Config
from .extensions import socketio
from .helpers.ws import SocketIOChannel
from .lib.utils import split_csv
from .services.coordinator import Coordinator
from .services.reaper import start_reaper_if_needed
from .views.ws import register_socket_handlers

BANNER = "Sentinel Server Running. Ready for connections."


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    origins_cfg = app.config["CORS_ORIGINS"]
    if origins_cfg.strip() == "*":
        allowed_origins = "*"
    else:
        allowed_origins = split_csv(origins_cfg)
    CORS(app, resources={r"/*": {"origins": allowed_origins}})

    socketio_kwargs: dict[str, Any] = {"cors_allowed_origins": allowed_origins}
    if app.config.get("SOCKETIO_ASYNC_MODE"):
        socketio_kwargs["async_mode"] = app.config["SOCKETIO_ASYNC_MODE"]
    socketio.init_app(app, **socketio_kwargs)

    app.extensions["sentinel"] = Coordinator(
        SocketIOChannel(socketio),
        admin_identities=app.config["ADMIN_EMAILS"],
        max_idle_ms=int(app.config["SESSION_MAX_IDLE_SECONDS"]) * 1000,
    )

    register_routes(app)
    # Handlers bind to the server created by init_app above
    register_socket_handlers()
    start_reaper_if_needed(app)
    return app


def register_routes(app: Flask) -> None:
    @app.get("/")
    def health():
        return Response(BANNER, mimetype="text/plain")
