from __future__ import annotations

import logging

from . import create_app
from .extensions import socketio


def main() -> None:
    app = create_app()
    host = app.config["HOST"]
    port = app.config["PORT"]
    logging.info("%s server running on %s:%s", app.config["APP_NAME"], host, port)
    socketio.run(app, host=host, port=port, debug=app.config["DEBUG"])


if __name__ == "__main__":
    main()
