"""
Stale-session reaper.

Periodically evicts sessions whose connection went away without a clean
disconnect. Runs as a single background task per process.
"""
from __future__ import annotations

import logging
import time

from flask import Flask

from ..extensions import socketio
from ..helpers.ws import get_coordinator

# Guard to ensure we start only one reaper task
_reaper_started: bool = False


def _reap_forever(app: Flask) -> None:
    with app.app_context():
        interval = app.config.get("REAPER_INTERVAL_SECONDS", 60)

    while True:
        socketio.sleep(interval)
        start_time = time.perf_counter_ns()
        try:
            with app.app_context():
                get_coordinator().reap()
        except Exception:
            logging.exception("reaper: error during sweep")

        elapsed_time = time.perf_counter_ns() - start_time
        logging.debug("reaper: sweep completed in %s milliseconds", elapsed_time / 1000000)


def start_reaper_if_needed(app: Flask) -> bool:
    """Start the reaper background task unless it is disabled or already running."""
    global _reaper_started
    if _reaper_started:
        return False
    if not app.config.get("REAPER_ENABLED", True):
        app.logger.info("reaper: disabled by configuration")
        return False
    socketio.start_background_task(_reap_forever, app)
    _reaper_started = True
    app.logger.info(
        "reaper: started (interval=%ss, max_idle=%ss)",
        app.config.get("REAPER_INTERVAL_SECONDS"),
        app.config.get("SESSION_MAX_IDLE_SECONDS"),
    )
    return True
