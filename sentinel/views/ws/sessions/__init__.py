from __future__ import annotations

from .client_data import register as register_client_data
from .heartbeat import register as register_heartbeat
from .register_user import register as register_register_user

__all__ = [
    "register_socket_handlers",
]


def register_socket_handlers() -> None:
    register_register_user()
    register_heartbeat()
    register_client_data()
