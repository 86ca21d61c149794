from __future__ import annotations

from .command import register as register_admin_command
from .login import register as register_admin_login

__all__ = [
    "register_socket_handlers",
]


def register_socket_handlers() -> None:
    register_admin_login()
    register_admin_command()
