"""FastAPI integration for neo-access."""

from .dependencies import require_access, AccessGuard
from .exception_handlers import register_exception_handlers, neo_access_exception_handler

__all__ = [
    "require_access",
    "AccessGuard",
    "register_exception_handlers",
    "neo_access_exception_handler",
]
