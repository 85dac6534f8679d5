"""Ping invocation services package."""

from .ping_service import PingService, TRAILER_TEMPLATE

__all__ = [
    "PingService",
    "TRAILER_TEMPLATE",
]
