"""Configuration package: environment-driven settings."""

from .settings_model import Settings
from .settings import (
    VERSION,
    PING_BINARY,
    STDERR_MODE,
    OUTPUT_ENCODING,
    MAX_CONCURRENT_PROCESSES,
    LOG_DIR,
    LOG_FILE,
    LOG_LEVEL,
    LOG_TRUNCATE_ON_START,
)

__all__ = [
    "Settings",
    "VERSION",
    "PING_BINARY",
    "STDERR_MODE",
    "OUTPUT_ENCODING",
    "MAX_CONCURRENT_PROCESSES",
    "LOG_DIR",
    "LOG_FILE",
    "LOG_LEVEL",
    "LOG_TRUNCATE_ON_START",
]
