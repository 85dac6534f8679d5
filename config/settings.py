"""
Application configuration settings.

All configuration variables are defined in settings_model.Settings and can be
overridden via environment variables or a .env file.
"""

from .settings_model import Settings

_settings = Settings()

# ─────────────────────────────────────────────────────────────────────────────
# Version
# ─────────────────────────────────────────────────────────────────────────────

VERSION = _settings.VERSION

# ─────────────────────────────────────────────────────────────────────────────
# Ping Binary
# ─────────────────────────────────────────────────────────────────────────────

PING_BINARY = _settings.PING_BINARY
STDERR_MODE = _settings.STDERR_MODE
OUTPUT_ENCODING = _settings.OUTPUT_ENCODING

# ─────────────────────────────────────────────────────────────────────────────
# Resource Limits
# ─────────────────────────────────────────────────────────────────────────────

MAX_CONCURRENT_PROCESSES = _settings.MAX_CONCURRENT_PROCESSES

# ─────────────────────────────────────────────────────────────────────────────
# Logging
# ─────────────────────────────────────────────────────────────────────────────

LOG_DIR = _settings.LOG_DIR
LOG_FILE = _settings.LOG_FILE
LOG_LEVEL = _settings.LOG_LEVEL

# If True, truncate (clear) log file at startup
LOG_TRUNCATE_ON_START = _settings.LOG_TRUNCATE_ON_START
