import os
from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """
    Application configuration settings using Pydantic Settings.
    Reads from environment variables and provides type safety and validation.
    """

    # ─────────────────────────────────────────────────────────────────────────────
    # Version
    # ─────────────────────────────────────────────────────────────────────────────
    VERSION: str = "1.0.0"
    # Also update pyproject.toml (version)

    # ─────────────────────────────────────────────────────────────────────────────
    # Ping Binary
    # ─────────────────────────────────────────────────────────────────────────────
    PING_BINARY: str = Field(
        default="/system/bin/ping",
        description="Absolute path of the ping binary (no PATH lookup)",
    )
    STDERR_MODE: Literal["discard", "inherit", "merge"] = Field(
        default="discard",
        description="What happens to the child's stderr: dropped, passed through, or merged into stdout",
    )
    OUTPUT_ENCODING: str = Field(
        default="",
        description="Codec for the child's stdout; empty means the locale's preferred encoding",
    )

    # ─────────────────────────────────────────────────────────────────────────────
    # Resource Limits
    # ─────────────────────────────────────────────────────────────────────────────
    MAX_CONCURRENT_PROCESSES: int = Field(default=50, ge=1)

    # ─────────────────────────────────────────────────────────────────────────────
    # Logging
    # ─────────────────────────────────────────────────────────────────────────────
    LOG_DIR: str = Field(default=os.path.expanduser("~/.roboping"))
    LOG_FILE: str = Field(default_factory=lambda: os.path.join(os.path.expanduser("~/.roboping"), "roboping.log"))
    LOG_LEVEL: str = "INFO"
    LOG_TRUNCATE_ON_START: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"
    )
