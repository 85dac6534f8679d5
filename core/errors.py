"""Errors raised by ping invocations."""

from __future__ import annotations

from typing import Sequence


class PingError(Exception):
    """Base class for ping invocation errors."""


class ProcessLaunchFailure(PingError):
    """The OS could not create the ping child process."""

    def __init__(self, command: Sequence[str], cause: OSError) -> None:
        self.command = list(command)
        self.cause = cause
        super().__init__(f"Failed to launch {self.command[0] if self.command else '?'}: {cause}")


class HostUnreachable(PingError):
    """Completion-mode ping exited with a non-zero code."""

    def __init__(self, exit_code: int | None = None) -> None:
        self.exit_code = exit_code
        super().__init__("Host unreachable")
