"""Infrastructure layer for child process management."""

from .process_manager import ProcessManager, exit_status, get_process_manager

__all__ = [
    "ProcessManager",
    "exit_status",
    "get_process_manager",
]
