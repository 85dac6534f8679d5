from __future__ import annotations

import asyncio
import locale
import logging
from typing import Any, AsyncIterator

from config import OUTPUT_ENCODING, PING_BINARY, STDERR_MODE
from core.errors import HostUnreachable
from core.ping_configuration import PingConfiguration
from infrastructure import ProcessManager, exit_status, get_process_manager

TRAILER_TEMPLATE = "ping finished with code - {code}"


class PingService:
    """
    Runs the system ping binary with a fixed configuration.

    ``ping`` resolves once the child exits; ``ping_verbose`` streams the
    child's stdout followed by a trailer line carrying the exit code.
    Every call spawns its own child process; nothing is shared between calls.
    """

    def __init__(
        self,
        configuration: PingConfiguration | None = None,
        *,
        binary: str = PING_BINARY,
        stderr_mode: str = STDERR_MODE,
        encoding: str = OUTPUT_ENCODING,
        process_manager: ProcessManager | None = None,
    ) -> None:
        self.configuration = configuration if configuration is not None else PingConfiguration()
        self.binary = binary
        self.stderr_mode = stderr_mode
        self.encoding = encoding or locale.getpreferredencoding(False)
        self.process_manager = process_manager if process_manager is not None else get_process_manager()

    def build_command(self, hostname: str) -> list[str]:
        """Build the argument vector for the ping binary. Order matters to ping's parser."""
        config = self.configuration
        cmd = [self.binary]
        if config.broadcast_enable:
            cmd.append("-b")
        cmd.append(f"-c {config.count}")
        if config.so_debug_enable:
            cmd.append("-d")
        if config.flood_network_enable:
            cmd.append("-f")
        cmd.append(f"-i {config.interval}")
        cmd.append(f"-t {config.ttl}")
        cmd.append(f"-w {config.deadline}")
        cmd.append(f"-W {config.timeout}")
        cmd.append(hostname)
        return cmd

    def _stderr_target(self, stdout_target: int) -> Any:
        if self.stderr_mode == "inherit":
            return None
        if self.stderr_mode == "merge":
            # Completion mode discards stdout, so merged stderr goes with it
            if stdout_target == asyncio.subprocess.DEVNULL:
                return asyncio.subprocess.DEVNULL
            return asyncio.subprocess.STDOUT
        return asyncio.subprocess.DEVNULL

    async def ping(self, hostname: str) -> None:
        """
        Ping a host and wait for the binary to exit.

        Raises:
            HostUnreachable: If ping exits with a non-zero code
            ProcessLaunchFailure: If the binary could not be started
        """
        stdout = asyncio.subprocess.DEVNULL
        returncode = await self.process_manager.run_to_exit(
            self.build_command(hostname),
            stdout=stdout,
            stderr=self._stderr_target(stdout),
        )
        if returncode != 0:
            logging.info(f"ping {hostname} failed with code {returncode}")
            raise HostUnreachable(returncode)

    async def ping_verbose(self, hostname: str) -> AsyncIterator[str]:
        """
        Ping a host and yield each stdout line as it arrives.

        The last line is always ``ping finished with code - <N>``. A non-zero
        exit is reported only through that line. The child is spawned on first
        iteration.

        Raises:
            ProcessLaunchFailure: If the binary could not be started
        """
        stdout = asyncio.subprocess.PIPE
        process = await self.process_manager.create_process(
            *self.build_command(hostname),
            stdout=stdout,
            stderr=self._stderr_target(stdout),
        )
        try:
            async for line in self.process_manager.read_lines(process, encoding=self.encoding):
                yield line
            returncode = exit_status(await process.wait())
            logging.info(f"ping {hostname} finished with code {returncode}")
            await self.process_manager.unregister(process)
            yield TRAILER_TEMPLATE.format(code=returncode)
        except asyncio.CancelledError:
            await self.process_manager.release(process, kill=True)
            raise
        finally:
            await self.process_manager.release(process)
