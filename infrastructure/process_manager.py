import asyncio
import logging
from typing import AsyncIterator, List, Set

from core.errors import ProcessLaunchFailure


def exit_status(returncode: int) -> int:
    """
    Convert an asyncio return code to a shell-style exit status.

    asyncio reports death by signal N as -N; shells report it as 128 + N.
    """
    if returncode < 0:
        return 128 - returncode
    return returncode


class ProcessManager:
    """
    Centralized manager for child processes to ensure proper cleanup.
    """
    def __init__(self, max_concurrent: int = 50) -> None:
        self._active_processes: Set[asyncio.subprocess.Process] = set()
        self._lock = asyncio.Lock()
        self._semaphore = asyncio.Semaphore(max_concurrent)

    async def create_process(self, *args, **kwargs) -> asyncio.subprocess.Process:
        """
        Create a subprocess and register it for cleanup.
        Wraps asyncio.create_subprocess_exec.
        Blocks if concurrency limit is reached.

        Raises:
            ProcessLaunchFailure: If the OS refuses to start the binary
        """
        # Acquire semaphore before creating process
        await self._semaphore.acquire()

        try:
            process = await asyncio.create_subprocess_exec(*args, **kwargs)
        except OSError as exc:
            self._semaphore.release()
            logging.warning(f"Failed to launch {args[0] if args else '?'}: {exc}")
            raise ProcessLaunchFailure(args, exc) from exc
        except BaseException:
            self._semaphore.release()
            raise

        logging.debug(f"Started pid {process.pid}: {list(args)}")
        async with self._lock:
            self._active_processes.add(process)
        return process

    async def unregister(self, process: asyncio.subprocess.Process) -> None:
        """Unregister a process that has completed and release semaphore."""
        async with self._lock:
            if process in self._active_processes:
                self._active_processes.discard(process)
                self._semaphore.release()

    async def read_lines(
        self,
        process: asyncio.subprocess.Process,
        encoding: str = "utf-8",
        errors: str = "replace",
    ) -> AsyncIterator[str]:
        """
        Yield decoded stdout lines of a process, terminators stripped, until EOF.

        The process must have been created with stdout=PIPE.
        """
        if process.stdout is None:
            return
        while True:
            raw = await self._read_line(process.stdout)
            if not raw:
                return
            yield raw.decode(encoding, errors=errors).rstrip("\r\n")

    @staticmethod
    async def _read_line(stream: asyncio.StreamReader) -> bytes:
        """Read one line of any length; the StreamReader limit only bounds each chunk."""
        chunks: List[bytes] = []
        while True:
            try:
                chunks.append(await stream.readuntil(b"\n"))
                break
            except asyncio.IncompleteReadError as exc:
                # EOF: the last line may lack a terminator
                chunks.append(exc.partial)
                break
            except asyncio.LimitOverrunError as exc:
                chunks.append(await stream.readexactly(exc.consumed))
        return b"".join(chunks)

    async def _kill_and_reap(self, process: asyncio.subprocess.Process) -> None:
        logging.warning(f"Killing pid {process.pid}")
        try:
            process.kill()
        except ProcessLookupError:
            pass
        # Wait for the process to terminate to avoid zombies
        await process.wait()

    async def release(self, process: asyncio.subprocess.Process, kill: bool = False) -> None:
        """
        Reap a process on any exit path and unregister it.

        A child that is still running is left to reach its own exit: remaining
        stdout is drained so it cannot block on a full pipe. With ``kill``, or
        if the caller is cancelled while waiting, the child is killed instead.
        """
        try:
            if process.returncode is None:
                if kill:
                    await self._kill_and_reap(process)
                    return
                try:
                    if process.stdout is not None:
                        await process.stdout.read()
                    await process.wait()
                except asyncio.CancelledError:
                    await self._kill_and_reap(process)
                    raise
        finally:
            await self.unregister(process)

    async def run_to_exit(self, cmd: List[str], **kwargs) -> int:
        """
        Run a command and wait for it to exit.

        Args:
            cmd: Command and arguments list
            **kwargs: Additional arguments passed to create_subprocess_exec

        Returns:
            The process exit code
        """
        kwargs.setdefault("stdout", asyncio.subprocess.DEVNULL)
        kwargs.setdefault("stderr", asyncio.subprocess.DEVNULL)

        process = await self.create_process(*cmd, **kwargs)
        try:
            returncode = await process.wait()
        except asyncio.CancelledError:
            await self.release(process, kill=True)
            raise
        finally:
            await self.release(process)
        returncode = exit_status(returncode)
        logging.info(f"pid {process.pid} exited with code {returncode}")
        return returncode

    async def cleanup(self) -> None:
        """Terminate all tracked processes."""
        async with self._lock:
            if not self._active_processes:
                return

            count = len(self._active_processes)
            logging.info(f"Cleaning up {count} active subprocesses...")
            processes = list(self._active_processes)
            self._active_processes.clear()
            for _ in processes:
                self._semaphore.release()

        for proc in processes:
            try:
                if proc.returncode is None:
                    proc.terminate()
            except ProcessLookupError:
                pass

        # Give them a chance to terminate gracefully
        await asyncio.sleep(0.1)

        for proc in processes:
            try:
                if proc.returncode is None:
                    logging.warning(f"Process {proc.pid} did not terminate, killing...")
                    proc.kill()
            except ProcessLookupError:
                pass
            await proc.wait()

# Global instance
_global_manager: ProcessManager | None = None

def get_process_manager() -> ProcessManager:
    global _global_manager
    if _global_manager is None:
        from config import MAX_CONCURRENT_PROCESSES
        _global_manager = ProcessManager(max_concurrent=MAX_CONCURRENT_PROCESSES)
    return _global_manager
