"""
Command line entry point: ping a host through the system ping binary.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
import sys
from typing import Sequence

from rich.console import Console

from core import HostUnreachable, PingConfiguration, ProcessLaunchFailure


def build_parser() -> argparse.ArgumentParser:
    from config import VERSION

    parser = argparse.ArgumentParser(
        description="RoboPing - run the system ping binary and report the result",
        prog="roboping",
    )
    parser.add_argument("host", help="DNS name or IP address to ping")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument("-b", dest="broadcast", action="store_true", help="Allow pinging a broadcast address")
    parser.add_argument("-c", dest="count", type=int, default=3, help="Number of echo requests (default: 3)")
    parser.add_argument("-d", dest="so_debug", action="store_true", help="Set SO_DEBUG on the socket")
    parser.add_argument("-f", dest="flood", action="store_true", help="Flood ping")
    parser.add_argument("-i", dest="interval", type=int, default=1, help="Seconds between packets (default: 1)")
    parser.add_argument("-t", dest="ttl", type=int, default=50, help="Time To Live (default: 50)")
    parser.add_argument("-w", dest="deadline", type=int, default=1000, help="Deadline in seconds (default: 1000)")
    parser.add_argument("-W", dest="timeout", type=int, default=1000, help="Response timeout in seconds (default: 1000)")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Stream ping output line by line",
    )
    return parser


def configuration_from_args(args: argparse.Namespace) -> PingConfiguration:
    """Translate parsed CLI arguments into a PingConfiguration."""
    builder = (
        PingConfiguration.builder()
        .set_count(args.count)
        .set_interval(args.interval)
        .set_ttl(args.ttl)
        .set_deadline(args.deadline)
        .set_timeout(args.timeout)
    )
    if args.broadcast:
        builder = builder.enable_broadcast()
    if args.so_debug:
        builder = builder.enable_so_debug()
    if args.flood:
        builder = builder.enable_flood()
    return builder.build()


async def run_async_main(args: argparse.Namespace, console: Console) -> int:
    """Run one ping according to ``args`` and return the process exit status."""
    from infrastructure import get_process_manager
    from services import PingService

    service = PingService(configuration_from_args(args))
    try:
        if args.verbose:
            async for line in service.ping_verbose(args.host):
                console.print(line, markup=False, highlight=False)
            return 0
        try:
            await service.ping(args.host)
        except HostUnreachable:
            console.print(f"[bold red]{args.host} unreachable[/bold red]")
            return 1
        console.print(f"[bold green]{args.host} reachable[/bold green]")
        return 0
    except ProcessLaunchFailure as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        return 2
    finally:
        await get_process_manager().cleanup()


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for roboping."""
    args = build_parser().parse_args(argv)

    from config import LOG_DIR, LOG_FILE, LOG_LEVEL, LOG_TRUNCATE_ON_START

    # Create log directory if it doesn't exist
    os.makedirs(LOG_DIR, exist_ok=True)

    logging.basicConfig(
        filename=LOG_FILE,
        filemode='w' if LOG_TRUNCATE_ON_START else 'a',
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
        encoding="utf-8",
    )

    console = Console()
    try:
        status = asyncio.run(run_async_main(args, console))
    except KeyboardInterrupt:
        console.print("\n[bold red]Interrupted[/bold red]")
        status = 130
    sys.exit(status)


if __name__ == "__main__":
    main()
