"""
Main entry point for the speedview command.
"""

import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console

from .config import RunConfig
from .services import MeasurementEngine, ReplayEngine, SimulatedEngine
from .utils.logging import setup_logging
from .utils.ui import SpeedDashboard

EXIT_INTERRUPTED = 130


async def main(
    config: RunConfig,
    engine: Optional[MeasurementEngine] = None,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> int:
    """
    Run one measurement view.

    Args:
        config: Run options
        engine: Snapshot producer (simulated when omitted)
        console: Console for stdout
        error_console: Console for stderr

    Returns:
        Process exit status
    """
    dashboard = SpeedDashboard(
        config,
        engine or SimulatedEngine(),
        console=console,
        error_console=error_console,
    )
    return await dashboard.run()


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        prog="speedview",
        description="Live terminal view of an internet speed measurement",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples\n"
            "  $ speedview --upload > file && cat file\n"
            "  17 Mbps\n"
            "  4.4 Mbps\n"
        ),
    )

    parser.add_argument(
        "-u",
        "--upload",
        action="store_true",
        help="Measure upload speed in addition to download speed",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Include info on latency and request metadata (implies --upload)",
    )
    parser.add_argument(
        "--replay",
        type=Path,
        default=None,
        metavar="FILE",
        help="Play back newline-delimited JSON snapshots instead of simulating",
    )
    parser.add_argument(
        "--replay-delay",
        type=float,
        default=0.0,
        metavar="SECONDS",
        help="Pause between replayed snapshots",
    )
    parser.add_argument(
        "--no-check",
        action="store_true",
        help="Skip resolving the measurement host before starting",
    )
    return parser


def cli(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point with argument parsing."""
    args = build_parser().parse_args(argv)

    config = RunConfig.from_flags(
        upload=args.upload,
        verbose=args.verbose,
        check_reachability=not args.no_check,
    )
    setup_logging(verbose=config.debug)

    engine: MeasurementEngine
    if args.replay is not None:
        engine = ReplayEngine(args.replay, step_delay=args.replay_delay)
    else:
        engine = SimulatedEngine()

    try:
        code = asyncio.run(main(config, engine))
    except KeyboardInterrupt:
        code = EXIT_INTERRUPTED
    sys.exit(code)


if __name__ == "__main__":
    cli()
