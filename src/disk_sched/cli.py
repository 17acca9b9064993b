"""Command-line front end: ``disk-sched <initial> <LEFT|RIGHT>``.

Loads the request file, runs all six algorithms, and prints the
report.  This is the only place that prints or chooses exit codes;
everything it calls raises typed errors instead.

Exit status:
    - ``0`` — success.
    - ``1`` — rejected input (bad head, bad direction, unreadable file).
    - ``2`` — wrong arguments (reported by argparse).
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from disk_sched.config import ConfigError, DiskConfig, load_config
from disk_sched.disk import run_all
from disk_sched.loader import LoaderError, load_requests, parse_direction, parse_head
from disk_sched.logging import Logger, LogLevel
from disk_sched.report import format_comparison, format_report

if TYPE_CHECKING:
    from collections.abc import Sequence

_LOG_SOURCE = "cli"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``disk-sched`` command."""
    parser = argparse.ArgumentParser(
        prog="disk-sched",
        description="Compare FCFS, SSTF, SCAN, C-SCAN, LOOK and C-LOOK disk scheduling.",
    )
    parser.add_argument("initial", help="initial head position (cylinder)")
    parser.add_argument("direction", help="initial sweep direction: LEFT or RIGHT")
    parser.add_argument(
        "--requests",
        type=Path,
        default=None,
        help="binary request file (default: request.bin or the config's request_file)",
    )
    parser.add_argument("--config", type=Path, default=None, help="JSON disk configuration")
    parser.add_argument(
        "--compare", action="store_true", help="append a ranking of algorithms by movement"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="print the scheduler log to stderr"
    )
    return parser


def run(args: argparse.Namespace, logger: Logger) -> str:
    """Load input per *args*, schedule it, and return the report text.

    Raises:
        ConfigError: If the configuration file is unusable.
        LoaderError: If the head, direction, or request file is rejected.

    """
    config = load_config(args.config) if args.config is not None else DiskConfig()
    logger.log(
        LogLevel.DEBUG,
        f"disk has {config.cylinder_count} cylinders, expecting {config.request_count} requests",
        source=_LOG_SOURCE,
    )

    head = parse_head(args.initial, cylinder_count=config.cylinder_count)
    direction = parse_direction(args.direction)

    path = args.requests if args.requests is not None else config.request_file
    request_set = load_requests(
        path, count=config.request_count, cylinder_count=config.cylinder_count
    )
    logger.log(
        LogLevel.INFO, f"loaded {len(request_set)} requests from {path}", source=_LOG_SOURCE
    )
    logger.log(
        LogLevel.DEBUG, f"sorted requests: {list(request_set.sorted_requests)}", source=_LOG_SOURCE
    )

    results = run_all(
        request_set.requests,
        head=head,
        direction=direction,
        cylinder_count=config.cylinder_count,
        logger=logger,
    )
    text = format_report(
        results, request_count=len(request_set), head=head, direction=direction
    )
    if args.compare:
        text += "\n" + format_comparison(results.values()) + "\n"
    return text


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``disk-sched`` command and return its exit status."""
    args = build_parser().parse_args(argv)
    logger = Logger()
    try:
        print(run(args, logger))  # noqa: T201
    except (ConfigError, LoaderError) as e:
        logger.log(LogLevel.ERROR, str(e), source=_LOG_SOURCE)
        print(f"ERROR: {e}", file=sys.stderr)  # noqa: T201
        return 1
    finally:
        if args.verbose:
            for line in logger.lines():
                print(line, file=sys.stderr)  # noqa: T201
    return 0


if __name__ == "__main__":
    sys.exit(main())
