"""Report formatting for scheduling results.

All helpers are pure: they build strings and never print, so the CLI
stays a thin I/O wrapper and the formatting is testable on its own.
The layout reproduces the classic assignment output::

    SCAN DISK SCHEDULING ALGORITHM:

    65, 67, 98, 122, 124, 183, 299, 37, 14

    SCAN - Total head movements = 531
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from disk_sched.disk import Direction, ScheduleResult


def format_header(request_count: int, head: int, direction: Direction) -> str:
    """Format the run parameters shown above the results."""
    return (
        f"Total requests = {request_count}\n"
        f"Initial Head Position: {head}\n"
        f"Direction of Head: {direction}\n"
    )


def format_result(result: ScheduleResult) -> str:
    """Format one algorithm's service order and total movement."""
    order = ", ".join(str(c) for c in result.sequence)
    return (
        f"{result.algorithm} DISK SCHEDULING ALGORITHM:\n\n"
        f"{order}\n\n"
        f"{result.algorithm} - Total head movements = {result.movement}\n"
    )


def format_report(
    results: Mapping[str, ScheduleResult],
    *,
    request_count: int,
    head: int,
    direction: Direction,
) -> str:
    """Format the header followed by every result, blank-line separated."""
    sections = [format_header(request_count, head, direction)]
    sections.extend(format_result(r) for r in results.values())
    return "\n".join(sections)


def format_comparison(results: Iterable[ScheduleResult]) -> str:
    """Rank algorithms by total movement, lowest first.

    Ties keep the order the results were given in.
    """
    ranked = sorted(results, key=lambda r: r.movement)
    if not ranked:
        return "No results."
    width = max(len("ALGORITHM"), *(len(r.algorithm) for r in ranked))
    lines = [f"{'RANK':<6}{'ALGORITHM':<{width + 2}}MOVEMENT"]
    lines.extend(
        f"{rank:<6}{r.algorithm:<{width + 2}}{r.movement}"
        for rank, r in enumerate(ranked, start=1)
    )
    return "\n".join(lines)
