"""Disk scheduling algorithms — minimising seek time for I/O requests.

When several requests for disk I/O are pending, the disk arm must move
between cylinders to service them.  The dominant cost is **seek time**
— how far the arm travels.  Disk scheduling algorithms decide the
*order* in which requests are serviced to minimise this.

Think of a disk arm like an elevator in a building:
    - **FCFS** — stop at every floor in the order people pressed buttons.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **SCAN** — go all the way to the top, then all the way down.
    - **C-SCAN** — go all the way up, jump to the ground floor, go up again.
    - **LOOK** — like SCAN, but turn around at the last requested floor.
    - **C-LOOK** — like C-SCAN, but jump between requested floors only.

Two layers live here:

- **Pure functions** (``schedule_fcfs`` … ``schedule_clook``) that take
  the request data, start cylinder, and direction, and return a
  ``ScheduleResult``.  They never validate and never log.
- **Policies** (``FCFSPolicy`` … ``CLOOKPolicy``) implementing the
  ``DiskPolicy`` protocol — the Strategy pattern — plus a
  ``DiskScheduler`` that ties a policy to a request queue.

The SCAN family works on an ascending copy of the requests, because a
sweep follows physical position rather than arrival time.  FCFS and
SSTF work on the arrival order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol, TypeAlias

from disk_sched.logging import Logger, LogLevel

_LOG_SOURCE = "disk"


class Direction(StrEnum):
    """Initial direction of head travel for the sweep algorithms."""

    LEFT = "LEFT"
    RIGHT = "RIGHT"


@dataclass(frozen=True)
class ScheduleResult:
    """The outcome of one scheduling run.

    Attributes:
        algorithm: Display name of the algorithm (e.g. ``"C-SCAN"``).
        sequence: Cylinders in service order, including any boundary
            entries emitted by SCAN and C-SCAN.
        movement: Total head movement in cylinders.

    """

    algorithm: str
    sequence: tuple[int, ...]
    movement: int


class UnknownAlgorithmError(Exception):
    """Raise when an algorithm name is not in the registry."""


def compute_movement(sequence: Sequence[int], start: int) -> int:
    """Return the total head travel needed to visit *sequence* from *start*.

    Args:
        sequence: Cylinders in the order they are visited.
        start: Cylinder the head starts on.

    Returns:
        Sum of absolute distances between consecutive head positions.

    """
    total = 0
    head = start
    for cylinder in sequence:
        total += abs(cylinder - head)
        head = cylinder
    return total


def find_split(sorted_requests: Sequence[int], reference: int) -> int:
    """Return the index of the first request at or above *reference*.

    Requests in ``[0, index)`` lie below the reference and requests in
    ``[index, len)`` lie at or above it.  Returns the length when every
    request is below.  The input must already be sorted ascending.
    """
    for index, cylinder in enumerate(sorted_requests):
        if cylinder >= reference:
            return index
    return len(sorted_requests)


def _result(algorithm: str, sequence: list[int], start: int) -> ScheduleResult:
    return ScheduleResult(
        algorithm=algorithm,
        sequence=tuple(sequence),
        movement=compute_movement(sequence, start),
    )


def schedule_fcfs(requests: Sequence[int], start: int) -> ScheduleResult:
    """First Come, First Served — service in arrival order."""
    return _result("FCFS", list(requests), start)


def schedule_sstf(requests: Sequence[int], start: int) -> ScheduleResult:
    """Shortest Seek Time First — always go to the nearest request.

    Candidates are scanned in arrival order and only a strictly smaller
    distance replaces the current best, so among equidistant requests
    the one that arrived first wins.
    """
    visited = [False] * len(requests)
    sequence: list[int] = []
    head = start
    while len(sequence) < len(requests):
        best_index = -1
        best_distance = 0
        for index, cylinder in enumerate(requests):
            if visited[index]:
                continue
            distance = abs(cylinder - head)
            if best_index < 0 or distance < best_distance:
                best_index = index
                best_distance = distance
        visited[best_index] = True
        head = requests[best_index]
        sequence.append(head)
    return _result("SSTF", sequence, start)


def _below_descending(sorted_requests: Sequence[int], split: int) -> list[int]:
    return list(reversed(sorted_requests[:split]))


def _above_ascending(sorted_requests: Sequence[int], split: int) -> list[int]:
    return list(sorted_requests[split:])


def schedule_scan(
    sorted_requests: Sequence[int],
    start: int,
    direction: Direction,
    *,
    cylinder_count: int,
) -> ScheduleResult:
    """SCAN (elevator) — sweep to the disk edge, then reverse.

    The head always travels to the physical edge in its initial
    direction, so the edge cylinder is emitted exactly once even when
    no request lies on that side.
    """
    split = find_split(sorted_requests, start)
    below = _below_descending(sorted_requests, split)
    above = _above_ascending(sorted_requests, split)
    if direction is Direction.LEFT:
        sequence = [*below, 0, *above]
    else:
        sequence = [*above, cylinder_count - 1, *below]
    return _result("SCAN", sequence, start)


def schedule_cscan(
    sorted_requests: Sequence[int],
    start: int,
    direction: Direction,
    *,
    cylinder_count: int,
) -> ScheduleResult:
    """Circular SCAN — sweep to the edge, jump to the opposite edge, continue.

    Both edges are emitted (far one first) and the sweep never reverses:
    after the wrap the remaining requests are serviced in the original
    direction of travel.
    """
    split = find_split(sorted_requests, start)
    max_cylinder = cylinder_count - 1
    if direction is Direction.RIGHT:
        sequence = [
            *_above_ascending(sorted_requests, split),
            max_cylinder,
            0,
            *sorted_requests[:split],
        ]
    else:
        sequence = [
            *_below_descending(sorted_requests, split),
            0,
            max_cylinder,
            *reversed(sorted_requests[split:]),
        ]
    return _result("C-SCAN", sequence, start)


def schedule_look(
    sorted_requests: Sequence[int],
    start: int,
    direction: Direction,
    *,
    cylinder_count: int,  # noqa: ARG001
) -> ScheduleResult:
    """LOOK — like SCAN, but reverse at the last request, not the edge."""
    split = find_split(sorted_requests, start)
    below = _below_descending(sorted_requests, split)
    above = _above_ascending(sorted_requests, split)
    sequence = [*below, *above] if direction is Direction.LEFT else [*above, *below]
    return _result("LOOK", sequence, start)


def schedule_clook(
    sorted_requests: Sequence[int],
    start: int,
    direction: Direction,
    *,
    cylinder_count: int,  # noqa: ARG001
) -> ScheduleResult:
    """Circular LOOK — wrap from the last request straight to the first.

    Neither physical edge is visited.
    """
    split = find_split(sorted_requests, start)
    if direction is Direction.RIGHT:
        sequence = [*sorted_requests[split:], *sorted_requests[:split]]
    else:
        sequence = [
            *_below_descending(sorted_requests, split),
            *reversed(sorted_requests[split:]),
        ]
    return _result("C-LOOK", sequence, start)


# -- Policies (Strategy pattern) ----------------------------------------------


class DiskPolicy(Protocol):
    """Protocol for disk scheduling policies (Strategy pattern)."""

    name: str

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return the service order and movement for *requests*.

        Args:
            requests: Cylinder numbers in arrival order.
            head: Current position of the disk head.

        Returns:
            The schedule produced by this policy.

        """
        ...


class FCFSPolicy:
    """First Come, First Served — service in arrival order.

    The simplest policy.  Fair (no starvation), but the arm zigzags
    wildly across the disk, producing high total seek time.
    """

    name = "FCFS"

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return requests in their original order."""
        return schedule_fcfs(requests, head)


class SSTFPolicy:
    """Shortest Seek Time First — always go to the nearest request.

    Produces better total movement than FCFS, but can **starve**
    distant requests if new requests keep arriving near the head.
    """

    name = "SSTF"

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return requests ordered nearest-first from the current head."""
        return schedule_sstf(requests, head)


class _SweepPolicy:
    """Shared configuration for the four sweep-based policies.

    Args:
        direction: Initial direction of head travel.
        cylinder_count: Number of cylinders on the disk.

    """

    name = ""

    def __init__(
        self,
        *,
        direction: Direction = Direction.RIGHT,
        cylinder_count: int = 300,
    ) -> None:
        """Create a sweep policy with an initial direction."""
        self._direction = direction
        self._cylinder_count = cylinder_count

    @property
    def direction(self) -> Direction:
        """Return the initial sweep direction."""
        return self._direction

    @property
    def cylinder_count(self) -> int:
        """Return the number of cylinders on the disk."""
        return self._cylinder_count


class SCANPolicy(_SweepPolicy):
    """SCAN (elevator algorithm) — sweep to the edge, then reverse.

    Guarantees bounded wait: no request waits more than two sweeps.
    """

    name = "SCAN"

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return requests in SCAN (elevator) order."""
        return schedule_scan(
            sorted(requests), head, self._direction, cylinder_count=self._cylinder_count
        )


class CSCANPolicy(_SweepPolicy):
    """Circular SCAN — one-way sweeps with a jump back to the far edge.

    Requests near the edges and in the middle of the disk wait equally
    long, because the arm only services while moving one way.
    """

    name = "C-SCAN"

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return requests in C-SCAN order."""
        return schedule_cscan(
            sorted(requests), head, self._direction, cylinder_count=self._cylinder_count
        )


class LOOKPolicy(_SweepPolicy):
    """LOOK — SCAN that turns around at the outermost request."""

    name = "LOOK"

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return requests in LOOK order."""
        return schedule_look(
            sorted(requests), head, self._direction, cylinder_count=self._cylinder_count
        )


class CLOOKPolicy(_SweepPolicy):
    """Circular LOOK — C-SCAN that wraps between outermost requests."""

    name = "C-LOOK"

    def schedule(self, requests: Sequence[int], *, head: int) -> ScheduleResult:
        """Return requests in C-LOOK order."""
        return schedule_clook(
            sorted(requests), head, self._direction, cylinder_count=self._cylinder_count
        )


PolicyFactory: TypeAlias = Callable[[Direction, int], DiskPolicy]

ALGORITHMS: dict[str, PolicyFactory] = {
    "FCFS": lambda _direction, _cylinders: FCFSPolicy(),
    "SSTF": lambda _direction, _cylinders: SSTFPolicy(),
    "SCAN": lambda d, c: SCANPolicy(direction=d, cylinder_count=c),
    "C-SCAN": lambda d, c: CSCANPolicy(direction=d, cylinder_count=c),
    "LOOK": lambda d, c: LOOKPolicy(direction=d, cylinder_count=c),
    "C-LOOK": lambda d, c: CLOOKPolicy(direction=d, cylinder_count=c),
}


def make_policy(name: str, *, direction: Direction, cylinder_count: int) -> DiskPolicy:
    """Build the policy registered under *name* (case-insensitive).

    Raises:
        UnknownAlgorithmError: If no algorithm has that name.

    """
    factory = ALGORITHMS.get(name.upper())
    if factory is None:
        known = ", ".join(ALGORITHMS)
        msg = f"Unknown algorithm '{name}' (expected one of: {known})"
        raise UnknownAlgorithmError(msg)
    return factory(direction, cylinder_count)


def run_all(
    requests: Sequence[int],
    *,
    head: int,
    direction: Direction,
    cylinder_count: int,
    logger: Logger | None = None,
) -> dict[str, ScheduleResult]:
    """Run every registered algorithm over the same requests.

    The runs are independent; each result is owned by the caller.

    Returns:
        Results keyed by algorithm name, in registry order.

    """
    arrival = list(requests)
    # Sorted once and shared by the four sweep algorithms.
    ordered = sorted(arrival)
    if logger is not None:
        logger.log(
            LogLevel.DEBUG,
            f"split index {find_split(ordered, head)} for head {head}",
            source=_LOG_SOURCE,
        )
    results = {
        "FCFS": schedule_fcfs(arrival, head),
        "SSTF": schedule_sstf(arrival, head),
        "SCAN": schedule_scan(ordered, head, direction, cylinder_count=cylinder_count),
        "C-SCAN": schedule_cscan(ordered, head, direction, cylinder_count=cylinder_count),
        "LOOK": schedule_look(ordered, head, direction, cylinder_count=cylinder_count),
        "C-LOOK": schedule_clook(ordered, head, direction, cylinder_count=cylinder_count),
    }
    if logger is not None:
        for name, result in results.items():
            logger.log(
                LogLevel.INFO,
                f"{name}: {len(arrival)} requests, movement {result.movement}",
                source=_LOG_SOURCE,
            )
    return results


class DiskScheduler:
    """Disk scheduler — ties a policy to a request queue.

    The scheduler accepts I/O requests, then runs the selected policy
    to determine service order.  Running moves the head to the last
    serviced cylinder.
    """

    def __init__(
        self,
        *,
        policy: DiskPolicy,
        head: int = 0,
        logger: Logger | None = None,
    ) -> None:
        """Create a disk scheduler with a policy and initial head position."""
        self._policy = policy
        self._head = head
        self._queue: list[int] = []
        self._logger = logger

    @property
    def head(self) -> int:
        """Return current head position."""
        return self._head

    @property
    def policy(self) -> DiskPolicy:
        """Return the current scheduling policy."""
        return self._policy

    @policy.setter
    def policy(self, value: DiskPolicy) -> None:
        """Swap the scheduling policy (Strategy pattern)."""
        self._policy = value

    @property
    def pending(self) -> list[int]:
        """Return the current request queue."""
        return list(self._queue)

    def add_request(self, cylinder: int) -> None:
        """Add an I/O request for a cylinder."""
        self._queue.append(cylinder)

    def run(self) -> ScheduleResult:
        """Run the scheduling policy on queued requests.

        Updates the head position to the last serviced cylinder and
        clears the queue.  An empty queue yields an empty result.
        """
        if not self._queue:
            return ScheduleResult(algorithm=self._policy.name, sequence=(), movement=0)
        result = self._policy.schedule(self._queue, head=self._head)
        if self._logger is not None:
            self._logger.log(
                LogLevel.INFO,
                f"{result.algorithm}: serviced {len(self._queue)} requests "
                f"from {self._head}, movement {result.movement}",
                source=_LOG_SOURCE,
            )
        if result.sequence:
            self._head = result.sequence[-1]
        self._queue.clear()
        return result
