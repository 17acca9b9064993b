"""Request loading and argument parsing.

The scheduling algorithms assume clean input.  This module is where
input gets cleaned: it reads the binary request file, parses the head
position and direction tokens, and rejects anything out of range.

Every failure is raised as a ``LoaderError`` subclass so the caller
decides what to do with it (the CLI prints it and exits non-zero; the
web app turns it into an HTTP 400).

Request file format: ``count`` consecutive 4-byte little-endian signed
integers, one per cylinder, in arrival order.  Any trailing bytes after
the first ``count`` values are ignored.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import TYPE_CHECKING

from disk_sched.disk import Direction

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

_INT_SIZE = 4
_INT_FORMAT = "<i"


class LoaderError(ValueError):
    """Base class for rejected input."""


class DirectionError(LoaderError):
    """Raise when a direction token is not ``LEFT`` or ``RIGHT``."""


class HeadPositionError(LoaderError):
    """Raise when the initial head position is not a valid cylinder."""


class RequestFileError(LoaderError):
    """Raise when the request file is missing, short, or out of range."""


@dataclass(frozen=True)
class RequestSet:
    """Requests in arrival order, plus the ascending copy sweeps need."""

    requests: tuple[int, ...]

    @property
    def sorted_requests(self) -> tuple[int, ...]:
        """Return the requests in ascending cylinder order."""
        return tuple(sorted(self.requests))

    def __len__(self) -> int:
        """Return the number of requests."""
        return len(self.requests)


def parse_direction(token: str) -> Direction:
    """Convert ``LEFT`` or ``RIGHT`` into a ``Direction``.

    Matching is exact, as on the original command line.

    Raises:
        DirectionError: For any other token.

    """
    try:
        return Direction(token)
    except ValueError:
        msg = "Direction must be LEFT or RIGHT."
        raise DirectionError(msg) from None


def parse_head(token: str | int, *, cylinder_count: int) -> int:
    """Parse and range-check the initial head position.

    Raises:
        HeadPositionError: If the token is not an integer or lies
            outside ``[0, cylinder_count - 1]``.

    """
    try:
        head = int(token)
    except (TypeError, ValueError):
        msg = f"Initial head must be an integer, got {token!r}."
        raise HeadPositionError(msg) from None
    if not 0 <= head < cylinder_count:
        msg = f"Initial head must be between 0 and {cylinder_count - 1}."
        raise HeadPositionError(msg)
    return head


def validate_requests(requests: Iterable[int], *, cylinder_count: int) -> RequestSet:
    """Check every request is a cylinder on the disk.

    Raises:
        RequestFileError: If a request lies outside the disk.

    """
    values = tuple(requests)
    for position, cylinder in enumerate(values):
        if not 0 <= cylinder < cylinder_count:
            msg = (
                f"Request #{position} is cylinder {cylinder}, "
                f"outside 0-{cylinder_count - 1}."
            )
            raise RequestFileError(msg)
    return RequestSet(requests=values)


def load_requests(path: Path, *, count: int, cylinder_count: int) -> RequestSet:
    """Read *count* request cylinders from a binary file.

    Raises:
        RequestFileError: If the file cannot be read, holds fewer than
            *count* values, or holds a value outside the disk.

    """
    try:
        data = path.read_bytes()
    except OSError as e:
        msg = f"Cannot open {path}: {e.strerror or e}"
        raise RequestFileError(msg) from e

    needed = count * _INT_SIZE
    if len(data) < needed:
        msg = f"Could not read all requests: expected {count}, found {len(data) // _INT_SIZE}."
        raise RequestFileError(msg)

    values = [value for (value,) in struct.iter_unpack(_INT_FORMAT, data[:needed])]
    return validate_requests(values, cylinder_count=cylinder_count)


def dump_requests(path: Path, requests: Iterable[int]) -> None:
    """Write requests in the binary format ``load_requests`` reads."""
    path.write_bytes(b"".join(struct.pack(_INT_FORMAT, r) for r in requests))
