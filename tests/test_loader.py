"""Tests for request loading and argument parsing.

The algorithms never validate their input; the loader does.  Every
rejection is a typed ``LoaderError`` rather than a process exit.
"""

import struct
from pathlib import Path

import pytest

from disk_sched.disk import Direction
from disk_sched.loader import (
    DirectionError,
    HeadPositionError,
    LoaderError,
    RequestFileError,
    RequestSet,
    dump_requests,
    load_requests,
    parse_direction,
    parse_head,
    validate_requests,
)

_REQUESTS = [98, 183, 37, 122, 14, 124, 65, 67]


class TestParseDirection:
    """Only the exact tokens LEFT and RIGHT are accepted."""

    def test_left(self) -> None:
        """LEFT parses to Direction.LEFT."""
        assert parse_direction("LEFT") is Direction.LEFT

    def test_right(self) -> None:
        """RIGHT parses to Direction.RIGHT."""
        assert parse_direction("RIGHT") is Direction.RIGHT

    @pytest.mark.parametrize("token", ["left", "Right", "UP", "", " LEFT"])
    def test_rejected(self, token: str) -> None:
        """Anything else raises DirectionError."""
        with pytest.raises(DirectionError, match="LEFT or RIGHT"):
            parse_direction(token)

    def test_is_a_loader_error(self) -> None:
        """Callers can catch every rejection as LoaderError."""
        with pytest.raises(LoaderError):
            parse_direction("DOWN")


class TestParseHead:
    """The head must be a cylinder on the disk."""

    def test_valid(self) -> None:
        """In-range integers parse."""
        assert parse_head("53", cylinder_count=300) == 53
        assert parse_head("0", cylinder_count=300) == 0
        assert parse_head(299, cylinder_count=300) == 299

    @pytest.mark.parametrize("token", ["-1", "300", "1000"])
    def test_out_of_range(self, token: str) -> None:
        """Values outside 0..max are rejected with the valid range."""
        with pytest.raises(HeadPositionError, match="between 0 and 299"):
            parse_head(token, cylinder_count=300)

    @pytest.mark.parametrize("token", ["abc", "5.5", ""])
    def test_not_an_integer(self, token: str) -> None:
        """Non-integer tokens are rejected."""
        with pytest.raises(HeadPositionError, match="integer"):
            parse_head(token, cylinder_count=300)

    def test_range_follows_disk_size(self) -> None:
        """The upper bound comes from the cylinder count."""
        with pytest.raises(HeadPositionError, match="between 0 and 99"):
            parse_head("100", cylinder_count=100)


class TestRequestSet:
    """A request set keeps arrival order and offers a sorted copy."""

    def test_sorted_copy(self) -> None:
        """sorted_requests is ascending; requests is untouched."""
        rs = RequestSet(requests=tuple(_REQUESTS))
        assert rs.sorted_requests == (14, 37, 65, 67, 98, 122, 124, 183)
        assert rs.requests == tuple(_REQUESTS)
        assert len(rs) == 8

    def test_validate_rejects_out_of_range(self) -> None:
        """A request beyond the last cylinder is rejected with its position."""
        with pytest.raises(RequestFileError, match="#1 is cylinder 300"):
            validate_requests([5, 300], cylinder_count=300)

    def test_validate_rejects_negative(self) -> None:
        """Negative cylinders are rejected."""
        with pytest.raises(RequestFileError):
            validate_requests([-3], cylinder_count=300)


class TestRequestFile:
    """Binary request files: 4-byte little-endian integers."""

    def test_dump_then_load(self, tmp_path: Path) -> None:
        """Requests written by dump_requests load back in arrival order."""
        path = tmp_path / "request.bin"
        dump_requests(path, _REQUESTS)
        assert path.stat().st_size == 4 * len(_REQUESTS)
        loaded = load_requests(path, count=len(_REQUESTS), cylinder_count=200)
        assert loaded.requests == tuple(_REQUESTS)

    def test_reads_native_layout(self, tmp_path: Path) -> None:
        """Files written as raw little-endian ints are understood."""
        path = tmp_path / "request.bin"
        path.write_bytes(struct.pack("<3i", 7, 0, 299))
        assert load_requests(path, count=3, cylinder_count=300).requests == (7, 0, 299)

    def test_extra_values_ignored(self, tmp_path: Path) -> None:
        """Only the first ``count`` values are read."""
        path = tmp_path / "request.bin"
        dump_requests(path, [1, 2, 3, 4, 5])
        assert load_requests(path, count=3, cylinder_count=300).requests == (1, 2, 3)

    def test_short_file(self, tmp_path: Path) -> None:
        """Fewer values than expected is an error."""
        path = tmp_path / "request.bin"
        dump_requests(path, [1, 2])
        with pytest.raises(RequestFileError, match="expected 20, found 2"):
            load_requests(path, count=20, cylinder_count=300)

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file is an error, not a crash."""
        with pytest.raises(RequestFileError, match="Cannot open"):
            load_requests(tmp_path / "nope.bin", count=20, cylinder_count=300)

    def test_out_of_range_value(self, tmp_path: Path) -> None:
        """A cylinder beyond the disk is rejected."""
        path = tmp_path / "request.bin"
        dump_requests(path, [10, 500])
        with pytest.raises(RequestFileError, match="outside 0-299"):
            load_requests(path, count=2, cylinder_count=300)
