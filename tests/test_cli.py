"""Tests for the ``disk-sched`` command-line front end.

``main`` returns an exit status instead of calling ``sys.exit``, so
tests call it directly and inspect captured output.
"""

import json
from pathlib import Path

import pytest

from disk_sched.cli import build_parser, main
from disk_sched.loader import dump_requests

_TEXTBOOK_REQUESTS = [98, 183, 37, 122, 14, 124, 65, 67]


def _textbook_config(tmp_path: Path) -> Path:
    """Write an 8-request, 200-cylinder config and its request file."""
    dump_requests(tmp_path / "queue.bin", _TEXTBOOK_REQUESTS)
    config = tmp_path / "disk.json"
    config.write_text(
        json.dumps({"cylinder_count": 200, "request_count": 8, "request_file": "queue.bin"})
    )
    return config


class TestMain:
    """End-to-end runs through ``main``."""

    def test_prints_full_report(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A valid run prints the header and all six algorithms."""
        status = main(["53", "RIGHT", "--config", str(_textbook_config(tmp_path))])
        out = capsys.readouterr().out
        assert status == 0
        assert "Total requests = 8" in out
        assert "Initial Head Position: 53" in out
        assert "Direction of Head: RIGHT" in out
        assert "SSTF - Total head movements = 236" in out
        assert "C-LOOK - Total head movements = 322" in out

    def test_default_disk_with_requests_option(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Without a config the disk has 300 cylinders and 20 requests."""
        path = tmp_path / "request.bin"
        dump_requests(path, range(10, 210, 10))
        status = main(["0", "LEFT", "--requests", str(path)])
        out = capsys.readouterr().out
        assert status == 0
        assert "Total requests = 20" in out
        # LEFT from cylinder 0: straight to the edge, then up to 200.
        assert "SCAN - Total head movements = 200" in out

    def test_requests_option_overrides_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--requests wins over the config's request_file."""
        config = _textbook_config(tmp_path)
        other = tmp_path / "other.bin"
        dump_requests(other, [1, 2, 3, 4, 5, 6, 7, 8])
        assert main(["0", "RIGHT", "--config", str(config), "--requests", str(other)]) == 0
        assert "FCFS - Total head movements = 8" in capsys.readouterr().out

    def test_compare_table(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--compare appends the ranking table."""
        main(["53", "RIGHT", "--config", str(_textbook_config(tmp_path)), "--compare"])
        out = capsys.readouterr().out
        assert "RANK" in out
        assert out.index("RANK") > out.index("C-LOOK - Total head movements")

    def test_verbose_prints_log(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--verbose writes the scheduler log to stderr."""
        main(["53", "RIGHT", "--config", str(_textbook_config(tmp_path)), "--verbose"])
        err = capsys.readouterr().err
        assert "[INFO] cli: loaded 8 requests" in err
        assert "[INFO] disk: SSTF: 8 requests, movement 236" in err


class TestErrors:
    """Rejected input prints ``ERROR:`` and exits with status 1."""

    def test_head_out_of_range(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A head beyond the last cylinder is rejected before loading."""
        status = main(["300", "LEFT", "--requests", str(tmp_path / "missing.bin")])
        err = capsys.readouterr().err
        assert status == 1
        assert err.strip() == "ERROR: Initial head must be between 0 and 299."

    def test_bad_direction(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Direction must be LEFT or RIGHT."""
        status = main(["53", "UP", "--config", str(_textbook_config(tmp_path))])
        assert status == 1
        assert "ERROR: Direction must be LEFT or RIGHT." in capsys.readouterr().err

    def test_missing_request_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """An unreadable request file is reported."""
        status = main(["53", "LEFT", "--requests", str(tmp_path / "missing.bin")])
        assert status == 1
        assert "ERROR: Cannot open" in capsys.readouterr().err

    def test_bad_config(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A broken config file is reported."""
        config = tmp_path / "disk.json"
        config.write_text("{")
        assert main(["53", "LEFT", "--config", str(config)]) == 1
        assert "ERROR: Cannot load config" in capsys.readouterr().err

    def test_error_is_logged_when_verbose(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """With --verbose the rejection also appears in the log."""
        main(["53", "UP", "--config", str(_textbook_config(tmp_path)), "--verbose"])
        assert "[ERROR] cli: Direction must be LEFT or RIGHT." in capsys.readouterr().err

    def test_wrong_argument_count(self) -> None:
        """Missing positionals are an argparse usage error (status 2)."""
        with pytest.raises(SystemExit) as excinfo:
            main(["53"])
        assert excinfo.value.code == 2


class TestParser:
    """The parser exposes the expected options."""

    def test_defaults(self) -> None:
        """Options default to off / unset."""
        args = build_parser().parse_args(["10", "LEFT"])
        assert args.initial == "10"
        assert args.direction == "LEFT"
        assert args.requests is None
        assert args.config is None
        assert not args.compare
        assert not args.verbose
