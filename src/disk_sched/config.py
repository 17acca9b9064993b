"""Disk configuration — cylinder count, request count, request file.

The classic exercise fixes a 300-cylinder disk (0-299) and 20 requests
read from ``request.bin``.  Those numbers are the defaults here, but
every scheduling function takes them explicitly, so any disk size can
be simulated.

A configuration can be loaded from a JSON file whose keys are all
optional::

    {"cylinder_count": 200, "request_count": 8, "request_file": "queue.bin"}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CYLINDER_COUNT = 300
DEFAULT_REQUEST_COUNT = 20
DEFAULT_REQUEST_FILE = Path("request.bin")


class ConfigError(RuntimeError):
    """Raise when a configuration file cannot be used.

    Examples: missing file, malformed JSON, non-positive counts.
    """


@dataclass(frozen=True)
class DiskConfig:
    """Describe the simulated disk and where its requests come from."""

    cylinder_count: int = DEFAULT_CYLINDER_COUNT
    request_count: int = DEFAULT_REQUEST_COUNT
    request_file: Path = DEFAULT_REQUEST_FILE

    @property
    def max_cylinder(self) -> int:
        """Return the highest addressable cylinder."""
        return self.cylinder_count - 1


def load_config(path: Path) -> DiskConfig:
    """Load a ``DiskConfig`` from a JSON file.

    Relative request file paths are resolved against the directory of
    the configuration file.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values.

    """
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Cannot load config {path}: {e}"
        raise ConfigError(msg) from e

    if not isinstance(data, dict):
        msg = f"Config {path} must hold a JSON object"
        raise ConfigError(msg)

    cylinder_count = data.get("cylinder_count", DEFAULT_CYLINDER_COUNT)
    request_count = data.get("request_count", DEFAULT_REQUEST_COUNT)
    for key, value in (("cylinder_count", cylinder_count), ("request_count", request_count)):
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            msg = f"{key} must be a positive integer, got {value!r}"
            raise ConfigError(msg)

    request_file = Path(data.get("request_file", DEFAULT_REQUEST_FILE))
    if not request_file.is_absolute():
        request_file = path.parent / request_file

    return DiskConfig(
        cylinder_count=cylinder_count,
        request_count=request_count,
        request_file=request_file,
    )
