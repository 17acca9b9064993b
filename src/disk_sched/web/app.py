"""Flask application factory for the disk scheduler API.

The ``create_app`` function returns a Flask app with two endpoints:

- ``GET /api/algorithms`` — list the algorithm names in report order.
- ``POST /api/schedule`` — run one algorithm, or all of them, over a
  request set supplied as JSON.

Request body for ``/api/schedule``::

    {"requests": [98, 183, 37], "head": 53, "direction": "RIGHT",
     "algorithm": "SSTF"}

``algorithm`` is optional; without it every algorithm runs.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from disk_sched.config import DiskConfig
from disk_sched.disk import (
    ALGORITHMS,
    ScheduleResult,
    UnknownAlgorithmError,
    make_policy,
    run_all,
)
from disk_sched.loader import LoaderError, parse_direction, parse_head, validate_requests
from disk_sched.logging import Logger, LogLevel

_HTTP_BAD_REQUEST = 400
_LOG_SOURCE = "web"


def _result_json(result: ScheduleResult) -> dict[str, Any]:
    return {
        "algorithm": result.algorithm,
        "sequence": list(result.sequence),
        "movement": result.movement,
    }


def _bad_request(message: str) -> tuple[Response, int]:
    return jsonify({"error": message}), _HTTP_BAD_REQUEST


def create_app(config: DiskConfig | None = None, *, logger: Logger | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Disk geometry used to validate requests.  Defaults to
            the 300-cylinder disk.
        logger: Log receiving one entry per scheduling call.  A fresh
            one is created when omitted.

    Returns:
        A configured Flask application ready to serve.

    """
    disk = config if config is not None else DiskConfig()
    log = logger if logger is not None else Logger()

    app = Flask(__name__)

    @app.route("/api/algorithms")
    def algorithms() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the available algorithm names."""
        return jsonify({"algorithms": list(ALGORITHMS)})

    @app.route("/api/schedule", methods=["POST"])
    def schedule() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Schedule the posted request set.

        Returns:
            JSON with a ``results`` list, or ``error`` and HTTP 400.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return _bad_request("Expected a JSON object body")
        missing = [key for key in ("requests", "head", "direction") if key not in data]
        if missing:
            return _bad_request(f"Missing field(s): {', '.join(missing)}")

        requests = data["requests"]
        if not isinstance(requests, list) or not all(
            isinstance(r, int) and not isinstance(r, bool) for r in requests
        ):
            return _bad_request("'requests' must be a list of integers")
        if not isinstance(data["head"], int) or isinstance(data["head"], bool):
            return _bad_request("'head' must be an integer")
        if not isinstance(data["direction"], str):
            return _bad_request("'direction' must be LEFT or RIGHT")

        try:
            head = parse_head(data["head"], cylinder_count=disk.cylinder_count)
            direction = parse_direction(data["direction"])
            request_set = validate_requests(requests, cylinder_count=disk.cylinder_count)
            algorithm = data.get("algorithm")
            if algorithm is None:
                results = list(
                    run_all(
                        request_set.requests,
                        head=head,
                        direction=direction,
                        cylinder_count=disk.cylinder_count,
                        logger=log,
                    ).values()
                )
            else:
                policy = make_policy(
                    str(algorithm), direction=direction, cylinder_count=disk.cylinder_count
                )
                results = [policy.schedule(request_set.requests, head=head)]
        except (LoaderError, UnknownAlgorithmError) as e:
            log.log(LogLevel.WARNING, f"rejected request: {e}", source=_LOG_SOURCE)
            return _bad_request(str(e))

        return jsonify({"results": [_result_json(r) for r in results]})

    return app


def main() -> None:
    """Run the API development server.

    This is the ``disk-sched-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
