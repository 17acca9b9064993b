"""Browser-facing JSON API for the disk scheduler.

This package provides a Flask application that exposes the scheduling
algorithms over HTTP.  It is an **optional** extra — install with::

    pip install disk-sched[web]

The ``create_app`` factory in ``app.py`` serves two endpoints:

- ``GET /api/algorithms`` — names of the available algorithms.
- ``POST /api/schedule`` — schedule a request set and return JSON.
"""
