"""Disk scheduling: FCFS, SSTF, SCAN, C-SCAN, LOOK and C-LOOK.

Given a set of cylinder requests, a starting head position, and an
initial sweep direction, compute each algorithm's service order and
total head movement.

Re-exports the core so callers can write::

    from disk_sched import Direction, run_all
"""

from disk_sched.disk import (
    ALGORITHMS,
    CLOOKPolicy,
    CSCANPolicy,
    Direction,
    DiskPolicy,
    DiskScheduler,
    FCFSPolicy,
    LOOKPolicy,
    SCANPolicy,
    ScheduleResult,
    SSTFPolicy,
    UnknownAlgorithmError,
    compute_movement,
    find_split,
    make_policy,
    run_all,
    schedule_clook,
    schedule_cscan,
    schedule_fcfs,
    schedule_look,
    schedule_scan,
    schedule_sstf,
)

__all__ = [
    "ALGORITHMS",
    "CLOOKPolicy",
    "CSCANPolicy",
    "Direction",
    "DiskPolicy",
    "DiskScheduler",
    "FCFSPolicy",
    "LOOKPolicy",
    "SCANPolicy",
    "SSTFPolicy",
    "ScheduleResult",
    "UnknownAlgorithmError",
    "compute_movement",
    "find_split",
    "make_policy",
    "run_all",
    "schedule_clook",
    "schedule_cscan",
    "schedule_fcfs",
    "schedule_look",
    "schedule_scan",
    "schedule_sstf",
]
