"""Disk-head scheduling simulator.

Re-exports the public API so callers can write::

    from py_disk import Policy, algorithm_selector
"""

from py_disk.algorithms import BasicScheduling, LookScheduling, SweepScheduling
from py_disk.broker import (
    Policy,
    ScheduleResult,
    UnknownPolicyError,
    algorithm_selector,
    compare_policies,
    simulate,
)
from py_disk.engine import (
    LOW_CYLINDER,
    MIN_INPUT_LENGTH,
    Direction,
    DiskSchedulingError,
    InsufficientInputError,
    SchedulingEngine,
)
from py_disk.logging import LogEntry, Logger, LogLevel
from py_disk.request import Request

__all__ = [
    "LOW_CYLINDER",
    "MIN_INPUT_LENGTH",
    "BasicScheduling",
    "Direction",
    "DiskSchedulingError",
    "InsufficientInputError",
    "LogEntry",
    "LogLevel",
    "Logger",
    "LookScheduling",
    "Policy",
    "Request",
    "ScheduleResult",
    "SchedulingEngine",
    "SweepScheduling",
    "UnknownPolicyError",
    "algorithm_selector",
    "compare_policies",
    "simulate",
]
