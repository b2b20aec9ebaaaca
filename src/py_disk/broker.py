"""Dispatcher — pick an algorithm by policy identifier and run it.

Callers never touch the engine classes directly.  They hand over the
flat input sequence and a policy, and get back the packed result::

    >>> algorithm_selector([50, 95, 180, 34, 199], Policy.FCFS)
    [276, 50, 199, 95, 180, 34]

The dispatch table maps each policy to its family; identifier parity
picks the pass (odd → primitive, even → enhanced).  Every call builds a
fresh engine, so calls share no state.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum

from py_disk.algorithms import BasicScheduling, LookScheduling, SweepScheduling
from py_disk.engine import Direction, DiskSchedulingError, SchedulingEngine
from py_disk.logging import Logger, LogLevel


class UnknownPolicyError(DiskSchedulingError):
    """Raise when a policy identifier names no known algorithm."""


class Policy(IntEnum):
    """The six scheduling policies, numbered as callers select them."""

    FCFS = 1
    SSTF = 2
    SCAN = 3
    CSCAN = 4
    LOOK = 5
    CLOOK = 6

    @property
    def label(self) -> str:
        """Return the display name, e.g. ``"C-SCAN"``."""
        return _LABELS[self]

    @property
    def is_primitive(self) -> bool:
        """Return True for FCFS, SCAN and LOOK (odd identifiers)."""
        return self % 2 == 1

    @classmethod
    def parse(cls, value: "Policy | int | str") -> "Policy":
        """Resolve an identifier or a name to a policy.

        Names ignore case, dashes, underscores and spaces, so ``"c-scan"``,
        ``"C_SCAN"`` and ``"cscan"`` all resolve to ``CSCAN``.  Numeric
        strings are treated as identifiers, so ``"-1"`` is rejected rather
        than read as a name.

        Raises:
            UnknownPolicyError: If *value* matches no policy.

        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                number = int(text)
            except ValueError:
                key = text.upper().replace("-", "").replace("_", "").replace(" ", "")
                if key in cls.__members__:
                    return cls[key]
            else:
                return cls.parse(number)
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        msg = f"Unknown policy: {value!r} (expected 1-6 or one of {', '.join(cls.__members__)})"
        raise UnknownPolicyError(msg)


_LABELS: dict[Policy, str] = {
    Policy.FCFS: "FCFS",
    Policy.SSTF: "SSTF",
    Policy.SCAN: "SCAN",
    Policy.CSCAN: "C-SCAN",
    Policy.LOOK: "LOOK",
    Policy.CLOOK: "C-LOOK",
}

_FAMILIES: dict[Policy, type[SchedulingEngine]] = {
    Policy.FCFS: BasicScheduling,
    Policy.SSTF: BasicScheduling,
    Policy.SCAN: SweepScheduling,
    Policy.CSCAN: SweepScheduling,
    Policy.LOOK: LookScheduling,
    Policy.CLOOK: LookScheduling,
}


@dataclass(frozen=True)
class ScheduleResult:
    """Outcome of one simulation, unpacked into named fields."""

    policy: Policy
    total_seek: int
    """Sum of distances between consecutive serviced cylinders."""

    head: int
    tail: int
    order: tuple[int, ...]
    """Cylinders in the order they were serviced."""

    path: tuple[int, ...]
    """Every arm position from the head on, boundary stops included."""

    head_movement: int
    """Length of ``path``; exceeds ``total_seek`` only for SCAN/C-SCAN."""

    def packed(self) -> list[int]:
        """Return ``[total_seek, head, tail, *order]``."""
        return [self.total_seek, self.head, self.tail, *self.order]


def algorithm_selector(
    input_queue: Iterable[int],
    policy: Policy | int | str,
    *,
    direction: Direction | None = None,
    logger: Logger | None = None,
) -> list[int]:
    """Run *policy* over *input_queue* and return the packed result.

    Args:
        input_queue: ``[head, *requests, tail]``; never modified.
        policy: A ``Policy``, its identifier (1-6) or its name.
        direction: Optional sweep direction for the directional policies.
        logger: Optional audit log.

    Returns:
        ``[total_seek, head, tail, *serviced_cylinders]``.

    Raises:
        UnknownPolicyError: If *policy* is not one of the six policies.
        InsufficientInputError: If *input_queue* has fewer than two values.

    """
    _, engine = _run(input_queue, policy, direction=direction, logger=logger)
    return engine.result_queue()


def simulate(
    input_queue: Iterable[int],
    policy: Policy | int | str,
    *,
    direction: Direction | None = None,
    logger: Logger | None = None,
) -> ScheduleResult:
    """Run *policy* like ``algorithm_selector`` but return named fields."""
    resolved, engine = _run(input_queue, policy, direction=direction, logger=logger)
    return ScheduleResult(
        policy=resolved,
        total_seek=engine.total_seek(),
        head=engine.head,
        tail=engine.tail,
        order=tuple(engine.cylinders()),
        path=tuple(engine.head_path()),
        head_movement=engine.head_movement(),
    )


def compare_policies(
    input_queue: Iterable[int],
    *,
    direction: Direction | None = None,
    logger: Logger | None = None,
) -> dict[Policy, ScheduleResult]:
    """Run every policy over the same input, each on its own engine."""
    values = list(input_queue)
    return {
        policy: simulate(values, policy, direction=direction, logger=logger) for policy in Policy
    }


def _run(
    input_queue: Iterable[int],
    policy: Policy | int | str,
    *,
    direction: Direction | None,
    logger: Logger | None,
) -> tuple[Policy, SchedulingEngine]:
    try:
        resolved = Policy.parse(policy)
        engine = _FAMILIES[resolved](input_queue, direction=direction, logger=logger)
    except DiskSchedulingError as exc:
        if logger is not None:
            logger.log(LogLevel.WARNING, str(exc), source="dispatch")
        raise

    if resolved.is_primitive:
        engine.primitive()
    else:
        engine.enhanced()

    if logger is not None:
        logger.log(
            LogLevel.INFO,
            f"{resolved.label} serviced {len(engine.queue)} request(s), "
            f"total seek {engine.total_seek()}",
            source="dispatch",
            policy=resolved.label,
        )
    return resolved, engine
