"""Scheduling engine — the state and utilities every algorithm shares.

An engine is built from one flat input sequence::

    [head, request_1, request_2, ..., request_n, tail]

The first value is where the arm starts, the last is the highest
addressable cylinder, and everything in between becomes a ``Request``.
Algorithm families subclass the engine and reorder its queue *in place*;
the engine then turns the finished queue into the packed result::

    [total_seek, head, tail, cylinder_1, ..., cylinder_n]

Callers unpack that list positionally, so its layout never changes.

Shared utilities:
    - ``set_absolute_seek`` — fill in each request's seek distance from
      the current order, using the head as the first predecessor.
    - ``total_seek`` — sum of those distances.
    - ``merge_sort`` — stable, in-place merge sort over a sub-range of
      the queue, keyed on each request's *current* seek distance.  SSTF
      re-sorts after every step because the distances change as the arm
      moves.

Each engine is single-use: build it, run one pass, read the result,
throw it away.
"""

from collections.abc import Iterable
from enum import StrEnum
from itertools import pairwise

from py_disk.logging import Logger, LogLevel
from py_disk.request import Request

LOW_CYLINDER = 0
"""Lowest cylinder on the disk — SCAN/C-SCAN travel here when sweeping down."""

MIN_INPUT_LENGTH = 2
"""An input sequence must carry at least a head and a tail."""


class DiskSchedulingError(Exception):
    """Base class for disk scheduling failures."""


class InsufficientInputError(DiskSchedulingError):
    """Raise when an input sequence has no room for a head and a tail."""


class Direction(StrEnum):
    """Direction the arm sweeps in."""

    UP = "up"
    DOWN = "down"


class SchedulingEngine:
    """Request queue plus head/tail boundaries for one simulation.

    Subclasses implement ``primitive`` (FCFS, SCAN, LOOK) and
    ``enhanced`` (SSTF, C-SCAN, C-LOOK).  Both must leave the queue in
    final service order with seek distances set.
    """

    def __init__(
        self,
        input_queue: Iterable[int],
        *,
        direction: Direction | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Split *input_queue* into head, requests and tail.

        The input is copied, never modified.

        Args:
            input_queue: ``[head, *requests, tail]``.
            direction: Sweep direction for directional families.  None
                lets each family pick its own convention.
            logger: Optional audit log for queue snapshots.

        Raises:
            InsufficientInputError: If fewer than two values are given.

        """
        values = list(input_queue)
        if len(values) < MIN_INPUT_LENGTH:
            msg = f"Need at least a head and a tail, got {len(values)} value(s)"
            raise InsufficientInputError(msg)
        self._head = values[0]
        self._tail = values[-1]
        self._queue = [Request(cylinder) for cylinder in values[1:-1]]
        self._direction = direction
        self._logger = logger
        self._label = ""
        # Boundary cylinders reached without servicing anything, and the
        # queue index they are visited before.
        self._turnaround: list[int] = []
        self._turn_index = 0

    @property
    def head(self) -> int:
        """Return the starting head position."""
        return self._head

    @property
    def tail(self) -> int:
        """Return the highest addressable cylinder."""
        return self._tail

    @property
    def direction(self) -> Direction | None:
        """Return the requested sweep direction, if any."""
        return self._direction

    @property
    def queue(self) -> list[Request]:
        """Return the requests in their current order."""
        return list(self._queue)

    @property
    def turnaround(self) -> list[int]:
        """Return the boundary cylinders visited without servicing."""
        return list(self._turnaround)

    def primitive(self) -> None:
        """Run the family's primitive pass (FCFS, SCAN or LOOK)."""
        raise NotImplementedError

    def enhanced(self) -> None:
        """Run the family's enhanced pass (SSTF, C-SCAN or C-LOOK)."""
        raise NotImplementedError

    def cylinders(self) -> list[int]:
        """Return the cylinder of every request in current order."""
        return [request.cylinder for request in self._queue]

    def set_absolute_seek(self) -> None:
        """Set each request's distance from its predecessor.

        The head is the predecessor of the first request.
        """
        previous = self._head
        for request in self._queue:
            request.seek_diff = abs(request.cylinder - previous)
            previous = request.cylinder

    def total_seek(self) -> int:
        """Return the sum of all stored seek distances."""
        return sum(request.seek_diff for request in self._queue)

    def merge_sort(self, low: int, high: int, *, ascending: bool = True) -> None:
        """Stable in-place merge sort of ``queue[low..high]`` by seek distance.

        Both bounds are inclusive.  Equal distances keep their current
        relative order in either direction.

        Args:
            low: First index of the range.
            high: Last index of the range.
            ascending: Sort nearest-first when True, farthest-first
                otherwise.

        """
        if low >= high:
            return
        mid = (low + high) // 2
        self.merge_sort(low, mid, ascending=ascending)
        self.merge_sort(mid + 1, high, ascending=ascending)
        self._merge(low, mid, high, ascending=ascending)

    def _merge(self, low: int, mid: int, high: int, *, ascending: bool) -> None:
        """Merge the sorted runs ``[low..mid]`` and ``[mid+1..high]``."""
        left = self._queue[low : mid + 1]
        right = self._queue[mid + 1 : high + 1]
        merged: list[Request] = []
        i = j = 0
        while i < len(left) and j < len(right):
            a, b = left[i].seek_diff, right[j].seek_diff
            # <= / >= keeps the left run first on ties
            if (a <= b) if ascending else (a >= b):
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        self._queue[low : high + 1] = merged

    def result_queue(self) -> list[int]:
        """Return ``[total_seek, head, tail, *cylinders]`` as a new list."""
        return [self.total_seek(), self._head, self._tail, *self.cylinders()]

    def head_path(self) -> list[int]:
        """Return every position the arm passes through, in order.

        Starts at the head and includes boundary stops (SCAN reversal,
        C-SCAN jump) that service no request.
        """
        cylinders = self.cylinders()
        index = self._turn_index
        return [self._head, *cylinders[:index], *self._turnaround, *cylinders[index:]]

    def head_movement(self) -> int:
        """Return the total distance the arm travels along ``head_path``."""
        return sum(abs(b - a) for a, b in pairwise(self.head_path()))

    def display(self) -> str:
        """Return the current cylinder order and record it at DEBUG."""
        text = f"[{' '.join(str(c) for c in self.cylinders())}]"
        self._debug(f"queue {text}")
        return text

    def display_seek(self) -> str:
        """Return the current seek distances and record them at DEBUG."""
        text = f"[{' '.join(str(r.seek_diff) for r in self._queue)}]"
        self._debug(f"seek {text}")
        return text

    def _set_turnaround(self, index: int, stops: list[int]) -> None:
        """Record boundary *stops* visited before ``queue[index]``."""
        self._turn_index = index
        self._turnaround = list(stops)

    def _finish(self, label: str) -> None:
        """Close a pass: set final seek distances and snapshot the queue."""
        self._label = label
        self.set_absolute_seek()
        self.display()
        self.display_seek()

    def _debug(self, message: str) -> None:
        if self._logger is not None:
            self._logger.log(LogLevel.DEBUG, message, source="engine", policy=self._label)
