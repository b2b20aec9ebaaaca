"""Disk scheduling algorithms — three families, two passes each.

Every family is a ``SchedulingEngine`` with a *primitive* pass and an
*enhanced* pass:

    ==================  ===========  ==========
    Family              primitive    enhanced
    ==================  ===========  ==========
    BasicScheduling     FCFS         SSTF
    SweepScheduling     SCAN         C-SCAN
    LookScheduling      LOOK         C-LOOK
    ==================  ===========  ==========

Think of the disk arm as an elevator:
    - **FCFS** — stop at every floor in the order buttons were pressed.
    - **SSTF** — always go to the nearest requested floor (greedy).
    - **SCAN** — go all the way to the end, then come back.
    - **C-SCAN** — go all the way to the end, jump to the other end,
      carry on in the same direction.
    - **LOOK / C-LOOK** — like SCAN / C-SCAN, but turn around (or jump)
      at the last waiting passenger instead of the end of the shaft.

Direction convention: SCAN and LOOK sweep up unless every request lies
below the head, in which case they sweep down.  The cyclic variants
always sweep up.  An explicit ``direction`` overrides both.  Requests
sitting exactly on the head belong to the first sweep.
"""

from operator import attrgetter

from py_disk.engine import LOW_CYLINDER, Direction, SchedulingEngine


class BasicScheduling(SchedulingEngine):
    """FCFS (primitive) and SSTF (enhanced).

    FCFS is fair but zigzags across the disk.  SSTF minimises each
    individual seek and can starve requests far from a busy region.
    """

    PRIMITIVE_LABEL = "FCFS"
    ENHANCED_LABEL = "SSTF"

    def primitive(self) -> None:
        """Service requests in submission order."""
        self._finish(self.PRIMITIVE_LABEL)

    def enhanced(self) -> None:
        """Service the nearest remaining request first.

        At each step the unserviced tail of the queue is put in cylinder
        order, measured against the current position and merge-sorted by
        distance.  The sort is stable, so on a tie the lower cylinder
        comes first and is taken.
        """
        position = self._head
        last = len(self._queue) - 1
        for i in range(len(self._queue)):
            self._queue[i:] = sorted(self._queue[i:], key=attrgetter("cylinder"))
            for request in self._queue[i:]:
                request.seek_diff = request.cylinder - position
            self.merge_sort(i, last)
            position = self._queue[i].cylinder
        self._finish(self.ENHANCED_LABEL)


class _DirectionalScheduling(SchedulingEngine):
    """Shared sweep logic for the SCAN and LOOK families.

    A sweep splits the queue into the requests *ahead* of the head (in
    the sweep direction) and those *behind* it.  Measured from the head,
    the ahead side is always served nearest-first.  The behind side is
    served nearest-first after a reversal and farthest-first after a
    wrap-around jump.
    """

    PRIMITIVE_LABEL = ""
    ENHANCED_LABEL = ""
    bounded = False
    """True when the arm turns at the last request rather than the boundary."""

    def primitive(self) -> None:
        """Sweep one way, reverse, sweep back."""
        self._sweep(cyclic=False, label=self.PRIMITIVE_LABEL)

    def enhanced(self) -> None:
        """Sweep one way, jump to the far end, keep the same direction."""
        self._sweep(cyclic=True, label=self.ENHANCED_LABEL)

    def sweep_direction(self, *, cyclic: bool) -> Direction:
        """Return the direction the first sweep travels in."""
        if self._direction is not None:
            return self._direction
        if cyclic or not self._queue:
            return Direction.UP
        if all(request.cylinder < self._head for request in self._queue):
            return Direction.DOWN
        return Direction.UP

    def _sweep(self, *, cyclic: bool, label: str) -> None:
        self._set_turnaround(0, [])
        upward = self.sweep_direction(cyclic=cyclic) is Direction.UP
        if upward:
            ahead = [r for r in self._queue if r.cylinder >= self._head]
            behind = [r for r in self._queue if r.cylinder < self._head]
        else:
            ahead = [r for r in self._queue if r.cylinder <= self._head]
            behind = [r for r in self._queue if r.cylinder > self._head]
        self._queue[:] = ahead + behind
        for request in self._queue:
            request.seek_diff = request.cylinder - self._head

        split = len(ahead)
        self.merge_sort(0, split - 1)
        self.merge_sort(split, len(self._queue) - 1, ascending=not cyclic)

        if behind and not self.bounded:
            self._set_turnaround(split, self._boundary_stops(upward=upward, cyclic=cyclic))
        self._finish(label)

    def _boundary_stops(self, *, upward: bool, cyclic: bool) -> list[int]:
        near, far = (self._tail, LOW_CYLINDER) if upward else (LOW_CYLINDER, self._tail)
        return [near, far] if cyclic else [near]


class SweepScheduling(_DirectionalScheduling):
    """SCAN (primitive) and C-SCAN (enhanced).

    The arm always travels to the physical boundary before turning:
    ``tail`` on the way up, ``LOW_CYLINDER`` on the way down.  C-SCAN
    then jumps to the opposite boundary without servicing anything.
    Those stops show up in ``head_path`` but not in the packed result.
    """

    PRIMITIVE_LABEL = "SCAN"
    ENHANCED_LABEL = "C-SCAN"


class LookScheduling(_DirectionalScheduling):
    """LOOK (primitive) and C-LOOK (enhanced).

    Same service order as SCAN / C-SCAN, but the arm never travels past
    the outermost pending request, so the path has no boundary stops.
    """

    PRIMITIVE_LABEL = "LOOK"
    ENHANCED_LABEL = "C-LOOK"
    bounded = True
