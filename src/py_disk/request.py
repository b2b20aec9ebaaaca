"""A single pending cylinder access.

Each request remembers the cylinder it wants and, once a scheduling pass
has placed it, how far the arm travelled to reach it from the previously
serviced request.
"""


class Request:
    """One cylinder-access request in a scheduling queue.

    The cylinder is fixed at construction.  ``seek_diff`` is rewritten by
    every pass, and the SSTF pass rewrites it several times while it
    searches for the nearest request.
    """

    def __init__(self, cylinder: int) -> None:
        """Create a request for *cylinder* with no seek distance yet."""
        self._cylinder = cylinder
        self._seek_diff = 0

    @property
    def cylinder(self) -> int:
        """Return the requested cylinder."""
        return self._cylinder

    @property
    def seek_diff(self) -> int:
        """Return the distance from the previously serviced position."""
        return self._seek_diff

    @seek_diff.setter
    def seek_diff(self, value: int) -> None:
        """Store a seek distance, always as an unsigned value."""
        self._seek_diff = abs(value)

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"Request(cylinder={self._cylinder}, seek_diff={self._seek_diff})"
