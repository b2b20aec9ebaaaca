"""Scheduling audit log.

Engines and the dispatcher record what they did here rather than
printing.  Queue snapshots come from the ``"engine"`` source at DEBUG;
completed runs and rejected calls come from ``"dispatch"``.  Every
entry is numbered, so a caller can read back only what a later run
added with ``since``.
"""

from dataclasses import dataclass
from enum import IntEnum
from itertools import count


class LogLevel(IntEnum):
    """Severity levels for log entries."""

    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class LogEntry:
    """One record: what happened, where, and under which policy."""

    seq: int
    """Position in the log, starting at 1."""

    level: LogLevel
    message: str
    source: str
    policy: str = ""
    """Label of the policy being run, or "" when none applies."""

    def __str__(self) -> str:
        """Format as ``#seq [LEVEL] source(policy): message``."""
        where = f"{self.source}({self.policy})" if self.policy else self.source
        return f"#{self.seq} [{self.level.name}] {where}: {self.message}"


class Logger:
    """Append-only, numbered log buffer."""

    def __init__(self) -> None:
        """Create an empty logger."""
        self._entries: list[LogEntry] = []
        self._seq = count(start=1)

    @property
    def entries(self) -> list[LogEntry]:
        """Return all log entries in the order they were recorded."""
        return list(self._entries)

    def log(
        self,
        level: LogLevel,
        message: str,
        *,
        source: str,
        policy: str = "",
    ) -> LogEntry:
        """Append and return a new entry."""
        entry = LogEntry(
            seq=next(self._seq),
            level=level,
            message=message,
            source=source,
            policy=policy,
        )
        self._entries.append(entry)
        return entry

    def since(self, seq: int) -> list[LogEntry]:
        """Return entries recorded after entry number *seq*."""
        return [e for e in self._entries if e.seq > seq]

    def filter(
        self,
        *,
        min_level: LogLevel | None = None,
        source: str | None = None,
        policy: str | None = None,
    ) -> list[LogEntry]:
        """Return entries matching every given criterion.

        Args:
            min_level: If set, only entries at or above this level.
            source: If set, only entries from this source.
            policy: If set, only entries recorded for this policy label.

        """
        return [
            e
            for e in self._entries
            if (min_level is None or e.level >= min_level)
            and (source is None or e.source == source)
            and (policy is None or e.policy == policy)
        ]

    def clear(self) -> None:
        """Remove all entries.  Numbering carries on from where it was."""
        self._entries.clear()
