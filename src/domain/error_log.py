"""
Error log - Errors kept in an ordinary data structure.

Because failures are values, a caller can store them like any other data.
The domain never writes here on its own; whoever owns an ErrorLog decides
what to record.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import TypeVar

from .errors import DomainError
from .result import Failure, Result

T = TypeVar("T")
E = TypeVar("E", bound=DomainError)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ErrorLogEntry:
    timestamp: datetime
    error: DomainError


@dataclass
class ErrorLog:
    """
    Append-only, ordered record of domain errors.

    Single writer assumed; no locking.
    """

    clock: Callable[[], datetime] = _utcnow
    _entries: list[ErrorLogEntry] = field(default_factory=list, init=False, repr=False)

    def append(self, error: DomainError) -> ErrorLogEntry:
        entry = ErrorLogEntry(timestamp=self.clock(), error=error)
        self._entries.append(entry)
        return entry

    def record(self, result: Result[T, E]) -> Result[T, E]:
        """
        Append the error of a Failure; pass the result through unchanged.

        Lets a log step sit inside a chain without altering the outcome.
        """
        if isinstance(result, Failure):
            self.append(result.error)
        return result

    @property
    def entries(self) -> tuple[ErrorLogEntry, ...]:
        return tuple(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ErrorLogEntry]:
        return iter(self.entries)
