"""Enumerations for cacheconfig type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ExpiryType(StrEnum):
    """Event that restarts an entry's time-to-live.

    StrEnum provides automatic string conversion: str(ExpiryType.MODIFIED) == "modified"
    """

    MODIFIED = "modified"
    """TTL measured from the last creation or update of the entry."""

    ACCESSED = "accessed"
    """TTL measured from the last creation, update or read of the entry."""


class TimeUnit(StrEnum):
    """Unit of a Duration amount."""

    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @property
    def millis(self) -> int:
        """Number of milliseconds in one unit."""
        return _MILLIS_PER_UNIT[self]


_MILLIS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.MILLISECONDS: 1,
    TimeUnit.SECONDS: 1_000,
    TimeUnit.MINUTES: 60_000,
    TimeUnit.HOURS: 3_600_000,
    TimeUnit.DAYS: 86_400_000,
}


class IsolationLevel(StrEnum):
    """Transaction isolation level requested for cache operations.

    Interpreted entirely by the transaction subsystem; this package
    only carries the value.
    """

    NONE = "none"
    READ_UNCOMMITTED = "read_uncommitted"
    READ_COMMITTED = "read_committed"
    REPEATABLE_READ = "repeatable_read"
    SERIALIZABLE = "serializable"


class TransactionMode(StrEnum):
    """Transaction coordination style.

    StrEnum provides automatic string conversion: str(TransactionMode.XA) == "xa"
    """

    NONE = "none"
    """No transactional wrapping."""

    LOCAL = "local"
    """Transactions local to the cache."""

    XA = "xa"
    """Distributed transactions coordinated by an external manager."""


__all__ = [
    "ExpiryType",
    "IsolationLevel",
    "TimeUnit",
    "TransactionMode",
]
