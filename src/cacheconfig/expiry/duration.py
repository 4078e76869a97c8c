"""Time-to-live durations for cache entries.

A Duration is either a non-negative amount of a TimeUnit or the ETERNAL
sentinel, which carries no unit and means the entry never expires.

Durations compare by length, not by spelling: ``Duration.seconds(60)``
equals ``Duration.minutes(1)``. ETERNAL equals only itself.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

from cacheconfig.enums import TimeUnit
from cacheconfig.errors import InvalidArgumentError

__all__ = ["Duration"]


@dataclass(frozen=True, slots=True, eq=False)
class Duration:
    """Immutable time-to-live.

    Attributes:
        time_unit: Unit of ``amount``; None only for ETERNAL
        amount: Non-negative number of units

    Example:
        >>> Duration.minutes(5).to_millis()
        300000
        >>> Duration.ETERNAL.is_eternal
        True
        >>> Duration.seconds(60) == Duration.minutes(1)
        True
    """

    ETERNAL: ClassVar[Duration]
    ZERO: ClassVar[Duration]

    time_unit: TimeUnit | None = None
    amount: int = 0

    def __post_init__(self) -> None:
        """Validate amount and unit.

        Raises:
            InvalidArgumentError: If amount is negative, or non-zero without a unit.
        """
        if self.amount < 0:
            msg = f"duration amount must not be negative, got {self.amount}"
            raise InvalidArgumentError(msg, argument="amount")
        if self.time_unit is None and self.amount != 0:
            msg = "duration amount requires a time unit"
            raise InvalidArgumentError(msg, argument="time_unit")

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def milliseconds(cls, amount: int) -> Duration:
        return cls(TimeUnit.MILLISECONDS, amount)

    @classmethod
    def seconds(cls, amount: int) -> Duration:
        return cls(TimeUnit.SECONDS, amount)

    @classmethod
    def minutes(cls, amount: int) -> Duration:
        return cls(TimeUnit.MINUTES, amount)

    @classmethod
    def hours(cls, amount: int) -> Duration:
        return cls(TimeUnit.HOURS, amount)

    @classmethod
    def days(cls, amount: int) -> Duration:
        return cls(TimeUnit.DAYS, amount)

    @classmethod
    def from_timedelta(cls, delta: timedelta | None) -> Duration:
        """Convert a timedelta, with None mapping to ETERNAL.

        Sub-millisecond precision is truncated.

        Raises:
            InvalidArgumentError: If delta is negative.
        """
        if delta is None:
            return cls.ETERNAL
        if delta < timedelta(0):
            msg = f"duration must not be negative, got {delta!r}"
            raise InvalidArgumentError(msg, argument="delta")
        return cls.milliseconds(delta // timedelta(milliseconds=1))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def is_eternal(self) -> bool:
        """True if entries with this duration never expire."""
        return self.time_unit is None

    @property
    def is_zero(self) -> bool:
        """True if entries with this duration expire immediately."""
        return self.time_unit is not None and self.amount == 0

    def to_millis(self) -> int | None:
        """Length in milliseconds, or None for ETERNAL."""
        if self.time_unit is None:
            return None
        return self.amount * self.time_unit.millis

    def to_timedelta(self) -> timedelta | None:
        """Length as a timedelta, or None for ETERNAL."""
        millis = self.to_millis()
        if millis is None:
            return None
        return timedelta(milliseconds=millis)

    def adjusted_time(self, start_millis: int) -> float:
        """Absolute expiry time for an entry touched at ``start_millis``.

        Returns ``math.inf`` for ETERNAL so comparisons against a clock
        never report expiry.
        """
        millis = self.to_millis()
        if millis is None:
            return math.inf
        return start_millis + millis

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.to_millis() == other.to_millis()

    def __hash__(self) -> int:
        return hash(("Duration", self.to_millis()))

    def __repr__(self) -> str:
        if self.time_unit is None:
            return "Duration.ETERNAL"
        return f"Duration({self.amount}, {self.time_unit.name})"


Duration.ETERNAL = Duration()
Duration.ZERO = Duration(TimeUnit.SECONDS, 0)
