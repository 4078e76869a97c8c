"""Expiry policies.

An expiry policy answers one question per entry lifecycle event: how long
until this entry expires? Returning None from an event hook means "leave
the entry's current expiry as it is".

The cache engine evaluates policies; a configuration only carries one.
Policies are treated as stateless strategies and shared by reference
between builders and the configurations they produce.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from cacheconfig.enums import ExpiryType
from cacheconfig.expiry.duration import Duration

if TYPE_CHECKING:
    from cacheconfig.protocols import CacheEntry

__all__ = [
    "DEFAULT_EXPIRY_POLICY",
    "ExpiryPolicy",
    "StandardExpiryPolicy",
]


# pylint: disable=unnecessary-ellipsis
@runtime_checkable
class ExpiryPolicy(Protocol):
    """Computes time-to-live for creation, access and update events."""

    def expiry_for_creation(self, entry: CacheEntry) -> Duration | None:
        """TTL for a newly created entry."""
        ...

    def expiry_for_access(self, entry: CacheEntry) -> Duration | None:
        """TTL after a read, or None to keep the current expiry."""
        ...

    def expiry_for_update(self, entry: CacheEntry) -> Duration | None:
        """TTL after an update, or None to keep the current expiry."""
        ...


@dataclass(frozen=True, slots=True)
class StandardExpiryPolicy:
    """Fixed-duration policy keyed on an ExpiryType.

    Creation and update always restart the TTL. Access restarts it only
    for ``ExpiryType.ACCESSED``; for ``ExpiryType.MODIFIED`` reads leave
    the expiry untouched.

    Equality is structural, so two builders configured with the same
    ``set_expiry()`` arguments produce equal configurations.

    Attributes:
        expiry_type: Which events restart the TTL
        duration: TTL applied on those events

    Example:
        >>> policy = StandardExpiryPolicy(ExpiryType.ACCESSED, Duration.minutes(10))
        >>> policy.expiry_for_access(entry)
        Duration(10, MINUTES)
    """

    expiry_type: ExpiryType
    duration: Duration

    def expiry_for_creation(self, entry: CacheEntry) -> Duration | None:  # noqa: ARG002
        return self.duration

    def expiry_for_access(self, entry: CacheEntry) -> Duration | None:  # noqa: ARG002
        if self.expiry_type is ExpiryType.ACCESSED:
            return self.duration
        return None

    def expiry_for_update(self, entry: CacheEntry) -> Duration | None:  # noqa: ARG002
        return self.duration


# Never-expire policy. Shared by every default configuration.
DEFAULT_EXPIRY_POLICY: StandardExpiryPolicy = StandardExpiryPolicy(
    ExpiryType.MODIFIED, Duration.ETERNAL
)
