"""Structural protocols for the capabilities a configuration carries.

A configuration holds handles to collaborators it never calls itself:
loaders, writers, listeners and filters are invoked by the cache engine
and the listener dispatch subsystem. These protocols document the shape
those collaborators must have; nothing here is checked at runtime.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from cacheconfig.enums import IsolationLevel, TransactionMode
    from cacheconfig.expiry.policy import ExpiryPolicy

__all__ = [
    "CacheEntry",
    "CacheEntryEventFilter",
    "CacheEntryListener",
    "CacheLoader",
    "CacheWriter",
    "ConfigurationSource",
    "EntryListenerRegistrationLike",
]


# pylint: disable=unnecessary-ellipsis
# Ellipsis (...) is the standard Protocol method body per PEP 544
class CacheEntry(Protocol):
    """A key/value pair as seen by an expiry policy."""

    @property
    def key(self) -> Any:
        """Entry key."""
        ...

    @property
    def value(self) -> Any:
        """Entry value."""
        ...


class CacheLoader(Protocol):
    """Read-through source consulted by the engine on a cache miss."""

    def load(self, key: Any) -> Any:
        """Return the value for ``key``, or None if there is none."""
        ...

    def load_all(self, keys: Iterable[Any]) -> Mapping[Any, Any]:
        """Return values for every key that could be loaded."""
        ...


class CacheWriter(Protocol):
    """Write-through sink the engine forwards mutations to."""

    def write(self, key: Any, value: Any) -> None:
        """Persist ``value`` under ``key``."""
        ...

    def delete(self, key: Any) -> None:
        """Remove ``key`` from the underlying store."""
        ...


class CacheEntryListener(Protocol):
    """Marker protocol for entry listeners.

    Listener callback signatures are defined by the dispatch subsystem;
    any object may be registered.
    """


class CacheEntryEventFilter(Protocol):
    """Predicate deciding whether a listener sees a given event."""

    def evaluate(self, event: Any) -> bool:
        """Return True if the event should be dispatched."""
        ...


class EntryListenerRegistrationLike(Protocol):
    """Anything carrying the four registration attributes.

    Accepted wherever registrations are ingested; the attributes are copied
    into a new ListenerRegistration and the original object is not retained.
    """

    @property
    def listener(self) -> Any: ...

    @property
    def filter(self) -> CacheEntryEventFilter | None: ...

    @property
    def old_value_required(self) -> bool: ...

    @property
    def synchronous(self) -> bool: ...


class ConfigurationSource(Protocol):
    """Read-only view of a complete option set.

    CacheConfiguration satisfies this protocol; copy-construction accepts
    any object that does.
    """

    @property
    def entry_listener_registrations(self) -> Iterable[EntryListenerRegistrationLike]: ...

    @property
    def loader(self) -> CacheLoader | None: ...

    @property
    def writer(self) -> CacheWriter | None: ...

    @property
    def expiry_policy(self) -> ExpiryPolicy: ...

    @property
    def read_through(self) -> bool: ...

    @property
    def write_through(self) -> bool: ...

    @property
    def statistics_enabled(self) -> bool: ...

    @property
    def store_by_value(self) -> bool: ...

    @property
    def transactions_enabled(self) -> bool: ...

    @property
    def transaction_isolation_level(self) -> IsolationLevel: ...

    @property
    def transaction_mode(self) -> TransactionMode: ...
