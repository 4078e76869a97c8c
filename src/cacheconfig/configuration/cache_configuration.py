"""Immutable cache configuration value object.

CacheConfiguration is the snapshot handed to a cache engine at creation
time. Every field is frozen after construction except
``statistics_enabled``, which an engine or administrative operation may
toggle later.

Construction paths:
    CacheConfiguration()                       - all defaults
    CacheConfiguration(loader=..., ...)        - explicit fields (keyword-only)
    CacheConfiguration.from_configuration(src) - copy of any ConfigurationSource

Listener registrations are always re-wrapped into new ListenerRegistration
records. Loader, writer and expiry policy are stateless strategies and are
shared by reference.

Thread Safety:
    Safe to share across threads once constructed. Writes to
    ``statistics_enabled`` are single attribute stores; callers needing
    ordering guarantees around the toggle must synchronize themselves.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from cacheconfig.constants import HASH_MASK, HASH_MULTIPLIER, HASH_SEED
from cacheconfig.errors import ImmutabilityViolationError
from cacheconfig.listeners import ListenerRegistration, copy_registrations

from .defaults import DEFAULTS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cacheconfig.enums import IsolationLevel, TransactionMode
    from cacheconfig.expiry.policy import ExpiryPolicy
    from cacheconfig.protocols import (
        CacheLoader,
        CacheWriter,
        ConfigurationSource,
        EntryListenerRegistrationLike,
    )

__all__ = ["CacheConfiguration"]

logger = logging.getLogger(__name__)


class CacheConfiguration:
    """Finalized option set for a cache instance.

    Equality is structural over every field, listener registration order
    included. The hash folds every field as well, so toggling
    ``statistics_enabled`` changes it: do not toggle a configuration
    while it is used as a dict key or set member.

    Example:
        >>> config = CacheConfiguration(read_through=True, loader=my_loader)
        >>> config.read_through
        True
        >>> CacheConfiguration.from_configuration(config) == config
        True
        >>> config.store_by_value = False
        Traceback (most recent call last):
        ...
        cacheconfig.errors.ImmutabilityViolationError: ...
    """

    __slots__ = (
        "_entry_listener_registrations",
        "_expiry_policy",
        "_frozen",
        "_loader",
        "_read_through",
        "_statistics_enabled",
        "_store_by_value",
        "_transaction_isolation_level",
        "_transaction_mode",
        "_transactions_enabled",
        "_write_through",
        "_writer",
    )

    # Public attributes that stay writable after construction.
    _MUTABLE_ATTRS: frozenset[str] = frozenset(("statistics_enabled",))

    def __init__(
        self,
        *,
        entry_listener_registrations: Iterable[EntryListenerRegistrationLike] = (),
        loader: CacheLoader | None = None,
        writer: CacheWriter | None = None,
        expiry_policy: ExpiryPolicy | None = None,
        read_through: bool = DEFAULTS.read_through,
        write_through: bool = DEFAULTS.write_through,
        statistics_enabled: bool = DEFAULTS.statistics_enabled,
        store_by_value: bool = DEFAULTS.store_by_value,
        transactions_enabled: bool = DEFAULTS.transactions_enabled,
        transaction_isolation_level: IsolationLevel = DEFAULTS.transaction_isolation_level,
        transaction_mode: TransactionMode = DEFAULTS.transaction_mode,
    ) -> None:
        """Initialize CacheConfiguration.

        Args:
            entry_listener_registrations: Registrations to copy, in dispatch order
            loader: Read-through source (None disables loading)
            writer: Write-through sink (None disables writing)
            expiry_policy: Expiry policy (None selects the never-expire default)
            read_through: Consult the loader on cache misses
            write_through: Forward mutations to the writer
            statistics_enabled: Gather cache statistics
            store_by_value: Copy keys and values on store/retrieve
            transactions_enabled: Wrap operations in transactions
            transaction_isolation_level: Requested isolation level
            transaction_mode: Transaction coordination style
        """
        set_field = object.__setattr__
        set_field(
            self,
            "_entry_listener_registrations",
            copy_registrations(entry_listener_registrations),
        )
        set_field(self, "_loader", loader)
        set_field(self, "_writer", writer)
        set_field(
            self,
            "_expiry_policy",
            expiry_policy if expiry_policy is not None else DEFAULTS.expiry_policy,
        )
        set_field(self, "_read_through", read_through)
        set_field(self, "_write_through", write_through)
        set_field(self, "_statistics_enabled", statistics_enabled)
        set_field(self, "_store_by_value", store_by_value)
        set_field(self, "_transactions_enabled", transactions_enabled)
        set_field(self, "_transaction_isolation_level", transaction_isolation_level)
        set_field(self, "_transaction_mode", transaction_mode)
        set_field(self, "_frozen", True)

    @classmethod
    def from_configuration(cls, configuration: ConfigurationSource) -> CacheConfiguration:
        """Copy-construct from any configuration source.

        Registrations are re-wrapped; capability handles are shared.
        """
        return cls(
            entry_listener_registrations=configuration.entry_listener_registrations,
            loader=configuration.loader,
            writer=configuration.writer,
            expiry_policy=configuration.expiry_policy,
            read_through=configuration.read_through,
            write_through=configuration.write_through,
            statistics_enabled=configuration.statistics_enabled,
            store_by_value=configuration.store_by_value,
            transactions_enabled=configuration.transactions_enabled,
            transaction_isolation_level=configuration.transaction_isolation_level,
            transaction_mode=configuration.transaction_mode,
        )

    # ------------------------------------------------------------------
    # Freezing
    # ------------------------------------------------------------------

    def __setattr__(self, name: str, value: object) -> None:
        """Reject mutation of every attribute except statistics_enabled.

        Raises:
            ImmutabilityViolationError: If the attribute is frozen
        """
        if name in self._MUTABLE_ATTRS or not getattr(self, "_frozen", False):
            object.__setattr__(self, name, value)
            return
        msg = f"Cannot modify frozen configuration attribute: {name}"
        raise ImmutabilityViolationError(msg)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete configuration attribute: {name}"
        raise ImmutabilityViolationError(msg)

    def __copy__(self) -> CacheConfiguration:
        return self.from_configuration(self)

    def __deepcopy__(self, memo: dict[int, Any]) -> CacheConfiguration:
        # Capability handles are strategies, not owned state: share them.
        return self.from_configuration(self)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def entry_listener_registrations(self) -> tuple[ListenerRegistration, ...]:
        """Listener registrations in dispatch order (read-only)."""
        return self._entry_listener_registrations

    @property
    def loader(self) -> CacheLoader | None:
        """Read-through source, or None (read-only)."""
        return self._loader

    @property
    def writer(self) -> CacheWriter | None:
        """Write-through sink, or None (read-only)."""
        return self._writer

    @property
    def expiry_policy(self) -> ExpiryPolicy:
        """Expiry policy; never None (read-only)."""
        return self._expiry_policy

    @property
    def read_through(self) -> bool:
        return self._read_through

    @property
    def write_through(self) -> bool:
        return self._write_through

    @property
    def store_by_value(self) -> bool:
        """True if the engine copies keys and values; False stores references."""
        return self._store_by_value

    @property
    def transactions_enabled(self) -> bool:
        return self._transactions_enabled

    @property
    def transaction_isolation_level(self) -> IsolationLevel:
        return self._transaction_isolation_level

    @property
    def transaction_mode(self) -> TransactionMode:
        return self._transaction_mode

    @property
    def statistics_enabled(self) -> bool:
        """Whether statistics are gathered. The only writable field."""
        return self._statistics_enabled

    @statistics_enabled.setter
    def statistics_enabled(self, enabled: bool) -> None:
        object.__setattr__(self, "_statistics_enabled", enabled)
        logger.debug("Statistics %s for cache configuration", "enabled" if enabled else "disabled")

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def _fields(self) -> tuple[object, ...]:
        # Enum-valued fields are keyed by type: StrEnum members equal their
        # plain string values, which set_transactions() does not reject.
        return (
            self._entry_listener_registrations,
            self._loader,
            self._writer,
            self._expiry_policy,
            self._read_through,
            self._write_through,
            self._statistics_enabled,
            self._store_by_value,
            self._transactions_enabled,
            (type(self._transaction_isolation_level), self._transaction_isolation_level),
            (type(self._transaction_mode), self._transaction_mode),
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, CacheConfiguration):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        """Fold every field with multiplier 31.

        Registrations are folded one at a time so an unhashable listener,
        filter, loader or writer contributes a constant instead of failing.
        """
        result = HASH_SEED
        for registration in self._entry_listener_registrations:
            result = _fold(result, registration)
        for value in self._fields()[1:]:
            result = _fold(result, value)
        return result

    def __reduce__(self) -> tuple[Any, ...]:
        # Slot-by-slot restoration would trip the frozen guard.
        return (_restore_configuration, (self._as_kwargs(),))

    def _as_kwargs(self) -> dict[str, Any]:
        return {
            "entry_listener_registrations": self._entry_listener_registrations,
            "loader": self._loader,
            "writer": self._writer,
            "expiry_policy": self._expiry_policy,
            "read_through": self._read_through,
            "write_through": self._write_through,
            "statistics_enabled": self._statistics_enabled,
            "store_by_value": self._store_by_value,
            "transactions_enabled": self._transactions_enabled,
            "transaction_isolation_level": self._transaction_isolation_level,
            "transaction_mode": self._transaction_mode,
        }

    def __repr__(self) -> str:
        return (
            f"CacheConfiguration("
            f"entry_listener_registrations={self._entry_listener_registrations!r}, "
            f"loader={self._loader!r}, "
            f"writer={self._writer!r}, "
            f"expiry_policy={self._expiry_policy!r}, "
            f"read_through={self._read_through!r}, "
            f"write_through={self._write_through!r}, "
            f"statistics_enabled={self._statistics_enabled!r}, "
            f"store_by_value={self._store_by_value!r}, "
            f"transactions_enabled={self._transactions_enabled!r}, "
            f"transaction_isolation_level={self._transaction_isolation_level!r}, "
            f"transaction_mode={self._transaction_mode!r})"
        )


def _fold(result: int, value: object) -> int:
    try:
        value_hash = hash(value)
    except TypeError:
        # Unhashable members still compare by __eq__; equal values fold equally.
        value_hash = 0
    return (HASH_MULTIPLIER * result + value_hash) & HASH_MASK


def _restore_configuration(kwargs: dict[str, Any]) -> CacheConfiguration:
    """Rebuild a configuration from its pickled field values."""
    return CacheConfiguration(**kwargs)
