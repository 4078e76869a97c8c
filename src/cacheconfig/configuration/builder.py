"""Mutable builder for CacheConfiguration.

Accumulates options through chained setters and materializes an immutable
CacheConfiguration with build(). A builder may keep being mutated or
built again after build(); snapshots already produced never change.

The builder tracks expiry as an (ExpiryType, Duration) pair, updated
together by set_expiry(). An explicit ExpiryPolicy set through
set_expiry_policy() takes precedence over the pair until the next
set_expiry() call.

Not thread-safe: a builder belongs to the thread configuring it.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Self

from cacheconfig.enums import TransactionMode
from cacheconfig.errors import InvalidArgumentError
from cacheconfig.expiry.policy import StandardExpiryPolicy
from cacheconfig.listeners import ListenerRegistration

from .cache_configuration import CacheConfiguration
from .defaults import DEFAULTS

if TYPE_CHECKING:
    from cacheconfig.enums import ExpiryType, IsolationLevel
    from cacheconfig.expiry.duration import Duration
    from cacheconfig.expiry.policy import ExpiryPolicy
    from cacheconfig.protocols import (
        CacheEntryEventFilter,
        CacheLoader,
        CacheWriter,
        ConfigurationSource,
        EntryListenerRegistrationLike,
    )

__all__ = ["CacheConfigurationBuilder"]

logger = logging.getLogger(__name__)


class CacheConfigurationBuilder:
    """Fluent builder producing CacheConfiguration snapshots.

    Every setter returns the builder. Only set_expiry() validates its
    arguments; everything else is stored as given and interpreted by the
    cache engine.

    Example:
        >>> config = (
        ...     CacheConfigurationBuilder()
        ...     .set_loader(loader)
        ...     .set_read_through(True)
        ...     .set_expiry(ExpiryType.ACCESSED, Duration.minutes(10))
        ...     .add_entry_listener(audit_listener, synchronous=True)
        ...     .build()
        ... )
        >>> config.read_through
        True
    """

    __slots__ = (
        "_expiry_duration",
        "_expiry_policy",
        "_expiry_type",
        "_loader",
        "_read_through",
        "_registrations",
        "_statistics_enabled",
        "_store_by_value",
        "_transaction_isolation_level",
        "_transaction_mode",
        "_transactions_enabled",
        "_write_through",
        "_writer",
    )

    def __init__(self) -> None:
        """Initialize a builder holding the default option set."""
        self._registrations: list[ListenerRegistration] = []
        self._apply_defaults()

    def _apply_defaults(self) -> None:
        self._registrations.clear()
        self._loader: CacheLoader | None = None
        self._writer: CacheWriter | None = None
        self._expiry_type: ExpiryType = DEFAULTS.expiry_type
        self._expiry_duration: Duration = DEFAULTS.expiry_duration
        self._expiry_policy: ExpiryPolicy | None = None
        self._read_through = DEFAULTS.read_through
        self._write_through = DEFAULTS.write_through
        self._statistics_enabled = DEFAULTS.statistics_enabled
        self._store_by_value = DEFAULTS.store_by_value
        self._transactions_enabled = DEFAULTS.transactions_enabled
        self._transaction_isolation_level: IsolationLevel | None = (
            DEFAULTS.transaction_isolation_level
        )
        self._transaction_mode: TransactionMode | None = DEFAULTS.transaction_mode

    @classmethod
    def from_configuration(cls, configuration: ConfigurationSource) -> Self:
        """Create a builder holding every field of an existing configuration.

        The source's expiry policy object is kept as the explicit policy
        override, so build() shares it exactly as the copy constructor does.
        A StandardExpiryPolicy (subclasses included) also seeds the
        (type, duration) pair from its own fields.
        """
        builder = cls()
        for registration in configuration.entry_listener_registrations:
            builder.add_entry_listener_registration(registration)

        policy = configuration.expiry_policy
        if isinstance(policy, StandardExpiryPolicy):
            builder.set_expiry(policy.expiry_type, policy.duration)
        builder.set_expiry_policy(policy)

        return (
            builder.set_loader(configuration.loader)
            .set_writer(configuration.writer)
            .set_read_through(configuration.read_through)
            .set_write_through(configuration.write_through)
            .set_statistics_enabled(configuration.statistics_enabled)
            .set_store_by_value(configuration.store_by_value)
            .set_transactions_enabled(configuration.transactions_enabled)
            .set_transactions(
                configuration.transaction_isolation_level,
                configuration.transaction_mode,
            )
        )

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_entry_listener(
        self,
        listener: Any,
        event_filter: CacheEntryEventFilter | None = None,
        *,
        old_value_required: bool = False,
        synchronous: bool = False,
    ) -> Self:
        """Append a listener registration.

        The listener is not validated. Registering the same listener twice
        produces two registrations.
        """
        self._registrations.append(
            ListenerRegistration(
                listener=listener,
                filter=event_filter,
                old_value_required=old_value_required,
                synchronous=synchronous,
            )
        )
        return self

    def add_entry_listener_registration(self, registration: EntryListenerRegistrationLike) -> Self:
        """Append a copy of an existing registration."""
        self._registrations.append(ListenerRegistration.from_registration(registration))
        return self

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    def set_loader(self, loader: CacheLoader | None) -> Self:
        """Replace the loader; None clears it."""
        self._loader = loader
        return self

    def set_writer(self, writer: CacheWriter | None) -> Self:
        """Replace the writer; None clears it."""
        self._writer = writer
        return self

    def set_expiry(self, expiry_type: ExpiryType | None, duration: Duration | None) -> Self:
        """Replace the expiry type and duration together.

        Clears any policy set through set_expiry_policy().

        Raises:
            InvalidArgumentError: If either argument is None. The builder
                is left unchanged.
        """
        if expiry_type is None:
            msg = "expiry_type can not be None"
            raise InvalidArgumentError(msg, argument="expiry_type")
        if duration is None:
            msg = "duration can not be None"
            raise InvalidArgumentError(msg, argument="duration")

        self._expiry_type = expiry_type
        self._expiry_duration = duration
        self._expiry_policy = None
        return self

    def set_expiry_policy(self, policy: ExpiryPolicy | None) -> Self:
        """Use an explicit expiry policy; None reverts to the expiry pair."""
        self._expiry_policy = policy
        return self

    # ------------------------------------------------------------------
    # Flags
    # ------------------------------------------------------------------

    def set_read_through(self, read_through: bool) -> Self:
        self._read_through = read_through
        return self

    def set_write_through(self, write_through: bool) -> Self:
        self._write_through = write_through
        return self

    def set_statistics_enabled(self, statistics_enabled: bool) -> Self:
        self._statistics_enabled = statistics_enabled
        return self

    def set_store_by_value(self, store_by_value: bool) -> Self:
        self._store_by_value = store_by_value
        return self

    def set_transactions_enabled(self, transactions_enabled: bool) -> Self:
        self._transactions_enabled = transactions_enabled
        return self

    def set_transactions(
        self,
        isolation_level: IsolationLevel | None,
        mode: TransactionMode | None,
    ) -> Self:
        """Replace isolation level and mode together.

        Unlike set_expiry(), neither argument is validated: None and
        combinations that disagree with transactions_enabled are carried
        through for the transaction subsystem to interpret.
        """
        self._transaction_isolation_level = isolation_level
        self._transaction_mode = mode
        return self

    def reset(self) -> Self:
        """Restore every option to its default."""
        self._apply_defaults()
        logger.debug("Cache configuration builder reset to defaults")
        return self

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def entry_listener_registrations(self) -> tuple[ListenerRegistration, ...]:
        """Snapshot of the registrations added so far."""
        return tuple(self._registrations)

    @property
    def loader(self) -> CacheLoader | None:
        return self._loader

    @property
    def writer(self) -> CacheWriter | None:
        return self._writer

    @property
    def expiry_type(self) -> ExpiryType:
        return self._expiry_type

    @property
    def expiry_duration(self) -> Duration:
        return self._expiry_duration

    @property
    def expiry_policy(self) -> ExpiryPolicy:
        """Policy build() would use right now."""
        if self._expiry_policy is not None:
            return self._expiry_policy
        if (self._expiry_type, self._expiry_duration) == (
            DEFAULTS.expiry_type,
            DEFAULTS.expiry_duration,
        ):
            return DEFAULTS.expiry_policy
        return StandardExpiryPolicy(self._expiry_type, self._expiry_duration)

    @property
    def read_through(self) -> bool:
        return self._read_through

    @property
    def write_through(self) -> bool:
        return self._write_through

    @property
    def statistics_enabled(self) -> bool:
        return self._statistics_enabled

    @property
    def store_by_value(self) -> bool:
        return self._store_by_value

    @property
    def transactions_enabled(self) -> bool:
        return self._transactions_enabled

    @property
    def transaction_isolation_level(self) -> IsolationLevel | None:
        return self._transaction_isolation_level

    @property
    def transaction_mode(self) -> TransactionMode | None:
        return self._transaction_mode

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def build(self) -> CacheConfiguration:
        """Materialize an immutable CacheConfiguration from current state."""
        mode_active = self._transaction_mode not in (None, TransactionMode.NONE)
        if self._transactions_enabled != mode_active:
            logger.debug(
                "Passing through transaction settings as given "
                "(transactions_enabled=%s, isolation_level=%s, mode=%s)",
                self._transactions_enabled,
                self._transaction_isolation_level,
                self._transaction_mode,
            )

        configuration = CacheConfiguration.from_configuration(self)  # type: ignore[arg-type]
        logger.debug(
            "Built cache configuration with %d listener registration(s)",
            len(configuration.entry_listener_registrations),
        )
        return configuration
