"""Process-wide configuration defaults.

DEFAULTS is built once at import time and referenced, never re-created,
by CacheConfiguration() and CacheConfigurationBuilder(). Changing a
default means changing it here.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from cacheconfig.constants import (
    DEFAULT_READ_THROUGH,
    DEFAULT_STATISTICS_ENABLED,
    DEFAULT_STORE_BY_VALUE,
    DEFAULT_TRANSACTIONS_ENABLED,
    DEFAULT_WRITE_THROUGH,
)
from cacheconfig.enums import ExpiryType, IsolationLevel, TransactionMode
from cacheconfig.expiry.duration import Duration
from cacheconfig.expiry.policy import DEFAULT_EXPIRY_POLICY, StandardExpiryPolicy

__all__ = ["DEFAULTS", "ConfigurationDefaults"]


@dataclass(frozen=True, slots=True)
class ConfigurationDefaults:
    """Default value for every configuration option.

    ``expiry_type`` and ``expiry_duration`` are the builder's view of
    ``expiry_policy``; the two must describe the same policy.

    Attributes:
        expiry_type: Default expiry classification
        expiry_duration: Default time-to-live
        expiry_policy: Policy used when none is configured
        read_through: Read-through flag
        write_through: Write-through flag
        statistics_enabled: Statistics flag
        store_by_value: Store-by-value flag
        transactions_enabled: Transactions flag
        transaction_isolation_level: Isolation level
        transaction_mode: Transaction mode
    """

    expiry_type: ExpiryType = ExpiryType.MODIFIED
    expiry_duration: Duration = Duration.ETERNAL
    expiry_policy: StandardExpiryPolicy = DEFAULT_EXPIRY_POLICY
    read_through: bool = DEFAULT_READ_THROUGH
    write_through: bool = DEFAULT_WRITE_THROUGH
    statistics_enabled: bool = DEFAULT_STATISTICS_ENABLED
    store_by_value: bool = DEFAULT_STORE_BY_VALUE
    transactions_enabled: bool = DEFAULT_TRANSACTIONS_ENABLED
    transaction_isolation_level: IsolationLevel = IsolationLevel.NONE
    transaction_mode: TransactionMode = TransactionMode.NONE


DEFAULTS: ConfigurationDefaults = ConfigurationDefaults()
