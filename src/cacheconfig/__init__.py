"""cacheconfig - configuration model for key/value caches.

Describes how a cache instance should behave (loading, writing, expiry,
statistics, store-by-value, transactions, entry listeners) without
implementing the cache itself. A mutable builder accumulates options and
produces an immutable snapshot that a cache engine consumes.

Public API:
    CacheConfiguration - Immutable option set (statistics flag excepted)
    CacheConfigurationBuilder - Fluent builder producing CacheConfiguration
    Duration - Time-to-live value, including the ETERNAL sentinel
    ExpiryPolicy - Protocol for expiry strategies
    StandardExpiryPolicy - Fixed-duration policy keyed on ExpiryType
    ListenerRegistration - Immutable entry listener registration

Enumerations:
    ExpiryType, TimeUnit, IsolationLevel, TransactionMode

Exceptions:
    CacheConfigError - Base exception class
    InvalidArgumentError - Missing or out-of-range argument
    ImmutabilityViolationError - Mutation of a frozen configuration field

Submodules:
    cacheconfig.protocols - Structural protocols for loaders, writers, listeners
    cacheconfig.configuration.defaults - Process-wide defaults record
"""

from .configuration import CacheConfiguration, CacheConfigurationBuilder
from .enums import ExpiryType, IsolationLevel, TimeUnit, TransactionMode
from .errors import CacheConfigError, ImmutabilityViolationError, InvalidArgumentError
from .expiry import DEFAULT_EXPIRY_POLICY, Duration, ExpiryPolicy, StandardExpiryPolicy
from .listeners import ListenerRegistration

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("cacheconfig")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_EXPIRY_POLICY",
    "CacheConfigError",
    "CacheConfiguration",
    "CacheConfigurationBuilder",
    "Duration",
    "ExpiryPolicy",
    "ExpiryType",
    "ImmutabilityViolationError",
    "InvalidArgumentError",
    "IsolationLevel",
    "ListenerRegistration",
    "StandardExpiryPolicy",
    "TimeUnit",
    "TransactionMode",
    "__version__",
]
