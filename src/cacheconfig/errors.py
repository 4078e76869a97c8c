"""cacheconfig exception hierarchy.

Hierarchy:
    CacheConfigError (base)
    ├─ InvalidArgumentError (also a ValueError)
    └─ ImmutabilityViolationError (also an AttributeError)

Only two places validate input: CacheConfigurationBuilder.set_expiry()
and Duration construction. Everything else is accepted as given and its
consequences are left to the consuming cache engine.

Python 3.13+. Zero external dependencies.
"""

from typing import final

__all__ = [
    "CacheConfigError",
    "ImmutabilityViolationError",
    "InvalidArgumentError",
]


class CacheConfigError(Exception):
    """Base exception for all cacheconfig errors."""


@final
class InvalidArgumentError(CacheConfigError, ValueError):
    """A required argument was missing or out of range.

    Subclasses ValueError so callers that only know the standard
    exception still catch it.

    Attributes:
        argument: Name of the offending parameter (empty if not applicable)
    """

    def __init__(self, message: str, *, argument: str = "") -> None:
        """Initialize InvalidArgumentError.

        Args:
            message: Human-readable error description
            argument: Name of the offending parameter
        """
        super().__init__(message)
        self.argument = argument


@final
class ImmutabilityViolationError(CacheConfigError, AttributeError):
    """Attempt to mutate a frozen field of a CacheConfiguration.

    Subclasses AttributeError to match what frozen dataclasses raise,
    so generic ``except AttributeError`` handlers keep working.
    """
