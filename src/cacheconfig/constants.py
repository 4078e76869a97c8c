"""Shared constants for cacheconfig.

Scalar defaults used by both CacheConfiguration and CacheConfigurationBuilder.
The composite defaults record (expiry policy, enum members) lives in
``cacheconfig.configuration.defaults`` to avoid import cycles with the
expiry package.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Flag defaults
    "DEFAULT_READ_THROUGH",
    "DEFAULT_WRITE_THROUGH",
    "DEFAULT_STATISTICS_ENABLED",
    "DEFAULT_STORE_BY_VALUE",
    "DEFAULT_TRANSACTIONS_ENABLED",
    # Hashing
    "HASH_MULTIPLIER",
    "HASH_SEED",
    "HASH_MASK",
]

# ============================================================================
# FLAG DEFAULTS
# ============================================================================

DEFAULT_READ_THROUGH: bool = False
DEFAULT_WRITE_THROUGH: bool = False
DEFAULT_STATISTICS_ENABLED: bool = False

# Store-by-value is the safe default: the engine copies keys and values so
# later mutation of a caller's object is never visible through the cache.
DEFAULT_STORE_BY_VALUE: bool = True

DEFAULT_TRANSACTIONS_ENABLED: bool = False

# ============================================================================
# HASHING
# ============================================================================
#
# CacheConfiguration.__hash__ folds field hashes as
#     result = HASH_MULTIPLIER * result + hash(field)
# starting from HASH_SEED. The accumulator is masked to 64 bits after every
# step so the fold stays bounded regardless of field count.

HASH_MULTIPLIER: int = 31
HASH_SEED: int = 1
HASH_MASK: int = (1 << 64) - 1
