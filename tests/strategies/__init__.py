"""Hypothesis strategies for cacheconfig property-based testing.

Usage:
    from tests.strategies import configuration_kwargs, durations
"""

from .configuration import (
    CONFIGURATION_FIELDS,
    configuration_kwargs,
    different_value,
    durations,
    expiry_policies,
    loaders,
    names,
    registrations,
    writers,
)

__all__ = [
    "CONFIGURATION_FIELDS",
    "configuration_kwargs",
    "different_value",
    "durations",
    "expiry_policies",
    "loaders",
    "names",
    "registrations",
    "writers",
]
