"""Expiry package: durations and expiry policies.

Python 3.13+.
"""

from .duration import Duration
from .policy import DEFAULT_EXPIRY_POLICY, ExpiryPolicy, StandardExpiryPolicy

__all__ = [
    "DEFAULT_EXPIRY_POLICY",
    "Duration",
    "ExpiryPolicy",
    "StandardExpiryPolicy",
]
