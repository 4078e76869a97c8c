"""Configuration package: the immutable snapshot and its builder.

Python 3.13+.
"""

from .builder import CacheConfigurationBuilder
from .cache_configuration import CacheConfiguration
from .defaults import DEFAULTS, ConfigurationDefaults

__all__ = [
    "DEFAULTS",
    "CacheConfiguration",
    "CacheConfigurationBuilder",
    "ConfigurationDefaults",
]
