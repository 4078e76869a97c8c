"""Public API surface of the cacheconfig package."""

import cacheconfig
from cacheconfig import (
    CacheConfigError,
    ImmutabilityViolationError,
    InvalidArgumentError,
)
from cacheconfig.configuration import DEFAULTS, ConfigurationDefaults
from cacheconfig.enums import ExpiryType, IsolationLevel, TimeUnit, TransactionMode


class TestExports:
    """__all__ and version metadata."""

    def test_all_names_importable(self) -> None:
        for name in cacheconfig.__all__:
            assert hasattr(cacheconfig, name), name

    def test_version_is_string(self) -> None:
        assert isinstance(cacheconfig.__version__, str)
        assert cacheconfig.__version__


class TestErrorHierarchy:
    """Exceptions share a base and map onto standard exceptions."""

    def test_invalid_argument(self) -> None:
        assert issubclass(InvalidArgumentError, CacheConfigError)
        assert issubclass(InvalidArgumentError, ValueError)

    def test_immutability_violation(self) -> None:
        assert issubclass(ImmutabilityViolationError, CacheConfigError)
        assert issubclass(ImmutabilityViolationError, AttributeError)

    def test_argument_recorded(self) -> None:
        error = InvalidArgumentError("bad", argument="duration")
        assert error.argument == "duration"
        assert str(error) == "bad"


class TestEnums:
    """StrEnum string conversion and the unit table."""

    def test_str_values(self) -> None:
        assert str(ExpiryType.ACCESSED) == "accessed"
        assert str(TransactionMode.XA) == "xa"
        assert str(IsolationLevel.READ_COMMITTED) == "read_committed"

    def test_isolation_levels(self) -> None:
        assert [level.name for level in IsolationLevel] == [
            "NONE",
            "READ_UNCOMMITTED",
            "READ_COMMITTED",
            "REPEATABLE_READ",
            "SERIALIZABLE",
        ]

    def test_every_unit_has_millis(self) -> None:
        assert [unit.millis for unit in TimeUnit] == [1, 1_000, 60_000, 3_600_000, 86_400_000]


class TestDefaultsRecord:
    """DEFAULTS is a single frozen instance."""

    def test_matches_fresh_record(self) -> None:
        assert ConfigurationDefaults() == DEFAULTS

    def test_policy_matches_pair(self) -> None:
        assert DEFAULTS.expiry_policy.expiry_type is DEFAULTS.expiry_type
        assert DEFAULTS.expiry_policy.duration is DEFAULTS.expiry_duration
