"""Tests for Duration construction, conversion and value semantics."""

import math
from datetime import timedelta

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cacheconfig import Duration, InvalidArgumentError, TimeUnit
from tests.strategies import durations


class TestDurationConstruction:
    """Validation performed in __post_init__."""

    def test_eternal_has_no_unit(self) -> None:
        assert Duration.ETERNAL.time_unit is None
        assert Duration.ETERNAL.amount == 0
        assert Duration.ETERNAL.is_eternal

    def test_zero_is_not_eternal(self) -> None:
        assert Duration.ZERO.is_zero
        assert not Duration.ZERO.is_eternal

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Duration(TimeUnit.SECONDS, -1)
        assert exc_info.value.argument == "amount"

    def test_amount_without_unit_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            Duration(None, 5)
        assert exc_info.value.argument == "time_unit"

    def test_invalid_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            Duration.seconds(-10)

    def test_frozen(self) -> None:
        duration = Duration.seconds(1)
        with pytest.raises(AttributeError):
            duration.amount = 2  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("factory", "unit"),
        [
            (Duration.milliseconds, TimeUnit.MILLISECONDS),
            (Duration.seconds, TimeUnit.SECONDS),
            (Duration.minutes, TimeUnit.MINUTES),
            (Duration.hours, TimeUnit.HOURS),
            (Duration.days, TimeUnit.DAYS),
        ],
    )
    def test_factories_set_unit(self, factory: object, unit: TimeUnit) -> None:
        duration = factory(3)  # type: ignore[operator]
        assert duration.time_unit is unit
        assert duration.amount == 3


class TestDurationConversion:
    """Millisecond, timedelta and absolute-time conversions."""

    def test_to_millis(self) -> None:
        assert Duration.minutes(5).to_millis() == 300_000
        assert Duration.days(1).to_millis() == 86_400_000

    def test_eternal_to_millis_is_none(self) -> None:
        assert Duration.ETERNAL.to_millis() is None
        assert Duration.ETERNAL.to_timedelta() is None

    def test_to_timedelta(self) -> None:
        assert Duration.hours(2).to_timedelta() == timedelta(hours=2)

    def test_from_timedelta_none_is_eternal(self) -> None:
        assert Duration.from_timedelta(None) is Duration.ETERNAL

    def test_from_timedelta_truncates_microseconds(self) -> None:
        duration = Duration.from_timedelta(timedelta(seconds=1, microseconds=999))
        assert duration.to_millis() == 1_000

    def test_from_negative_timedelta_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Duration.from_timedelta(timedelta(seconds=-1))

    def test_adjusted_time(self) -> None:
        assert Duration.seconds(2).adjusted_time(1_000) == 3_000
        assert Duration.ZERO.adjusted_time(1_000) == 1_000

    def test_eternal_adjusted_time_is_infinite(self) -> None:
        assert Duration.ETERNAL.adjusted_time(1_000) == math.inf

    @given(millis=st.integers(min_value=0, max_value=10**9))
    def test_timedelta_conversion_preserves_length(self, millis: int) -> None:
        duration = Duration.milliseconds(millis)
        assert Duration.from_timedelta(duration.to_timedelta()) == duration


class TestDurationEquality:
    """Durations compare by length."""

    def test_equal_lengths_in_different_units(self) -> None:
        assert Duration.seconds(60) == Duration.minutes(1)
        assert hash(Duration.seconds(60)) == hash(Duration.minutes(1))

    def test_zero_equals_zero_milliseconds(self) -> None:
        assert Duration.ZERO == Duration.milliseconds(0)

    def test_eternal_differs_from_zero(self) -> None:
        assert Duration.ETERNAL != Duration.ZERO

    def test_eternal_equals_new_eternal(self) -> None:
        assert Duration() == Duration.ETERNAL

    def test_comparison_with_other_type(self) -> None:
        assert Duration.seconds(1) != 1000

    @given(a=durations, b=durations)
    def test_equal_implies_equal_hash(self, a: Duration, b: Duration) -> None:
        if a == b:
            assert hash(a) == hash(b)

    def test_repr(self) -> None:
        assert repr(Duration.ETERNAL) == "Duration.ETERNAL"
        assert repr(Duration.minutes(10)) == "Duration(10, MINUTES)"
