"""Hypothesis profiles registered by conftest."""

import pytest
from hypothesis import settings


class TestHypothesisProfiles:
    """Example budgets stay proportionate to a small value object."""

    @pytest.mark.parametrize(("name", "max_examples"), [("dev", 200), ("ci", 50), ("verbose", 100)])
    def test_profile_budget(self, name: str, max_examples: int) -> None:
        assert settings.get_profile(name).max_examples == max_examples

    def test_ci_profile_is_reproducible(self) -> None:
        profile = settings.get_profile("ci")
        assert profile.derandomize is True
        assert profile.print_blob is True

    def test_active_profile_is_light(self) -> None:
        assert settings().max_examples <= 200
