"""Pytest configuration for the cacheconfig test suite.

Hypothesis profiles:
- dev: local runs, 200 examples per property
- ci: 50 derandomized examples, failing blobs printed for reproduction
- verbose: 100 examples with per-example output

A configuration has eleven fields and no parsing, so a few hundred
examples already reach every field combination the strategies produce.
Deeper runs live in the fuzz-marked classes.

Profile selection: HYPOTHESIS_PROFILE wins, then CI=true selects "ci",
otherwise "dev". Example: HYPOTHESIS_PROFILE=verbose pytest tests/

Tests marked @pytest.mark.fuzz are skipped unless selected with -m fuzz.
"""

import os

import pytest
from hypothesis import Verbosity, settings

PROFILE_EXAMPLES: dict[str, int] = {"dev": 200, "ci": 50, "verbose": 100}

settings.register_profile("dev", max_examples=PROFILE_EXAMPLES["dev"])
settings.register_profile(
    "ci",
    max_examples=PROFILE_EXAMPLES["ci"],
    derandomize=True,
    print_blob=True,
)
settings.register_profile(
    "verbose",
    max_examples=PROFILE_EXAMPLES["verbose"],
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit is not None and explicit in PROFILE_EXAMPLES:
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
