"""Shared pytest setup for the dictl10n test suite.

Hypothesis profiles: "dev" (default, 500 examples), "ci" (selected by
CI=true, 50 derandomized examples) and "verbose" (100 examples with
progress output). HYPOTHESIS_PROFILE overrides the choice.

Property tests marked @pytest.mark.fuzz are skipped unless selected with
``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import Verbosity, settings

PROFILES = ("dev", "ci", "verbose")

settings.register_profile("dev", max_examples=500)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)
settings.register_profile("verbose", max_examples=100, verbosity=Verbosity.verbose)


def _select_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE")
    if requested in PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_select_profile())


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "fuzz: heavier property tests, run with -m fuzz")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if "fuzz" in str(config.getoption("-m", default="")):
        return
    skip_fuzz = pytest.mark.skip(reason="fuzz test; run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


@pytest.fixture
def greetings() -> dict[str, object]:
    """Small dictionary with nested keys and partial coverage."""
    return {
        "hello": {"en": "Hello", "es": "Hola"},
        "user": {
            "greeting": {"en": "Hello {{name}}", "es": "Hola {{name}}"},
            "farewell": {"en": "Goodbye"},
        },
    }
