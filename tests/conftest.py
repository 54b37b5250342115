"""Test configuration and fixtures.

Every test gets a fresh ScalarFactory so family naming counters never leak
between tests, and the library settings are read from a clean environment.
"""

import os

import pytest

from custom_scalars.config.settings import Settings
from custom_scalars.features.scalars.service import ScalarFactory
from custom_scalars.shared.validators.exceptions import ScalarValidationError


@pytest.fixture
def factory() -> ScalarFactory:
    """Create a new factory (one schema-build context) per test."""
    return ScalarFactory()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove CUSTOM_SCALARS_* variables and run from an empty directory."""
    for key in list(os.environ):
        if key.startswith("CUSTOM_SCALARS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


@pytest.fixture
def test_settings(clean_env) -> Settings:
    """Settings with the "Query error: " message prefix."""
    return Settings(error_prefix="Query error: ")


def outcome(parse, argument):
    """Run a parse entry point and describe what happened.

    Returns ("ok", value) on success or (error class, message) on failure.
    """
    try:
        return ("ok", parse(argument))
    except ScalarValidationError as exc:
        return (type(exc), exc.message)


@pytest.fixture
def run():
    """Expose `outcome` to tests."""
    return outcome
