"""Shared pytest fixtures."""

import pytest

from mockledger.composition import reset_defaults
from mockledger.tests.fakes import FakeReportingPort


@pytest.fixture(autouse=True)
def fresh_defaults():
    """Reload settings for every test so environment patches take effect."""
    reset_defaults()
    yield
    reset_defaults()


@pytest.fixture
def reporter() -> FakeReportingPort:
    return FakeReportingPort()
