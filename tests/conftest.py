"""Shared test fixtures."""
from datetime import date

import pytest

from money_tracker.config import Settings
from tests.factories import RecordingEventLogger, make_prefs


@pytest.fixture
def event_logger():
    """Collects exception and warning reports from the engine."""
    return RecordingEventLogger()


@pytest.fixture
def usd_prefs():
    return make_prefs()


@pytest.fixture
def fixed_today():
    return date(2026, 6, 15)


@pytest.fixture
def test_settings(monkeypatch):
    """Settings read from a clean environment."""
    for name in ("DEFAULT_LOCALE", "DEFAULT_CURRENCY", "MAX_PRECISION", "LOG_LEVEL"):
        monkeypatch.delenv(f"MONEY_TRACKER_{name}", raising=False)
    return Settings()
