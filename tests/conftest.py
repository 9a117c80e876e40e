from __future__ import annotations

import time

import pytest

from datebuilder.settings import get_settings


@pytest.fixture
def host_tz(monkeypatch: pytest.MonkeyPatch):
    """Switch the process-local time zone (POSIX TZ strings, no tzdata needed)."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")

    def _set(tz: str) -> None:
        monkeypatch.setenv("TZ", tz)
        time.tzset()

    yield _set
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def utc_host(host_tz) -> None:
    host_tz("UTC0")


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
