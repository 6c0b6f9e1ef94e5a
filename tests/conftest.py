"""Pin the process time zone so local-zone projections are deterministic."""

import time

import pytest

# Central European Time with EU daylight saving rules, as a POSIX TZ string
# so no zone database is needed.
CET = "CET-1CEST,M3.5.0,M10.5.0/3"


@pytest.fixture(autouse=True)
def utc_zone(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture
def cet_zone(monkeypatch: pytest.MonkeyPatch, utc_zone: None):
    monkeypatch.setenv("TZ", CET)
    time.tzset()
    yield CET
