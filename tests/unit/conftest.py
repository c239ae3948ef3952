from datetime import datetime, timedelta, UTC

import pytest

from shortener.dao.memory import EntryMemoryDAO


class FakeClock:
    """Controllable clock returning a fixed instant until advanced."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture(autouse=True)
def _env(monkeypatch):
    """Keep local-only behavior (e.g. re-raising handler errors) out of tests."""
    monkeypatch.delenv('APP_ENV', raising=False)
    monkeypatch.delenv('PROJECT_ROOT', raising=False)


@pytest.fixture
def clock():
    return FakeClock(datetime(2025, 10, 15, 12, 0, 0, tzinfo=UTC))


@pytest.fixture
def dao(clock):
    return EntryMemoryDAO(clock=clock)
