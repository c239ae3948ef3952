"""Unit tests for the ExpirySweeper.

Test coverage includes:

1. Single tick
   - Ensures a tick sweeps the store with the configured threshold.
   - Ensures non-zero removals are logged and zero removals are silent.

2. Background loop
   - Ensures the loop sweeps repeatedly while running.
   - Ensures stop() ends the loop promptly and start()/stop() are safe to repeat.
   - Ensures the sweeper works as a context manager.

3. Configuration
   - Ensures non-positive intervals are rejected.
"""

import logging
import threading
from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from shortener.dao.base import EntryBaseDAO
from shortener.sweeper import ExpirySweeper, SWEEP_SUCCESS
from shortener.utils.constants import EXPIRY_THRESHOLD


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def mock_dao():
    _dao = MagicMock(spec=EntryBaseDAO)
    _dao.sweep.return_value = 0
    return _dao


# -------------------------------
# 1. Single tick
# -------------------------------


def test_tick_sweeps_with_expiry_threshold(mock_dao):
    """Ensure tick() calls sweep() with the 24 hour threshold by default."""
    mock_dao.sweep.return_value = 3

    assert ExpirySweeper(mock_dao).tick() == 3
    mock_dao.sweep.assert_called_once_with(EXPIRY_THRESHOLD)


def test_tick_logs_removed_entries(mock_dao, caplog):
    """Ensure ticks removing entries are logged with the removed count."""
    mock_dao.sweep.return_value = 2

    with caplog.at_level(logging.INFO, logger='shortener.sweeper'):
        ExpirySweeper(mock_dao).tick()

    records = [r for r in caplog.records if r.name == 'shortener.sweeper']
    assert len(records) == 1
    assert records[0].getMessage() == 'Swept 2 expired short URL(s).'
    assert records[0].event == SWEEP_SUCCESS
    assert records[0].removed == 2


def test_tick_without_removals_is_silent(mock_dao, caplog):
    """Ensure zero-removal ticks don't log."""
    with caplog.at_level(logging.DEBUG, logger='shortener.sweeper'):
        assert ExpirySweeper(mock_dao).tick() == 0

    assert [r for r in caplog.records if r.name == 'shortener.sweeper'] == []


def test_tick_removes_expired_entries_from_store(dao, clock):
    """Ensure a tick against a real store drops expired entries only."""
    dao.insert('https://example.com/old')
    clock.advance(timedelta(hours=25))
    fresh = dao.insert('https://example.com/fresh')

    assert ExpirySweeper(dao).tick() == 1
    assert dao.lookup(fresh) == 'https://example.com/fresh'


# -------------------------------
# 2. Background loop
# -------------------------------


def test_loop_sweeps_periodically(mock_dao):
    """Ensure the background thread keeps sweeping at the configured interval."""
    swept_twice = threading.Event()

    def sweep(threshold):
        if mock_dao.sweep.call_count >= 2:
            swept_twice.set()
        return 0

    mock_dao.sweep.side_effect = sweep

    sweeper = ExpirySweeper(mock_dao, interval=timedelta(milliseconds=10)).start()
    try:
        assert swept_twice.wait(2)
        assert sweeper.running
    finally:
        sweeper.stop(timeout=2)

    assert not sweeper.running


def test_stop_interrupts_pending_wait(mock_dao):
    """Ensure stop() doesn't wait for the next hourly tick."""
    sweeper = ExpirySweeper(mock_dao).start()
    sweeper.stop(timeout=2)

    assert not sweeper.running
    mock_dao.sweep.assert_not_called()


def test_start_and_stop_are_idempotent(mock_dao):
    """Ensure repeated start()/stop() calls are harmless."""
    sweeper = ExpirySweeper(mock_dao)
    sweeper.stop()

    sweeper.start()
    thread = sweeper._thread
    sweeper.start()
    assert sweeper._thread is thread

    sweeper.stop(timeout=2)
    sweeper.stop(timeout=2)
    assert not sweeper.running


def test_sweeper_restarts_after_stop(mock_dao):
    sweeper = ExpirySweeper(mock_dao)
    sweeper.start()
    sweeper.stop(timeout=2)
    sweeper.start()
    try:
        assert sweeper.running
    finally:
        sweeper.stop(timeout=2)


def test_context_manager(mock_dao):
    """Ensure the sweeper runs inside a with-block and stops on exit."""
    with ExpirySweeper(mock_dao) as sweeper:
        assert sweeper.running
    assert not sweeper.running


# -------------------------------
# 3. Configuration
# -------------------------------


@pytest.mark.parametrize('interval', [timedelta(0), timedelta(seconds=-1)])
def test_invalid_interval(mock_dao, interval):
    """Ensure non-positive intervals raise ValueError."""
    with pytest.raises(ValueError, match='Sweep interval must be positive'):
        ExpirySweeper(mock_dao, interval=interval)
