"""Background removal of expired short URLs.

Lookups already hide and delete expired entries, but entries that are never
looked up again would otherwise stay in memory forever. The sweeper bounds
memory by periodically asking the store to drop everything past the expiry
threshold.

Classes:
    ExpirySweeper:
        Cancellable periodic task calling `EntryBaseDAO.sweep()`.

Example:
    >>> from shortener.dao.memory import EntryMemoryDAO
    >>> from shortener.sweeper import ExpirySweeper

    >>> dao = EntryMemoryDAO()
    >>> with ExpirySweeper(dao) as sweeper:
    ...     sweeper.running
    True
    >>> sweeper.running
    False
"""

import logging
import threading
from datetime import timedelta

from shortener.dao.base import EntryBaseDAO
from shortener.utils.constants import EXPIRY_THRESHOLD, SWEEP_INTERVAL


logger = logging.getLogger(__name__)

SWEEP_SUCCESS = 'SWEEP_SUCCESS'


class ExpirySweeper:
    """Sweep expired entries from a store at a fixed interval.

    The loop waits on a stop event rather than sleeping, so stop() interrupts
    a pending wait immediately. The store's lock is only taken for the sweep
    itself, never while waiting.

    Attributes:
        dao (EntryBaseDAO):
            Store to sweep.
        interval (timedelta):
            Time between two sweeps. Defaults to SWEEP_INTERVAL (1 hour).
        threshold (timedelta):
            Maximum entry age. Defaults to EXPIRY_THRESHOLD (24 hours).
    """

    def __init__(
        self,
        dao: EntryBaseDAO,
        interval: timedelta = SWEEP_INTERVAL,
        threshold: timedelta = EXPIRY_THRESHOLD,
    ):
        if interval <= timedelta(0):
            raise ValueError(f'Sweep interval must be positive (given value: {interval}).')

        self.dao = dao
        self.interval = interval
        self.threshold = threshold

        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def tick(self) -> int:
        """Run a single sweep

        Returns:
            int: number of entries removed by this sweep.
        """
        removed = self.dao.sweep(self.threshold)
        if removed > 0:
            logger.info(
                'Swept %s expired short URL(s).',
                removed,
                extra={'event': SWEEP_SUCCESS, 'removed': removed},
            )
        return removed

    def start(self) -> 'ExpirySweeper':
        """Start sweeping on a daemon thread. No-op if already running.

        Returns:
            ExpirySweeper: self (for method chaining)
        """
        if self.running:
            return self

        self._stopped.clear()
        self._thread = threading.Thread(target=self._run, name='expiry-sweeper', daemon=True)
        self._thread.start()
        logger.debug('Expiry sweeper started.', extra={'interval': self.interval.total_seconds()})
        return self

    def stop(self, timeout: float | None = None) -> None:
        """Signal the loop to exit and wait for the thread to finish.

        Args:
            timeout (float | None):
                Seconds to wait for the thread. None waits indefinitely.
        """
        self._stopped.set()
        if self._thread is None:
            return

        self._thread.join(timeout)
        if not self._thread.is_alive():
            self._thread = None
            logger.debug('Expiry sweeper stopped.')

    def _run(self) -> None:
        while not self._stopped.wait(self.interval.total_seconds()):
            self.tick()

    def __enter__(self) -> 'ExpirySweeper':
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()
