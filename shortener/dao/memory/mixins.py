"""In-memory store mixin providing shared state initialization.

Responsibilities:
    - Own the entry mapping
    - Own the lock guarding the mapping and the code allocator
    - Hold the clock used to stamp and age entries

Classes:
    - MemoryStoreMixin: Base mixin to inject the mapping, lock, allocator & clock.

Example:
    Typical usage with a DAO implementation:

        >>> class EntryMemoryDAO(MemoryStoreMixin, EntryBaseDAO):
        ...     pass
        ...
        >>> dao = EntryMemoryDAO()
        >>> len(dao)
        0
"""

import threading
from datetime import datetime
from collections.abc import Callable

from shortener.models import EntryModel
from shortener.dao.memory.allocator import CodeAllocator
from shortener.utils.helpers import utcnow


class MemoryStoreMixin:
    """Mixin state setup for in-memory DAOs.

    Attributes:
        allocator (CodeAllocator):
            Short code allocator sharing the store's lock.

        clock (Callable[[], datetime]):
            Returns the current time. Defaults to timezone-aware UTC now.

    NOTE:
        `_entries` and `allocator` form one unit of shared state. Every read or
        write of either happens under `_lock`; there is no per-key locking.
        The lock is re-entrant so a locked method may call the allocator.
    """

    def __init__(self, clock: Callable[[], datetime] | None = None):
        """Initialize the in-memory store state

        Args:
            clock (Callable[[], datetime] | None):
                Time source used for stamping and expiry checks.
                If None, `utcnow` is used.
        """
        self._lock = threading.RLock()
        self._entries: dict[str, EntryModel] = {}

        self.allocator = CodeAllocator(lock=self._lock)
        self.clock = clock if clock is not None else utcnow

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
