"""Short code allocation for the in-memory store.

Classes:
    CodeAllocator:
        Issue short codes from a process-local, strictly increasing counter.

Example:
    >>> from shortener.dao.memory import CodeAllocator
    >>> allocator = CodeAllocator()
    >>> allocator.next_code()
    '1'
    >>> allocator.next_code()
    '2'
    >>> allocator.counter
    2
"""

import threading
from contextlib import AbstractContextManager


class CodeAllocator:
    """Issue short codes as base-10 strings of a counter starting at 1.

    The counter lives only as long as the allocator; a new allocator starts
    over at 1. Codes of removed entries are never handed out again by the
    same allocator.

    Attributes:
        counter (int):
            Last issued value (0 before the first call).

    NOTE:
        The entry store passes its own lock in, so the counter increment and
        the mapping update it belongs to are serialized together. Splitting
        them into separate locks breaks the uniqueness guarantee of insert().
    """

    def __init__(self, lock: AbstractContextManager | None = None):
        self._lock = lock if lock is not None else threading.RLock()
        self._counter = 0

    @property
    def counter(self) -> int:
        with self._lock:
            return self._counter

    def next_code(self) -> str:
        with self._lock:
            self._counter += 1
            return str(self._counter)
