"""Unit tests for CodeAllocator.

Test coverage includes:

1. Sequence
   - Ensures codes start at '1' and increase by one.
   - Ensures large counters render without wraparound.

2. Concurrency
   - Ensures concurrent callers never receive the same code.

3. Lock sharing
   - Ensures the allocator uses the lock it was given.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

from shortener.dao.memory import CodeAllocator


# -------------------------------
# 1. Sequence
# -------------------------------


def test_next_code_starts_at_one():
    """Ensure the first code is '1' and the counter starts at 0."""
    allocator = CodeAllocator()
    assert allocator.counter == 0
    assert allocator.next_code() == '1'
    assert allocator.counter == 1


def test_next_code_is_strictly_increasing():
    """Ensure every code is the previous one plus one."""
    allocator = CodeAllocator()
    codes = [allocator.next_code() for _ in range(100)]
    assert codes == [str(i) for i in range(1, 101)]


def test_next_code_handles_large_counters():
    """Ensure counters beyond 64 bits keep counting."""
    allocator = CodeAllocator()
    allocator._counter = 2**64
    assert allocator.next_code() == str(2**64 + 1)


def test_independent_allocators_do_not_share_state():
    """Ensure each allocator numbers its own codes."""
    first, second = CodeAllocator(), CodeAllocator()
    first.next_code()
    first.next_code()
    assert second.next_code() == '1'


# -------------------------------
# 2. Concurrency
# -------------------------------


def test_next_code_is_unique_across_threads():
    """Ensure concurrent callers receive pairwise distinct, contiguous codes."""
    allocator = CodeAllocator()
    with ThreadPoolExecutor(max_workers=16) as pool:
        codes = list(pool.map(lambda _: allocator.next_code(), range(2000)))

    assert len(set(codes)) == 2000
    assert sorted(int(code) for code in codes) == list(range(1, 2001))


# -------------------------------
# 3. Lock sharing
# -------------------------------


def test_next_code_acquires_given_lock():
    """Ensure the allocator serializes through the lock passed in."""

    class RecordingLock:
        def __init__(self):
            self._lock = threading.RLock()
            self.acquired = 0

        def __enter__(self):
            self.acquired += 1
            return self._lock.__enter__()

        def __exit__(self, *exc_info):
            return self._lock.__exit__(*exc_info)

    lock = RecordingLock()
    allocator = CodeAllocator(lock=lock)
    allocator.next_code()

    assert lock.acquired == 1
