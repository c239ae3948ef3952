import functools
from typing import Any, TypeVar
from collections.abc import Callable


__all__ = []


F = TypeVar('F', bound=Callable[..., Any])


def synchronized(method: F) -> F:
    """Run a store method while holding the store's lock

    Args:
        method (Callable[..., Any]):
            DAO method touching the entry mapping or the allocator.

    Returns:
        Callable[..., Any]:
            Wrapped method executing inside the store's critical section.

    Example:
        >>> @synchronized
        ... def size(self):
        ...     return len(self._entries)
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper
