"""Data Access Object (DAO) implementation for managing shortened URLs in memory

This module provides an in-process implementation of EntryBaseDAO. Entries live
in a dictionary owned by the DAO instance and expire 24 hours after insertion.

Responsibilities:
    - Issue short codes and store new entries;
    - Resolve short codes, deleting entries found expired (lazy expiry);
    - Remove all expired entries on request (used by the background sweeper);
    - Serialize every operation through a single lock.

Classes:
    EntryMemoryDAO:
        DAO for storing and retrieving short URL entries in process memory.

Example:
    >>> from shortener.dao.memory import EntryMemoryDAO

    >>> dao = EntryMemoryDAO()
    >>> dao.insert('https://example.com/page')
    '1'
    >>> dao.lookup('1')
    'https://example.com/page'
    >>> dao.lookup('404')
    Traceback (most recent call last):
        ...
    shortener.dao.exceptions.ShortURLNotFoundError: Short URL with code '404' not found.
"""

from datetime import timedelta

from beartype import beartype

from shortener.models import EntryModel
from shortener.dao.base import EntryBaseDAO
from shortener.dao.memory.mixins import MemoryStoreMixin
from shortener.dao.memory.helpers import synchronized
from shortener.dao.exceptions import ShortURLNotFoundError
from shortener.utils.constants import EXPIRY_THRESHOLD


class EntryMemoryDAO(MemoryStoreMixin, EntryBaseDAO):
    """In-memory Data Access Object (DAO) for managing short URL entries

    Attributes (see MemoryStoreMixin):
        allocator (CodeAllocator):
            Issues short codes; shares the DAO's lock.
        clock (Callable[[], datetime]):
            Time source for stamping and aging entries.

    Methods:
        insert(target: str, **kwargs) -> str:
            Store target under a freshly issued short code and return the code.

        lookup(shortcode: str, **kwargs) -> str:
            Return the original URL for a live entry.
            Deletes the entry and raises ShortURLNotFoundError if it has expired.
            Raises ShortURLNotFoundError if the shortcode doesn't exist.

        sweep(threshold: timedelta = EXPIRY_THRESHOLD, **kwargs) -> int:
            Delete all entries older than threshold. Returns the removed count.

    Example:
        >>> dao = EntryMemoryDAO(clock=lambda: datetime(2025, 10, 15, tzinfo=UTC))
        >>> dao.insert('https://example.com')
        '1'
        >>> dao.sweep(timedelta(hours=24))
        0
    """

    @synchronized
    @beartype
    def insert(self, target: str, **kwargs) -> str:
        """Store target under a newly issued short code

        The target is stored verbatim. Validation (e.g. rejecting blank URLs)
        is the caller's responsibility.

        Args:
            target (str):
                The original URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            str: the new entry's short code.

        Example:
            >>> dao.insert('https://example.com')
            '1'
        """
        shortcode = self.allocator.next_code()
        self._entries[shortcode] = EntryModel(target=target, created_at=self.clock())
        return shortcode

    @synchronized
    @beartype
    def lookup(self, shortcode: str, **kwargs) -> str:
        """Resolve a short code to its original URL

        An entry found past the expiry threshold is deleted on the spot and
        reported exactly like a code that was never issued.

        Args:
            shortcode (str):
                The short code issued by insert().
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            str: the original URL.

        Raises:
            ShortURLNotFoundError:
                If the short code is unknown or its entry has expired.

        Example:
            >>> dao.lookup('1')
            'https://example.com'
        """
        entry = self._entries.get(shortcode)

        if entry is not None and entry.expired(self.clock(), EXPIRY_THRESHOLD):
            del self._entries[shortcode]
            entry = None

        if entry is None:
            raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

        return entry.target

    @synchronized
    @beartype
    def sweep(self, threshold: timedelta = EXPIRY_THRESHOLD, **kwargs) -> int:
        """Delete every entry older than threshold

        The whole scan is judged against a single clock reading.

        Args:
            threshold (timedelta):
                Maximum entry age. Defaults to EXPIRY_THRESHOLD.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            int: number of removed entries (0 if nothing was expired).

        Example:
            >>> dao.sweep()
            0
        """
        now = self.clock()
        expired = [shortcode for shortcode, entry in self._entries.items() if entry.expired(now, threshold)]
        for shortcode in expired:
            del self._entries[shortcode]
        return len(expired)
