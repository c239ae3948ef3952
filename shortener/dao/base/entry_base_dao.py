"""Abstract base class for short URL entry data access objects (DAOs).

This class establishes the contract every short URL store honors, regardless
of where the entries live.

Responsibilities:
    - Issue short codes for new entries.
    - Resolve short codes back to their original URLs, hiding expired entries.
    - Remove expired entries in bulk on request.

Example:
    Typical usage with the in-memory implementation:

        >>> from shortener.dao.memory import EntryMemoryDAO

        >>> dao = EntryMemoryDAO()
        >>> shortcode = dao.insert('https://example.com/blog/article-123')
        >>> shortcode
        '1'

        >>> dao.lookup(shortcode)
        'https://example.com/blog/article-123'

        >>> dao.sweep()
        0
"""

from abc import ABC, abstractmethod
from datetime import timedelta

from shortener.utils.constants import EXPIRY_THRESHOLD


class EntryBaseDAO(ABC):
    """Interface for short URL entry data access objects (DAOs).

    Methods:
        insert(target: str, **kwargs) -> str:
            Store a new entry for target and return its freshly issued short code.

        lookup(shortcode: str, **kwargs) -> str:
            Return the original URL of a live entry.
            Raises ShortURLNotFoundError if the code is unknown or expired.

        sweep(threshold: timedelta, **kwargs) -> int:
            Remove every entry older than threshold and return how many were removed.

    NOTE:
        - Entries expire on their own; there is no interface to update or
          manually delete a single entry.
    """

    @abstractmethod
    def insert(self, target: str, **kwargs) -> str:
        """Store target under a newly issued short code.

        Args:
            target (str):
                The original URL. Stored verbatim.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str: the short code of the new entry.
        """
        pass

    @abstractmethod
    def lookup(self, shortcode: str, **kwargs) -> str:
        """Resolve a short code to its original URL.

        Args:
            shortcode (str):
                The short code issued by insert().

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            str: the original URL.

        Raises:
            ShortURLNotFoundError:
                If no live entry exists for shortcode.
        """
        pass

    @abstractmethod
    def sweep(self, threshold: timedelta = EXPIRY_THRESHOLD, **kwargs) -> int:
        """Remove every entry older than threshold.

        Args:
            threshold (timedelta):
                Maximum entry age. Defaults to EXPIRY_THRESHOLD (24 hours).

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            int: number of removed entries.
        """
        pass
