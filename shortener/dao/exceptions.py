"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a short code is unknown or its entry has expired.

Example:
    >>> from shortener.dao.exceptions import ShortURLNotFoundError
    >>> raise ShortURLNotFoundError("Short URL with code '42' not found.")
    Traceback (most recent call last):
        ...
    shortener.dao.exceptions.ShortURLNotFoundError: Short URL with code '42' not found.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortURLNotFoundError(DAOError):
    """Exception raised when a short code doesn't map to a live entry.

    Unknown and expired codes raise the same error with the same message.
    """

    pass
