from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class EntryModel:
    """Represent a shortened URL held by the in-memory store.

    Attributes:
        target (str):
            The original long URL that the short code redirects to.
            Stored verbatim; never validated by the store.
        created_at (datetime):
            Moment the entry was inserted (timezone-aware, UTC).

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> created = datetime(2025, 10, 15, tzinfo=UTC)
        >>> entry = EntryModel(target='https://example.com/article/123', created_at=created)
        >>> entry.target
        'https://example.com/article/123'
        >>> entry.age(created + timedelta(hours=2))
        datetime.timedelta(seconds=7200)
        >>> entry.expired(created + timedelta(hours=24), threshold=timedelta(hours=24))
        False
    """

    target: str
    created_at: datetime

    def age(self, now: datetime) -> timedelta:
        return now - self.created_at

    def expired(self, now: datetime, threshold: timedelta) -> bool:
        """Return True if the entry is older than threshold at `now`.

        NOTE: an entry whose age is exactly `threshold` is still live.
              Lookups and sweeps both decide expiry here.
        """
        return self.age(now) > threshold
