"""Clock abstraction and timestamp formatting."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Abstract clock for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current moment as a timezone-aware datetime."""
        ...


class SystemClock(Clock):
    """Production implementation using the system clock."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as ISO-8601 UTC with millisecond precision.

    Naive datetimes are taken to be UTC.

    >>> format_timestamp(datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc))
    '2024-05-01T12:00:00.000Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
