"""Timezone-aware datetime helpers."""

from datetime import datetime, timezone
from email.utils import format_datetime


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_rfc822(value: datetime) -> str:
    """Format an aware datetime as an RFC 822 date in GMT.

    Naive values are taken to be UTC.

    Example:
        >>> format_rfc822(datetime(2020, 7, 18, 14, 30, tzinfo=timezone.utc))
        'Sat, 18 Jul 2020 14:30:00 GMT'
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return format_datetime(value.astimezone(timezone.utc), usegmt=True)
