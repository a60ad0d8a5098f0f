"""
Calendar-date formatting that never depends on the process's local timezone.
"""

from datetime import date, datetime, timezone
from typing import Union

DateLike = Union[datetime, date, str, int, float]


def to_utc_datetime(value: DateLike) -> datetime:
    """Coerce *value* into an aware UTC datetime.

    Naive datetimes and date-only strings are taken to already be UTC;
    numbers are epoch seconds.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    if isinstance(value, str):
        return to_utc_datetime(datetime.fromisoformat(value))
    raise TypeError(f"Unsupported date value: {value!r}")


def format_date_ymd(value: DateLike) -> str:
    """Format *value* as YYYY-MM-DD using UTC year, month and day."""
    moment = to_utc_datetime(value)
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-03-01T14:05:09.123Z."""
    utc = to_utc_datetime(moment)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
