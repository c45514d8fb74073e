"""Date coercion helpers.

All dates handled by the metadata engine are timezone-aware. Date-only
values resolve to midnight UTC and naive datetimes are taken as UTC.
"""

from datetime import date, datetime, timezone
from typing import Any


def utc_now() -> datetime:
    """Get the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def coerce_datetime(value: Any) -> datetime | None:
    """Coerce a frontmatter or filename value into an aware datetime.

    Args:
        value: A datetime, date or ISO-8601 string.

    Returns:
        Aware datetime, or None if the value cannot be interpreted as a date.

    Example:
        >>> coerce_datetime("2024-01-15")
        datetime.datetime(2024, 1, 15, 0, 0, tzinfo=datetime.timezone.utc)
    """
    if isinstance(value, datetime):
        return _ensure_aware(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    # fromisoformat() only accepts a trailing "Z" from Python 3.11
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    return _ensure_aware(parsed)


def to_iso8601(value: datetime | date) -> str:
    """Format a date as an ISO-8601 UTC string with millisecond precision.

    Args:
        value: Datetime or date to format.

    Returns:
        String like ``2025-01-15T12:00:00.000Z``.
    """
    moment = coerce_datetime(value)
    if moment is None:
        raise TypeError(f"Cannot format {type(value).__name__} as a date")
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def _ensure_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value
