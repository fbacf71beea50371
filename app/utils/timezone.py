"""Timezone utilities: records are stored as naive UTC and returned as aware UTC"""
from datetime import datetime
import pytz


def utcnow() -> datetime:
    """Current time as a naive UTC datetime, the form stored in the database."""
    return datetime.now(pytz.utc).replace(tzinfo=None)


def to_utc(dt: datetime | None) -> datetime | None:
    """
    Attach the UTC timezone to a stored datetime for API display.

    Args:
        dt: Naive datetime assumed to be in UTC, or None

    Returns:
        Timezone-aware UTC datetime, or None if input is None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)
