"""Datetime utilities for persistence layer."""

from datetime import datetime, timezone


def normalize_to_utc(dt: datetime) -> datetime:
    """Ensure datetime is UTC and timezone-aware.

    Persisted timestamps may lack timezone info. This function:
    - Adds UTC timezone to naive datetimes (treating them as UTC).
    - Converts timezone-aware datetimes to UTC.

    Args:
        dt: datetime to process

    Returns:
        timezone-aware datetime in UTC
    """
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_iso(dt: datetime) -> str:
    """Serialize a datetime as an ISO-8601 string in UTC."""
    return normalize_to_utc(dt).isoformat()


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 string into a UTC-aware datetime.

    Raises:
        TypeError: value is not a string
        ValueError: value is not a valid ISO-8601 timestamp
    """
    if not isinstance(value, str):
        raise TypeError(f"Expected ISO-8601 string, got {type(value).__name__}")
    return normalize_to_utc(datetime.fromisoformat(value))
