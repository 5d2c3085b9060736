"""Date and time utility functions."""
from datetime import date, datetime
from typing import Optional


def now_local() -> datetime:
    """Current time as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


def now_iso() -> str:
    """Current local time in ISO 8601 format with UTC offset."""
    return now_local().isoformat()


def start_of_today(now: Optional[datetime] = None) -> datetime:
    """
    Midnight of the current local day.

    Args:
        now: Reference time (defaults to the current local time)

    Returns:
        Aware datetime at 00:00:00 of the reference day
    """
    now = now or now_local()
    if now.tzinfo is None:
        now = now.astimezone()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def parse_timestamp(timestamp: str) -> datetime:
    """
    Parse an ISO 8601 timestamp into an aware datetime.

    Naive timestamps are interpreted as local time. A trailing "Z" is
    accepted as UTC.

    Raises:
        ValueError: If the timestamp format is invalid
    """
    try:
        value = datetime.fromisoformat(timestamp.replace('Z', '+00:00'))
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Invalid timestamp format: {timestamp}") from e

    if value.tzinfo is None:
        value = value.astimezone()
    return value


def format_display_datetime(timestamp: str) -> str:
    """
    Format a stored timestamp for display, e.g. "19 October 2026, 14:05".

    Unparseable values are returned unchanged.
    """
    try:
        value = parse_timestamp(timestamp)
    except ValueError:
        return timestamp
    return value.astimezone().strftime("%d %B %Y, %H:%M")


def today_str(today: Optional[date] = None) -> str:
    """Local date as YYYY-MM-DD."""
    return (today or now_local().date()).strftime("%Y-%m-%d")
