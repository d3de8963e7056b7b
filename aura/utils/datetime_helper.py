"""Date/time formatting helpers"""
from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


def utc_timestamp() -> str:
    """
    Current UTC time in ISO 8601 format, used on every API response.

    Returns:
        str: e.g. "2025-10-14T01:30:00.123456+00:00"
    """
    return utc_now().isoformat()


def format_clock(total_seconds: int) -> str:
    """
    Format a number of seconds as a zero-padded countdown clock.

    Args:
        total_seconds: Seconds to format (negative values are clamped to 0)

    Returns:
        str: "MM:SS", e.g. 2400 -> "40:00"
    """
    total_seconds = max(0, int(total_seconds))
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes:02d}:{seconds:02d}"


def format_wall_clock(dt: datetime) -> str:
    """Format a datetime as a local-style time of day, e.g. "02:05:09 PM" """
    return dt.strftime("%I:%M:%S %p")
