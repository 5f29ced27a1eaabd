"""Date parsing utilities."""

from datetime import date, datetime, time, timedelta
from dateutil import parser as date_parser


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports absolute dates ("2024-01-15", "January 15, 2024", ...) and the
    relative words "today", "yesterday" and "tomorrow".

    Args:
        date_str: Date string in various formats

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "hoy": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "mañana": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def parse_time(time_str: str) -> time:
    """Parse a wall-clock time such as "15:30" or "3:30 pm".

    Raises:
        ValueError: If time string cannot be parsed
    """
    time_str = time_str.strip()
    if not time_str:
        raise ValueError("Empty time string")
    try:
        dt = date_parser.parse(time_str, default=datetime(2000, 1, 1))
    except (ValueError, TypeError, OverflowError) as e:
        raise ValueError(f"Could not parse time '{time_str}': {e}")
    return dt.time().replace(second=0, microsecond=0)


def combine_date_time(date_str: str, time_str: str) -> datetime:
    """Build a local datetime from separate date and time inputs."""
    return datetime.combine(parse_date(date_str), parse_time(time_str))


def truncate_to_millis(moment: datetime) -> datetime:
    """Drop sub-millisecond precision, the resolution of period boundaries."""
    return moment.replace(microsecond=moment.microsecond // 1000 * 1000)
