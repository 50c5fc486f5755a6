"""
Centralized date/time utilities
All "today" lookups go through this module so they can be pinned in tests
"""

from datetime import date, datetime, timedelta
from typing import Optional
from todo_tracker.config.constants import DATE_FORMAT


def get_current_datetime() -> datetime:
    """
    Get current local datetime

    Returns:
        Current datetime object (local time, timezone-aware)
    """
    return datetime.now().astimezone()


def get_today() -> date:
    """
    Get current local date

    Returns:
        Today's date
    """
    return get_current_datetime().date()


def get_tomorrow(today: date) -> date:
    """Day after `today`"""
    return today + timedelta(days=1)


def format_date(value: date) -> str:
    """
    Format date as stored in the task file (YYYY-MM-DD)

    Args:
        value: Date to format

    Returns:
        Date string
    """
    return value.strftime(DATE_FORMAT)


def parse_due_date(value: Optional[str]) -> Optional[date]:
    """
    Parse a stored due date

    Only the strict YYYY-MM-DD form is accepted.

    Args:
        value: Date string (may be empty or None)

    Returns:
        Parsed date or None if missing or malformed
    """
    if not value:
        return None

    try:
        parsed = datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None

    # strptime also accepts unpadded fields such as 2024-1-5
    if format_date(parsed) != value:
        return None

    return parsed
