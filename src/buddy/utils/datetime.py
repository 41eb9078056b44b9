"""Date utilities for task construction and rendering.

Every date Buddy reads from the user or from the data file goes through the
helpers in this module, so the accepted format lives in exactly one place.
"""

from datetime import date, datetime
from typing import Optional


DATE_FORMAT = "%Y-%m-%d"


def parse_task_date(date_str: str, date_format: str = DATE_FORMAT) -> Optional[date]:
    """Parse a date string against the task date format.

    Args:
        date_str: Date text such as ``2024-12-01``
        date_format: Format string for parsing (default: YYYY-MM-DD)

    Returns:
        The parsed date, or None if the text does not match the format
    """
    if not date_str:
        return None

    try:
        return datetime.strptime(date_str, date_format).date()
    except ValueError:
        return None


def format_task_date(value: date, date_format: str = DATE_FORMAT) -> str:
    """Format a date for display and persistence.

    Args:
        value: Date to format

    Returns:
        The date rendered with the task date format
    """
    return value.strftime(date_format)
