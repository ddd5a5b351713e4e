"""
Calendar helpers for the contribution grid.

Weeks run Sunday to Saturday, matching the GitHub contribution graph.
Weekday indexes used here are Sunday-based: 0 = Sunday ... 6 = Saturday.
"""
#region Imports
from datetime import date, timedelta
from typing import Union
#endregion


#region Constants
DATE_FORMAT = "%Y-%m-%d"

# Locale-independent, strftime("%b") follows LC_TIME
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
#endregion


#region Functions


def parse_date(value: Union[str, date]) -> date:
    """
    Parse an ISO calendar date.

    Args:
        value: Date string in YYYY-MM-DD format, or a date

    Returns:
        The parsed date

    Raises:
        ValueError: If value is not a YYYY-MM-DD string or a date
    """
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a YYYY-MM-DD string, got {type(value).__name__}")
    # fromisoformat also accepts week dates and basic formats on newer Pythons
    if len(value) != 10 or value[4] != "-" or value[7] != "-":
        raise ValueError(f"Invalid date: {value!r}")
    return date.fromisoformat(value)


def format_date(day: date) -> str:
    """Format a date as YYYY-MM-DD."""
    return day.strftime(DATE_FORMAT)


def sunday_weekday(day: date) -> int:
    """Get the Sunday-based weekday index (0 = Sunday) of a date."""
    return (day.weekday() + 1) % 7


def week_start(day: date) -> date:
    """
    Get the Sunday on or before a date.

    Args:
        day: Any date

    Returns:
        First day of the Sunday-to-Saturday week containing day
    """
    return day - timedelta(days=sunday_weekday(day))


def shift_to_weekday(day: date, weekday: int) -> date:
    """
    Move a date to another weekday of the same Sunday-started week.

    Args:
        day: Any date
        weekday: Target weekday index, 0 = Sunday ... 6 = Saturday

    Returns:
        The date in day's week that falls on weekday

    Raises:
        ValueError: If weekday is outside 0..6
    """
    if not 0 <= weekday <= 6:
        raise ValueError(f"Weekday index must be in 0..6, got {weekday}")
    return week_start(day) + timedelta(days=weekday)


def month_abbr(day: date) -> str:
    """Get the three-letter English month abbreviation of a date."""
    return MONTH_ABBREVIATIONS[day.month - 1]


#endregion
