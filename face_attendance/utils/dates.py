"""
Date formatting helpers.

Ledger dates and weekday names are produced here so they never depend on the
process locale.
"""

from datetime import date

WEEKDAY_ABBREVIATIONS = ('Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun')


def format_date(day: date, zero_pad: bool = True) -> str:
    """
    Format a date for the attendance ledger.

    Args:
        day: Date to format
        zero_pad: '2025-08-05' when True, '2025-8-5' otherwise

    Returns:
        Formatted date string
    """
    if zero_pad:
        return f'{day.year:04d}-{day.month:02d}-{day.day:02d}'
    return f'{day.year}-{day.month}-{day.day}'


def weekday_abbreviation(day: date) -> str:
    """Return the English three-letter weekday name (Mon..Sun)."""
    return WEEKDAY_ABBREVIATIONS[day.weekday()]
