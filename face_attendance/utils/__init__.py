"""
Utility modules package.
"""

from .dates import format_date, weekday_abbreviation, WEEKDAY_ABBREVIATIONS

__all__ = [
    'format_date',
    'weekday_abbreviation',
    'WEEKDAY_ABBREVIATIONS',
]
