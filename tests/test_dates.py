from datetime import date

import pytest

from face_attendance.utils.dates import format_date, weekday_abbreviation


def test_format_date_zero_padded():
    assert format_date(date(2025, 8, 5)) == '2025-08-05'


def test_format_date_unpadded():
    assert format_date(date(2025, 8, 5), zero_pad=False) == '2025-8-5'


def test_format_date_two_digit_parts_identical():
    assert format_date(date(2025, 12, 31), True) == format_date(date(2025, 12, 31), False)


@pytest.mark.parametrize('day, expected', [
    (date(2025, 8, 17), 'Sun'),
    (date(2025, 8, 18), 'Mon'),
    (date(2025, 8, 20), 'Wed'),
    (date(2025, 8, 23), 'Sat'),
])
def test_weekday_abbreviation(day, expected):
    assert weekday_abbreviation(day) == expected
