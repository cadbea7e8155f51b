"""Calendar helpers for ledger dates.

Ledger dates are plain calendar days with no timezone. They are validated from
``YYYY-MM-DD`` text and ordered by their day serial.
"""

from datetime import date

from folio.core.exceptions import InvalidDateError

EPOCH = date(1970, 1, 1)

_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap(year: int) -> bool:
    """Return True if year is a Gregorian leap year."""
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month."""
    if month == 2 and is_leap(year):
        return 29
    return _MONTH_DAYS[month - 1]


def validate(value: str) -> date:
    """
    Parse a strict ``YYYY-MM-DD`` string into a date.

    Raises InvalidDateError for anything else, including impossible days
    such as 2021-02-29 or a month of 13.
    """
    if not isinstance(value, str) or len(value) != 10 or value[4] != "-" or value[7] != "-":
        raise InvalidDateError(str(value))

    year_s, month_s, day_s = value[:4], value[5:7], value[8:]
    if not (year_s.isdigit() and month_s.isdigit() and day_s.isdigit()):
        raise InvalidDateError(value)

    year, month, day = int(year_s), int(month_s), int(day_s)
    if not 1 <= month <= 12:
        raise InvalidDateError(value)
    if not 1 <= day <= days_in_month(year, month):
        raise InvalidDateError(value)
    # datetime.date has no year 0
    if year < 1:
        raise InvalidDateError(value)

    return date(year, month, day)


def to_serial(value: date) -> int:
    """Return days elapsed since 1970-01-01 (negative for earlier days)."""
    return (value - EPOCH).days


def format_date(value: date) -> str:
    """Format a date as zero-padded YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
