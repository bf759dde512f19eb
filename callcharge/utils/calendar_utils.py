"""Calendar arithmetic utilities for the call charge system.

This module provides low-level calendar helpers over plain integers:
- Gregorian leap year and month length rules
- Day-of-week via a closed-form congruence
- Conversion of civil date/time fields to epoch milliseconds

All instants are expressed in one fixed reference zone without daylight
saving of its own, so subtracting two instants yields the elapsed
wall-clock milliseconds. DST is modelled separately by the DST calculator.
"""

import datetime as dt

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE

SUNDAY = 7

_EPOCH = dt.datetime(1970, 1, 1)
_LONG_MONTHS = frozenset({1, 3, 5, 7, 8, 10, 12})


def is_leap_year(year: int) -> bool:
    """Check whether a year is a Gregorian leap year.

    Example:
        >>> is_leap_year(2024)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2000)
        True
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month.

    Args:
        year: Calendar year
        month: Month number (1-12)

    Returns:
        28, 29, 30 or 31

    Example:
        >>> days_in_month(2023, 2)
        28
        >>> days_in_month(2024, 2)
        29
        >>> days_in_month(2023, 4)
        30
    """
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in _LONG_MONTHS:
        return 31
    return 30


def day_of_week(year: int, month: int, day: int) -> int:
    """Compute the ISO day of week (1 = Monday ... 7 = Sunday).

    Uses the Kim Larsson congruence. The formula treats March as the first
    month of the year, so it is only valid for months 3 to 12.

    Args:
        year: Calendar year
        month: Month number (3-12)
        day: Day of month

    Returns:
        Day of week index in 1..7

    Example:
        >>> day_of_week(2023, 4, 2)
        7
        >>> day_of_week(2023, 10, 31)
        2
    """
    w = (
        day
        + 2 * month
        + 3 * (month + 1) // 5
        + year
        + year // 4
        - year // 100
        + year // 400
    ) % 7
    return w + 1


def to_epoch_millis(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> int:
    """Convert civil date/time fields to milliseconds since the epoch.

    Raises:
        ValueError: If the fields do not form a real date and time
    """
    moment = dt.datetime(year, month, day, hour, minute, second)
    return (moment - _EPOCH) // dt.timedelta(milliseconds=1)
