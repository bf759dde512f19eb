"""Daylight saving time calculations.

This module implements the single DST rule used for pricing:
- Clocks go forward one hour at 02:00 on the first Sunday of April
- Clocks go back one hour at 02:00 on the last Sunday of October

A call spanning the skipped spring hour lasted one hour less than its
wall-clock difference; a call touching the repeated autumn hour (when the
caller says so) lasted one hour more.
"""

import logging

from callcharge.models.timestamp import DstWindow, Timestamp
from callcharge.utils.calendar_utils import (
    MILLIS_PER_HOUR,
    SUNDAY,
    day_of_week,
    days_in_month,
)

logger = logging.getLogger(__name__)

DST_HOUR = 2
SPRING_MONTH = 4
FALL_MONTH = 10


def nth_sunday(year: int, month: int, day: int, want_first: bool) -> Timestamp:
    """Find the Sunday nearest to a date within its month, at 02:00.

    Args:
        year: Calendar year
        month: Month number (3-12)
        day: Day to search from
        want_first: True for the first Sunday on or after ``day``,
            False for the last Sunday on or before ``day``

    Returns:
        Timestamp of that Sunday at 02:00:00

    Raises:
        ValueError: If the month is January or February, or the Sunday
            falls outside the month

    Example:
        >>> str(nth_sunday(2023, 4, 1, True))
        '2023-04-02 02:00:00'
        >>> str(nth_sunday(2023, 10, 31, False))
        '2023-10-29 02:00:00'
    """
    if not 3 <= month <= 12:
        raise ValueError(f"Month must be between 3 and 12, got {month}")

    weekday = day_of_week(year, month, day)
    if want_first:
        sunday = day + (SUNDAY - weekday)
    else:
        sunday = day - weekday % SUNDAY

    if not 1 <= sunday <= days_in_month(year, month):
        raise ValueError(
            f"No Sunday within {year}-{month:02d} "
            f"{'after' if want_first else 'before'} day {day}"
        )

    return Timestamp(year=year, month=month, day=sunday, hour=DST_HOUR)


def dst_window_for_year(year: int) -> DstWindow:
    """Compute the DST boundaries of a year.

    Example:
        >>> window = dst_window_for_year(2024)
        >>> str(window.spring_start), str(window.fall_start)
        ('2024-04-07 02:00:00', '2024-10-27 02:00:00')
    """
    return DstWindow(
        year=year,
        spring_start=nth_sunday(year, SPRING_MONTH, 1, True),
        fall_start=nth_sunday(year, FALL_MONTH, 31, False),
    )


def calculate_dst_adjustment(
    start: Timestamp,
    end: Timestamp,
    window: DstWindow,
    is_transform: bool = False,
) -> int:
    """Calculate the milliseconds to add to a call's naive duration.

    Rules:
    - The call covers the whole skipped spring hour
      (start <= 02:00 and end >= 03:00): -1 hour
    - Otherwise, with ``is_transform`` set, the call touches the repeated
      autumn hour [02:00, 02:59:59] (starts in it, ends in it, or spans
      it): +1 hour
    - Otherwise: 0

    Args:
        start: When the call started
        end: When the call ended
        window: DST boundaries of the start year
        is_transform: Whether the call spans the autumn transition

    Returns:
        Adjustment in milliseconds
    """
    start_time = start.instant
    end_time = end.instant

    spring_start = window.spring_start.instant
    if start_time <= spring_start and end_time >= window.spring_end:
        logger.debug("Call %s -> %s spans the spring transition", start, end)
        return -MILLIS_PER_HOUR

    if is_transform:
        fall_start = window.fall_start.instant
        fall_end = window.fall_end
        starts_inside = fall_start <= start_time <= fall_end
        ends_inside = fall_start <= end_time <= fall_end
        spans_window = start_time <= fall_start and end_time >= fall_end
        if starts_inside or ends_inside or spans_window:
            logger.debug("Call %s -> %s spans the autumn transition", start, end)
            return MILLIS_PER_HOUR

    return 0
