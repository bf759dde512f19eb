"""Charge calculation for a single telephone call.

This module ties the pipeline together:
- Parse both timestamps
- Validate fields and chronological order
- Compute the naive duration and the DST adjustment
- Round the adjusted duration up to whole minutes
- Price the billed minutes

Every function is pure. The transform flag is an explicit argument, so
calls can be priced concurrently without shared state.
"""

import logging
from typing import Optional

from callcharge.calculators.dst_calculator import (
    calculate_dst_adjustment,
    dst_window_for_year,
)
from callcharge.calculators.pricing_calculator import calculate_cost
from callcharge.exceptions import InvalidDateError
from callcharge.models.tariff import ChargeBreakdown, Tariff
from callcharge.models.timestamp import CallInterval
from callcharge.parsers.timestamp_parser import parse_timestamp
from callcharge.utils.calendar_utils import MILLIS_PER_MINUTE
from callcharge.utils.logging_utils import log_function_call
from callcharge.validators.timestamp_validator import ensure_valid_call_interval

logger = logging.getLogger(__name__)


def billed_minutes(total_ms: int) -> int:
    """Round a duration up to whole minutes.

    Exact multiples of a minute are not rounded up.

    Args:
        total_ms: Adjusted call duration in milliseconds (non-negative)

    Returns:
        Billed minutes

    Example:
        >>> billed_minutes(600000)
        10
        >>> billed_minutes(600001)
        11
        >>> billed_minutes(0)
        0
    """
    return -(-total_ms // MILLIS_PER_MINUTE)


def price_interval(
    interval: CallInterval, tariff: Optional[Tariff] = None
) -> ChargeBreakdown:
    """Price an already validated call interval.

    Args:
        interval: The call to price
        tariff: Rate table (default: DEFAULT_TARIFF)

    Returns:
        ChargeBreakdown with every intermediate value

    Raises:
        InvalidDateError: If the DST-adjusted duration is negative
    """
    start, end = interval.start, interval.end
    duration = interval.raw_duration_ms

    # DST boundaries always come from the start year
    window = dst_window_for_year(start.year)
    diff = calculate_dst_adjustment(start, end, window, interval.is_transform)
    total = duration + diff

    if total < 0:
        raise InvalidDateError(
            f"Invalid Date: call {start} -> {end} has a negative duration "
            f"({total} ms) after DST adjustment"
        )

    minutes = billed_minutes(total)
    amount = calculate_cost(minutes, tariff)

    logger.debug(
        "Priced call %s -> %s: duration=%dms adjustment=%dms minutes=%d amount=%.2f",
        start,
        end,
        duration,
        diff,
        minutes,
        amount,
    )

    return ChargeBreakdown(
        start=str(start),
        end=str(end),
        is_transform=interval.is_transform,
        raw_duration_ms=duration,
        dst_adjustment_ms=diff,
        total_duration_ms=total,
        billed_minutes=minutes,
        amount=amount,
    )


def calculate_charge_breakdown(
    start_text: str,
    end_text: str,
    is_transform: bool = False,
    tariff: Optional[Tariff] = None,
) -> ChargeBreakdown:
    """Parse, validate and price a call, keeping every intermediate value.

    Args:
        start_text: Start timestamp (``yyyy-MM-dd HH:mm:ss``)
        end_text: End timestamp (``yyyy-MM-dd HH:mm:ss``)
        is_transform: Whether the call spans the autumn transition; also
            allows the end to precede the start
        tariff: Rate table (default: DEFAULT_TARIFF)

    Returns:
        ChargeBreakdown for the call

    Raises:
        FormatError: If either text is malformed
        InvalidDateError: If either timestamp is invalid, or the call ends
            before it starts without the transform flag
    """
    start = parse_timestamp(start_text)
    end = parse_timestamp(end_text)

    ensure_valid_call_interval(start, end, is_transform)

    interval = CallInterval(start=start, end=end, is_transform=is_transform)
    return price_interval(interval, tariff)


@log_function_call
def charge(
    start_text: str,
    end_text: str,
    is_transform: bool = False,
    tariff: Optional[Tariff] = None,
) -> float:
    """Calculate the charge for a telephone call.

    Args:
        start_text: Start timestamp (``yyyy-MM-dd HH:mm:ss``)
        end_text: End timestamp (``yyyy-MM-dd HH:mm:ss``)
        is_transform: Whether the call spans the autumn transition
        tariff: Rate table (default: DEFAULT_TARIFF)

    Returns:
        Amount charged

    Raises:
        FormatError: If either text is malformed
        InvalidDateError: If the call is not a valid interval

    Example:
        >>> charge("2023-01-01 00:00:00", "2023-01-01 00:10:00")
        0.5
        >>> charge("2023-01-01 00:00:00", "2023-01-01 00:25:00")
        1.5
    """
    return calculate_charge_breakdown(start_text, end_text, is_transform, tariff).amount
