"""Validation of parsed timestamps and call intervals.

Every range check runs independently, so a report lists all problems of
a timestamp at once instead of stopping at the first one.
"""

import logging
from typing import Optional

from callcharge.exceptions import InvalidDateError
from callcharge.models.timestamp import Timestamp
from callcharge.validators.field_validators import FieldValidators
from callcharge.validators.validation_report import ValidationReport

logger = logging.getLogger(__name__)


def validate_timestamp(
    timestamp: Timestamp,
    field_name: str,
    report: ValidationReport,
) -> None:
    """Validate every field of a timestamp.

    Checks:
    - year > 0
    - 1 <= month <= 12
    - 1 <= day <= days in that month
    - 0 <= hour <= 23
    - 0 <= minute <= 59
    - 0 <= second <= 59

    Args:
        timestamp: The timestamp to validate
        field_name: Prefix for issue field names (e.g. "start")
        report: ValidationReport to collect issues
    """
    context = {"timestamp": str(timestamp)}

    FieldValidators.validate_number_range(
        timestamp.year, f"{field_name}.year", report, min_val=1, context=context
    )
    FieldValidators.validate_number_range(
        timestamp.month,
        f"{field_name}.month",
        report,
        min_val=1,
        max_val=12,
        context=context,
    )
    FieldValidators.validate_day_of_month(
        timestamp.year,
        timestamp.month,
        timestamp.day,
        f"{field_name}.day",
        report,
        context=context,
    )
    FieldValidators.validate_number_range(
        timestamp.hour,
        f"{field_name}.hour",
        report,
        min_val=0,
        max_val=23,
        context=context,
    )
    FieldValidators.validate_number_range(
        timestamp.minute,
        f"{field_name}.minute",
        report,
        min_val=0,
        max_val=59,
        context=context,
    )
    FieldValidators.validate_number_range(
        timestamp.second,
        f"{field_name}.second",
        report,
        min_val=0,
        max_val=59,
        context=context,
    )


def is_valid_timestamp(timestamp: Timestamp) -> bool:
    """Check whether a timestamp denotes a real date and clock time.

    Example:
        >>> is_valid_timestamp(Timestamp(year=2024, month=2, day=29))
        True
        >>> is_valid_timestamp(Timestamp(year=2023, month=2, day=29))
        False
    """
    report = ValidationReport()
    validate_timestamp(timestamp, "timestamp", report)
    return report.is_valid()


def validate_call_interval(
    start: Timestamp,
    end: Timestamp,
    is_transform: bool = False,
) -> ValidationReport:
    """Validate both ends of a call and their order.

    Without the transform flag the call must not end before it starts.
    A call crossing into another year is accepted with a warning, since DST
    boundaries are only computed for the start year.

    Args:
        start: When the call started
        end: When the call ended
        is_transform: Whether the call spans the autumn transition

    Returns:
        ValidationReport with any issues found
    """
    report = ValidationReport()
    validate_timestamp(start, "start", report)
    validate_timestamp(end, "end", report)

    # Instants are only defined for valid timestamps
    if not report.is_valid():
        return report

    if not is_transform and start.instant > end.instant:
        report.add_error(
            "end",
            "Call ends before it starts",
            str(end),
            {"start": str(start)},
        )

    if start.year != end.year:
        report.add_warning(
            "end",
            f"Call crosses into another year; DST rules of {start.year} applied",
            str(end),
            {"start": str(start)},
        )

    return report


def ensure_valid_call_interval(
    start: Timestamp,
    end: Timestamp,
    is_transform: bool = False,
    report: Optional[ValidationReport] = None,
) -> ValidationReport:
    """Validate a call interval, raising on any error.

    Args:
        start: When the call started
        end: When the call ended
        is_transform: Whether the call spans the autumn transition
        report: Optional report that receives the issues found

    Returns:
        The ValidationReport (warnings only)

    Raises:
        InvalidDateError: If the report contains errors
    """
    interval_report = validate_call_interval(start, end, is_transform)
    if report is not None:
        report.merge(interval_report)

    if not interval_report.is_valid():
        first_error = interval_report.get_errors()[0]
        logger.debug(
            "Rejected call %s -> %s: %s", start, end, interval_report.summary()
        )
        raise InvalidDateError(f"Invalid Date: {first_error}", interval_report)

    for warning in interval_report.get_warnings():
        logger.debug(str(warning))

    return interval_report
