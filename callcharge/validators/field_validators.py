"""Field-level validators for timestamp components.

This module provides validators for individual numeric fields such as
years, months, days and clock components.
"""

from typing import Any, Dict, Optional

from callcharge.utils.calendar_utils import days_in_month
from callcharge.validators.validation_report import ValidationReport


class FieldValidators:
    """Collection of field-level validation methods.

    Every method records problems in the given report instead of raising,
    so several fields can be checked in one pass.
    """

    @staticmethod
    def validate_number_range(
        value: Optional[int],
        field_name: str,
        report: ValidationReport,
        min_val: Optional[int] = None,
        max_val: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Validate that a number is within a specified range.

        Args:
            value: The numeric value to validate
            field_name: Name of the field being validated
            report: ValidationReport to collect issues
            min_val: Minimum allowed value (inclusive)
            max_val: Maximum allowed value (inclusive)
            context: Optional context for the issue
        """
        if value is None:
            report.add_error(field_name, "Value is required", None, context)
            return

        if isinstance(value, bool) or not isinstance(value, int):
            report.add_error(
                field_name,
                f"Expected integer, got {type(value).__name__}",
                value,
                context,
            )
            return

        if min_val is not None and value < min_val:
            report.add_error(
                field_name,
                f"Value must be at least {min_val}",
                value,
                context,
            )

        if max_val is not None and value > max_val:
            report.add_error(
                field_name,
                f"Value must be at most {max_val}",
                value,
                context,
            )

    @staticmethod
    def validate_day_of_month(
        year: int,
        month: int,
        day: int,
        field_name: str,
        report: ValidationReport,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Validate that a day exists in the given month.

        Month length is only checked when the month itself is valid; an
        invalid month is reported by the month's own range check.

        Args:
            year: Calendar year
            month: Month number
            day: Day of month to validate
            field_name: Name of the field being validated
            report: ValidationReport to collect issues
            context: Optional context for the issue
        """
        if not 1 <= month <= 12:
            FieldValidators.validate_number_range(
                day, field_name, report, min_val=1, max_val=31, context=context
            )
            return

        last_day = days_in_month(year, month)
        if not 1 <= day <= last_day:
            report.add_error(
                field_name,
                f"Day must be between 1 and {last_day} for {year:04d}-{month:02d}",
                day,
                context,
            )
