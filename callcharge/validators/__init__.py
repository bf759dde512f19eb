"""Validation layer for timestamps and call intervals."""

from callcharge.validators.field_validators import FieldValidators
from callcharge.validators.timestamp_validator import (
    ensure_valid_call_interval,
    is_valid_timestamp,
    validate_call_interval,
    validate_timestamp,
)
from callcharge.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)

__all__ = [
    "FieldValidators",
    "ValidationIssue",
    "ValidationReport",
    "ValidationSeverity",
    "ensure_valid_call_interval",
    "is_valid_timestamp",
    "validate_call_interval",
    "validate_timestamp",
]
