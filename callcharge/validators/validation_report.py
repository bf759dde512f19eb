"""Report of the problems found while validating a call."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Optional


class ValidationSeverity(IntEnum):
    """Severity levels for validation issues."""

    WARNING = 2
    ERROR = 3


@dataclass(frozen=True)
class ValidationIssue:
    """One problem with a timestamp field or a call interval.

    Attributes:
        severity: ERROR rejects the call, WARNING only annotates it
        field: Dotted field name, e.g. ``start.month``
        message: Human-readable description
        value: The offending value
        context: Related values, e.g. the whole timestamp text
    """

    severity: ValidationSeverity
    field: str
    message: str
    value: Any
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        text = f"[{self.severity.name}] {self.field}: {self.message}"
        if self.context:
            details = ", ".join(f"{k}={v}" for k, v in self.context.items())
            text = f"{text} ({details})"
        return text


class ValidationReport:
    """Issues collected while validating a call.

    Checks append to the report instead of raising, so one pass reports
    every bad field of both timestamps.

    Example:
        >>> report = ValidationReport()
        >>> report.add_error("start.month", "Value must be at most 12", 13)
        >>> report.is_valid()
        False
        >>> report.summary()
        '1 error(s)'
    """

    def __init__(self) -> None:
        self.issues: List[ValidationIssue] = []

    def _add(
        self,
        severity: ValidationSeverity,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]],
    ) -> None:
        self.issues.append(ValidationIssue(severity, field, message, value, context))

    def _select(self, severity: ValidationSeverity) -> List[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]

    def add_error(
        self,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Record a problem that makes the call invalid."""
        self._add(ValidationSeverity.ERROR, field, message, value, context)

    def add_warning(
        self,
        field: str,
        message: str,
        value: Any,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Record a remark that does not reject the call."""
        self._add(ValidationSeverity.WARNING, field, message, value, context)

    def get_errors(self) -> List[ValidationIssue]:
        return self._select(ValidationSeverity.ERROR)

    def get_warnings(self) -> List[ValidationIssue]:
        return self._select(ValidationSeverity.WARNING)

    @property
    def error_count(self) -> int:
        return len(self.get_errors())

    @property
    def warning_count(self) -> int:
        return len(self.get_warnings())

    def is_valid(self) -> bool:
        """Whether no errors were recorded. Warnings do not count."""
        return self.error_count == 0

    def merge(self, other: "ValidationReport") -> None:
        """Append the issues of another report."""
        self.issues.extend(other.issues)

    def summary(self) -> str:
        """Count issues per severity, e.g. ``"2 error(s), 1 warning(s)"``."""
        counts = [
            (self.error_count, "error(s)"),
            (self.warning_count, "warning(s)"),
        ]
        parts = [f"{count} {label}" for count, label in counts if count]
        return ", ".join(parts) or "No issues found"

    def format(self) -> str:
        """Render every issue, errors first, for display.

        Returns:
            Multi-line text with one section per severity present
        """
        if not self.issues:
            return "Validation successful - no issues found"

        lines = [f"Validation Report - {self.summary()}", "=" * 60]
        for heading, issues in (
            ("ERRORS", self.get_errors()),
            ("WARNINGS", self.get_warnings()),
        ):
            if issues:
                lines.append(f"\n{heading}:")
                lines.extend(f"  - {issue}" for issue in issues)

        return "\n".join(lines)
