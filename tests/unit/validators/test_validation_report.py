"""Unit tests for the validation report."""

from callcharge.validators.validation_report import (
    ValidationIssue,
    ValidationReport,
    ValidationSeverity,
)


class TestValidationIssue:
    """Test ValidationIssue formatting."""

    def test_str_without_context(self):
        """Test string form without context."""
        issue = ValidationIssue(
            severity=ValidationSeverity.ERROR,
            field="start.month",
            message="Value must be at most 12",
            value=13,
        )
        assert str(issue) == "[ERROR] start.month: Value must be at most 12"

    def test_str_with_context(self):
        """Test string form with context."""
        issue = ValidationIssue(
            severity=ValidationSeverity.WARNING,
            field="end",
            message="Call crosses into another year",
            value="2024-01-01 00:00:10",
            context={"start": "2023-12-31 23:59:50"},
        )
        assert str(issue).endswith("(start=2023-12-31 23:59:50)")


class TestValidationReport:
    """Test ValidationReport collection and formatting."""

    def test_empty_report_is_valid(self):
        """Test that a new report is valid."""
        report = ValidationReport()
        assert report.is_valid()
        assert report.summary() == "No issues found"
        assert report.format() == "Validation successful - no issues found"

    def test_errors_make_report_invalid(self):
        """Test that any error invalidates the report."""
        report = ValidationReport()
        report.add_error("start.day", "Day must be between 1 and 28", 29)

        assert not report.is_valid()
        assert report.error_count == 1

    def test_warnings_keep_report_valid(self):
        """Test that warnings do not affect validity."""
        report = ValidationReport()
        report.add_warning("end", "Call crosses into another year", "x")

        assert report.is_valid()
        assert report.warning_count == 1

    def test_merge(self):
        """Test merging two reports."""
        first = ValidationReport()
        first.add_error("start.month", "bad", 13)
        second = ValidationReport()
        second.add_warning("end", "odd", "x")

        first.merge(second)

        assert first.error_count == 1
        assert first.warning_count == 1

    def test_format_groups_by_severity(self):
        """Test that formatting lists errors before warnings."""
        report = ValidationReport()
        report.add_warning("end", "odd", "x")
        report.add_error("start.month", "bad", 13)

        text = report.format()

        assert "1 error(s), 1 warning(s)" in text
        assert text.index("ERRORS:") < text.index("WARNINGS:")
