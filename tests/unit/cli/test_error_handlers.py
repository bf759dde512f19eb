"""Unit tests for CLI error handling."""

import click
import pytest
from pydantic import ValidationError

from callcharge.cli.error_handlers import (
    EXIT_ABORTED,
    EXIT_CONFIGURATION,
    EXIT_FILE_NOT_FOUND,
    EXIT_FORMAT,
    EXIT_INVALID_DATE,
    EXIT_UNEXPECTED,
    EXIT_VECTOR_TABLE,
    EXIT_VERIFICATION,
    ConfigurationError,
    VectorTableError,
    VerificationError,
    handle_cli_error,
    with_error_handling,
)
from callcharge.exceptions import FormatError, InvalidDateError
from callcharge.models.tariff import Tariff


class TestHandleCliError:
    """Test exit code mapping and messages."""

    def test_configuration_error(self, capsys):
        """Test configuration errors and their hint."""
        code = handle_cli_error(
            ConfigurationError("bad tariff", recovery_hint="Fix TARIFF_BASE_RATE")
        )

        err = capsys.readouterr().err
        assert code == EXIT_CONFIGURATION
        assert "Configuration Error: bad tariff" in err
        assert "Hint: Fix TARIFF_BASE_RATE" in err

    def test_pydantic_validation_error(self, capsys):
        """Test that settings validation errors are configuration errors."""
        with pytest.raises(ValidationError) as exc_info:
            Tariff(base_rate=0, overflow_rate=0)

        assert handle_cli_error(exc_info.value) == EXIT_CONFIGURATION

    def test_format_error(self, capsys):
        """Test format errors."""
        code = handle_cli_error(FormatError("nope"))

        assert code == EXIT_FORMAT
        assert "Format Error" in capsys.readouterr().err

    def test_invalid_date_error(self, capsys):
        """Test invalid date errors."""
        code = handle_cli_error(InvalidDateError("Invalid Date: month 13"))

        assert code == EXIT_INVALID_DATE
        assert "Invalid Date: month 13" in capsys.readouterr().err

    def test_verification_error(self, capsys):
        """Test failed verification."""
        code = handle_cli_error(VerificationError("2 of 5 vector(s) failed"))

        assert code == EXIT_VERIFICATION
        assert "Verification Failed" in capsys.readouterr().err

    def test_vector_table_error(self, capsys):
        """Test unreadable vector tables and their hint."""
        code = handle_cli_error(
            VectorTableError("found 3 columns", recovery_hint="Columns must be: num")
        )

        err = capsys.readouterr().err
        assert code == EXIT_VECTOR_TABLE
        assert "Invalid Vector Table: found 3 columns" in err
        assert "Hint: Columns must be: num" in err

    def test_file_not_found(self, capsys):
        """Test missing files."""
        error = FileNotFoundError(2, "No such file", "vectors.csv")

        assert handle_cli_error(error) == EXIT_FILE_NOT_FOUND
        assert "vectors.csv" in capsys.readouterr().err

    def test_abort(self, capsys):
        """Test user cancellation."""
        assert handle_cli_error(click.Abort()) == EXIT_ABORTED

    def test_unexpected_error(self, capsys):
        """Test unknown errors suggest --debug."""
        code = handle_cli_error(RuntimeError("boom"))

        err = capsys.readouterr().err
        assert code == EXIT_UNEXPECTED
        assert "Unexpected Error: RuntimeError" in err
        assert "--debug" in err

    def test_unexpected_error_with_debug(self, capsys):
        """Test that --debug prints the stack trace."""
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            handle_cli_error(e, debug=True)

        assert "Full stack trace" in capsys.readouterr().err

    def test_nothing_on_stdout(self, capsys):
        """Test that errors never go to stdout."""
        handle_cli_error(FormatError("nope"))
        assert capsys.readouterr().out == ""


class TestWithErrorHandling:
    """Test the error handling context manager."""

    def test_exits_with_mapped_code(self, capsys):
        """Test that an error becomes a SystemExit with its code."""
        with pytest.raises(SystemExit) as exc_info:
            with with_error_handling():
                raise InvalidDateError("Invalid Date: bad")

        assert exc_info.value.code == EXIT_INVALID_DATE

    def test_no_error(self):
        """Test that a clean block runs normally."""
        with with_error_handling():
            value = 1
        assert value == 1
