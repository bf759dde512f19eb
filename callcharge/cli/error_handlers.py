"""Error handling for CLI commands."""

import sys
import traceback
from typing import Optional

import click
from pydantic import ValidationError

from callcharge.cli.utils.formatters import format_error, format_warning
from callcharge.exceptions import FormatError, InvalidDateError

EXIT_CONFIGURATION = 1
EXIT_FORMAT = 2
EXIT_INVALID_DATE = 3
EXIT_VERIFICATION = 4
EXIT_FILE_NOT_FOUND = 5
EXIT_VECTOR_TABLE = 6
EXIT_ABORTED = 130
EXIT_UNEXPECTED = 255


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    pass


class VerificationError(CLIError):
    """One or more test vectors did not match their expected charge."""

    pass


class VectorTableError(CLIError):
    """A vector table could not be read as a table of charge vectors."""

    pass


def _echo_hint(hint: Optional[str]) -> None:
    if hint:
        click.echo(format_warning(f"Hint: {hint}"), err=True)


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Report an error on stderr and choose the exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show full stack trace

    Returns:
        Exit code for the error type
    """
    if isinstance(error, ConfigurationError):
        click.echo(format_error(f"Configuration Error: {error.message}"), err=True)
        _echo_hint(error.recovery_hint)
        return EXIT_CONFIGURATION

    elif isinstance(error, ValidationError):
        click.echo(format_error("Configuration Error"), err=True)
        click.echo(str(error), err=True)
        _echo_hint("Check the TARIFF_* and LOG_* settings in your environment or .env")
        return EXIT_CONFIGURATION

    elif isinstance(error, FormatError):
        click.echo(format_error(f"Format Error: {error.message}"), err=True)
        _echo_hint("Timestamps must look like 2023-04-02 01:30:00")
        return EXIT_FORMAT

    elif isinstance(error, InvalidDateError):
        click.echo(format_error(error.message), err=True)
        if error.report is not None and error.report.error_count > 1:
            for issue in error.report.get_errors()[1:]:
                click.echo(f"  - {issue}", err=True)
        _echo_hint("Use --transform for calls across the autumn transition")
        return EXIT_INVALID_DATE

    elif isinstance(error, VerificationError):
        click.echo(format_error(f"Verification Failed: {error.message}"), err=True)
        _echo_hint(error.recovery_hint)
        return EXIT_VERIFICATION

    elif isinstance(error, VectorTableError):
        click.echo(format_error(f"Invalid Vector Table: {error.message}"), err=True)
        _echo_hint(error.recovery_hint)
        return EXIT_VECTOR_TABLE

    elif isinstance(error, FileNotFoundError):
        click.echo(format_error(f"File Not Found: {error.filename or error}"), err=True)
        return EXIT_FILE_NOT_FOUND

    # Handle click.Abort (user cancellation)
    elif isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"), err=True)
        return EXIT_ABORTED

    else:
        click.echo(format_error(f"Unexpected Error: {type(error).__name__}"), err=True)
        click.echo(str(error), err=True)

        if debug:
            click.echo("\nFull stack trace:", err=True)
            click.echo(
                "".join(
                    traceback.format_exception(
                        type(error), error, error.__traceback__
                    )
                ),
                err=True,
            )
        else:
            click.echo(
                format_warning("\nRun with --debug flag for full stack trace"),
                err=True,
            )

        return EXIT_UNEXPECTED


def with_error_handling(debug: bool = False):
    """
    Context manager adding standardized error handling to CLI commands.

    Args:
        debug: Whether to show full stack traces

    Returns:
        Context manager that exits with the mapped code on error

    Example:
        @click.command()
        @click.pass_context
        def my_command(ctx):
            with with_error_handling(ctx.obj["debug"]):
                ...
    """

    class ErrorHandler:
        """Context manager for error handling."""

        def __init__(self, show_debug: bool):
            self.show_debug = show_debug

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc_val, exc_tb):
            if exc_val is not None and isinstance(exc_val, Exception):
                exit_code = handle_cli_error(exc_val, self.show_debug)
                sys.exit(exit_code)
            return False

    return ErrorHandler(debug)
