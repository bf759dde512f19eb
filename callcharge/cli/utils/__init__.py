"""CLI utility functions."""

from callcharge.cli.utils.formatters import (
    format_amount,
    format_breakdown,
    format_error,
    format_info,
    format_success,
    format_table,
    format_warning,
)

__all__ = [
    "format_amount",
    "format_breakdown",
    "format_error",
    "format_info",
    "format_success",
    "format_table",
    "format_warning",
]
