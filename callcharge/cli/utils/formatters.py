"""Output formatting utilities for CLI."""

from typing import List

import click

from callcharge.models.tariff import ChargeBreakdown


def format_success(message: str) -> str:
    """Format a success message with green color."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_amount(amount: float) -> str:
    """Format a charge with two decimals.

    Example:
        >>> format_amount(1.5)
        '1.50'
    """
    return f"{amount:.2f}"


def format_breakdown(breakdown: ChargeBreakdown) -> str:
    """Format every intermediate value of a charge.

    Args:
        breakdown: The charge to describe

    Returns:
        Multi-line description, one value per line
    """
    lines = [
        f"Start:            {breakdown.start}",
        f"End:              {breakdown.end}",
        f"Transform:        {'yes' if breakdown.is_transform else 'no'}",
        f"Raw duration:     {breakdown.raw_duration_ms} ms",
        f"DST adjustment:   {breakdown.dst_adjustment_ms:+d} ms",
        f"Total duration:   {breakdown.total_duration_ms} ms",
        f"Billed minutes:   {breakdown.billed_minutes}",
        f"Amount:           {format_amount(breakdown.amount)}",
    ]
    return "\n".join(lines)


def format_table(headers: List[str], rows: List[List[str]], max_width: int = 80) -> str:
    """Format rows as a bordered, left-aligned text table.

    Cells wider than ``max_width`` are truncated.

    Example:
        >>> print(format_table(["num", "status"], [["1", "PASS"]]))
        +-----+--------+
        | num | status |
        +-----+--------+
        | 1   | PASS   |
        +-----+--------+
    """
    if not headers:
        return ""

    columns = len(headers)
    cells = [[str(cell) for cell in row[:columns]] for row in rows]
    widths = [
        min(max([len(h)] + [len(row[i]) for row in cells if i < len(row)]), max_width)
        for i, h in enumerate(headers)
    ]

    def render(values: List[str]) -> str:
        padded = (f" {v[:w]:<{w}} " for v, w in zip(values, widths))
        return "|" + "|".join(padded) + "|"

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"
    lines = [border, render(headers), border]
    if cells:
        lines.extend(render(row) for row in cells)
        lines.append(border)

    return "\n".join(lines)
