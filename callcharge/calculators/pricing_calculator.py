"""Per-minute pricing for calls.

Formula (default tariff):
    minutes <= 20: minutes × 0.05
    minutes > 20:  1 + (minutes - 20) × 0.10

The two branches meet at the threshold, so 20 minutes cost 1.00 either way.
"""

from decimal import Decimal
from typing import Optional

from callcharge.models.tariff import DEFAULT_TARIFF, Tariff


def calculate_cost_decimal(minutes: int, tariff: Optional[Tariff] = None) -> Decimal:
    """Calculate the exact cost of a number of billed minutes.

    Args:
        minutes: Billed minutes (non-negative)
        tariff: Rate table (default: DEFAULT_TARIFF)

    Returns:
        Cost as a Decimal

    Raises:
        ValueError: If minutes is negative

    Example:
        >>> calculate_cost_decimal(25)
        Decimal('1.50')
    """
    if minutes < 0:
        raise ValueError(f"minutes cannot be negative, got {minutes}")

    tariff = tariff or DEFAULT_TARIFF
    if minutes <= tariff.threshold_minutes:
        return tariff.base_rate * minutes

    overflow = minutes - tariff.threshold_minutes
    return tariff.threshold_amount + tariff.overflow_rate * overflow


def calculate_cost(minutes: int, tariff: Optional[Tariff] = None) -> float:
    """Calculate the cost of a number of billed minutes.

    Example:
        >>> calculate_cost(10)
        0.5
        >>> calculate_cost(20)
        1.0
        >>> calculate_cost(25)
        1.5
    """
    return float(calculate_cost_decimal(minutes, tariff))
