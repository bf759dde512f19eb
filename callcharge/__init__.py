"""Telephone call charge calculation with daylight saving time support."""

from callcharge.calculators.charge_calculator import (
    calculate_charge_breakdown,
    charge,
)
from callcharge.exceptions import CallChargeError, FormatError, InvalidDateError
from callcharge.models.tariff import DEFAULT_TARIFF, ChargeBreakdown, Tariff

__version__ = "1.0.0"

__all__ = [
    "CallChargeError",
    "ChargeBreakdown",
    "DEFAULT_TARIFF",
    "FormatError",
    "InvalidDateError",
    "Tariff",
    "calculate_charge_breakdown",
    "charge",
]
