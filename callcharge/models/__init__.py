"""Data models for the call charge system.

This package contains Pydantic models for all entities:
- BaseDataModel: Base class with common configuration
- Timestamp: Civil date and time parsed from text
- CallInterval: A call's start and end
- DstWindow: The DST boundaries of one year
- Tariff: Two-tier per-minute rate table
- ChargeBreakdown: How a call's amount was derived
- ChargeVector: A call with its expected charge
"""

from callcharge.models.base import BaseDataModel
from callcharge.models.tariff import DEFAULT_TARIFF, ChargeBreakdown, Tariff
from callcharge.models.timestamp import CallInterval, DstWindow, Timestamp
from callcharge.models.vector import ChargeVector

__all__ = [
    "BaseDataModel",
    "CallInterval",
    "ChargeBreakdown",
    "ChargeVector",
    "DEFAULT_TARIFF",
    "DstWindow",
    "Tariff",
    "Timestamp",
]
