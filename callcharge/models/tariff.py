"""Tariff and charge breakdown models.

This module defines the two-tier per-minute rate table and the record
describing how a single call's amount was derived.
"""

from dataclasses import dataclass
from decimal import Decimal

from pydantic import Field, model_validator

from callcharge.models.base import BaseDataModel


class Tariff(BaseDataModel):
    """Two-tier per-minute rate table.

    Minutes up to ``threshold_minutes`` are charged at ``base_rate``; every
    minute beyond it is charged at ``overflow_rate``. The default values
    charge 0.05 per minute for the first 20 minutes and 0.10 afterwards.

    Attributes:
        threshold_minutes: Minutes covered by the first tier
        base_rate: Rate per minute in the first tier
        overflow_rate: Rate per minute beyond the threshold

    Example:
        >>> tariff = Tariff()
        >>> tariff.threshold_amount
        Decimal('1.00')
    """

    threshold_minutes: int = Field(20, ge=0, description="First-tier minutes")
    base_rate: Decimal = Field(Decimal("0.05"), ge=0, description="First-tier rate")
    overflow_rate: Decimal = Field(
        Decimal("0.10"), ge=0, description="Rate beyond the threshold"
    )

    @property
    def threshold_amount(self) -> Decimal:
        """Amount charged for exactly ``threshold_minutes`` minutes."""
        return self.base_rate * self.threshold_minutes

    @model_validator(mode="after")
    def validate_rates(self) -> "Tariff":
        """Reject a tariff whose rates are both zero.

        Raises:
            ValueError: If every call would be free
        """
        if self.base_rate == 0 and self.overflow_rate == 0:
            raise ValueError("base_rate and overflow_rate cannot both be zero")
        return self


DEFAULT_TARIFF = Tariff()


@dataclass
class ChargeBreakdown:
    """How the amount for a single call was derived.

    Attributes:
        start: Normalized start timestamp text
        end: Normalized end timestamp text
        is_transform: Transform flag the call was priced with
        raw_duration_ms: end - start in milliseconds
        dst_adjustment_ms: Milliseconds added for a DST transition
        total_duration_ms: raw_duration_ms + dst_adjustment_ms
        billed_minutes: total_duration_ms rounded up to whole minutes
        amount: Amount charged for billed_minutes

    Example:
        >>> ChargeBreakdown(
        ...     start="2023-01-01 00:00:00",
        ...     end="2023-01-01 00:10:00",
        ...     is_transform=False,
        ...     raw_duration_ms=600000,
        ...     dst_adjustment_ms=0,
        ...     total_duration_ms=600000,
        ...     billed_minutes=10,
        ...     amount=0.5,
        ... ).amount
        0.5
    """

    start: str
    end: str
    is_transform: bool
    raw_duration_ms: int
    dst_adjustment_ms: int
    total_duration_ms: int
    billed_minutes: int
    amount: float
