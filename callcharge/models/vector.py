"""Charge test vector model.

A test vector is one row of an equivalence-class table: a call to price
and the amount it is expected to cost.
"""

from typing import Optional

from pydantic import Field, field_validator

from callcharge.models.base import BaseDataModel


class ChargeVector(BaseDataModel):
    """A single call with its expected charge.

    Attributes:
        num: Row identifier from the source table
        start_time: Start timestamp text (``yyyy-MM-dd HH:mm:ss``)
        end_time: End timestamp text
        is_transform: Whether the call spans the autumn transition
        expected_amount: Expected charge, or None when the call is
            expected to be rejected

    Example:
        >>> vector = ChargeVector(
        ...     num=1,
        ...     start_time="2023-01-01 00:00:00",
        ...     end_time="2023-01-01 00:10:00",
        ...     expected_amount=0.5,
        ... )
        >>> vector.expects_error
        False
    """

    num: int = Field(..., description="Row identifier")
    start_time: str = Field(..., description="Start timestamp text")
    end_time: str = Field(..., description="End timestamp text")
    is_transform: bool = Field(False, description="Call spans a fall-back transition")
    expected_amount: Optional[float] = Field(
        None, ge=0, description="Expected charge (None means an error is expected)"
    )

    @field_validator("start_time", "end_time")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Strip surrounding whitespace left over from table cells."""
        return v.strip()

    @property
    def expects_error(self) -> bool:
        """Whether pricing this vector is expected to raise."""
        return self.expected_amount is None
