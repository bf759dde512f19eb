"""Base model for all data models in the call charge system.

This module provides a base Pydantic model with common configuration
shared by timestamps, intervals, tariffs and test vectors.
"""

from pydantic import BaseModel, ConfigDict


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Serialization to/from dictionaries
    - Immutability (frozen models)

    Example:
        >>> class Rate(BaseDataModel):
        ...     name: str
        ...     minutes: int
        >>> rate = Rate(name="peak", minutes=20)
        >>> rate.model_dump()
        {'name': 'peak', 'minutes': 20}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like Decimal
        arbitrary_types_allowed=True,
        # Use lax type coercion ("20" -> 20)
        strict=False,
        # Reject unknown fields
        extra="forbid",
        # Values are immutable after creation
        frozen=True,
    )
