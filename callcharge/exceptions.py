"""Exceptions raised while pricing a call.

Both error kinds describe bad caller input. They are raised immediately
and never retried.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from callcharge.validators.validation_report import ValidationReport


class CallChargeError(ValueError):
    """Base exception for call charge errors."""

    pass


class FormatError(CallChargeError):
    """Timestamp text does not match ``yyyy-MM-dd HH:mm:ss``."""

    def __init__(self, text: object, message: Optional[str] = None):
        """
        Initialize format error.

        Args:
            text: The offending input
            message: Optional message overriding the default
        """
        self.text = text
        self.message = message or (
            f"Timestamp {text!r} does not match format yyyy-MM-dd HH:mm:ss"
        )
        super().__init__(self.message)


class InvalidDateError(CallChargeError):
    """Timestamp fields are out of range or the call ends before it starts."""

    def __init__(
        self, message: str, report: Optional["ValidationReport"] = None
    ) -> None:
        """
        Initialize invalid date error.

        Args:
            message: Error message to display
            report: Validation report listing every issue found
        """
        self.message = message
        self.report = report
        super().__init__(message)
