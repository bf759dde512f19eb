"""Parser for ``yyyy-MM-dd HH:mm:ss`` timestamp text."""

import re

from callcharge.exceptions import FormatError
from callcharge.models.timestamp import Timestamp

# ASCII digits only
_TIMESTAMP_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2}) "
    r"(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
)


def parse_timestamp(text: str) -> Timestamp:
    """Parse timestamp text into a Timestamp.

    The text must match ``yyyy-MM-dd HH:mm:ss`` exactly: zero-padded
    fields, hyphen and colon separators and a single space. Field ranges
    are not checked here, so ``"2023-13-01 00:00:00"`` parses into a
    Timestamp with ``month=13``.

    Args:
        text: Timestamp text

    Returns:
        Parsed Timestamp

    Raises:
        FormatError: If the text does not match the pattern

    Example:
        >>> parse_timestamp("2023-04-02 01:30:00").hour
        1
    """
    if not isinstance(text, str):
        raise FormatError(text, f"Expected timestamp text, got {type(text).__name__}")

    match = _TIMESTAMP_PATTERN.fullmatch(text)
    if match is None:
        raise FormatError(text)

    return Timestamp(**{name: int(value) for name, value in match.groupdict().items()})
