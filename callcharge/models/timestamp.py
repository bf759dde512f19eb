"""Timestamp and call interval models.

A Timestamp holds the raw civil fields parsed from ``yyyy-MM-dd HH:mm:ss``
text. Field ranges are not enforced here: the timestamp
validator reports out-of-range fields as invalid dates, which is a
different failure from malformed text.
"""

from pydantic import Field

from callcharge.models.base import BaseDataModel
from callcharge.utils.calendar_utils import MILLIS_PER_HOUR, to_epoch_millis

TIMESTAMP_FORMAT = "yyyy-MM-dd HH:mm:ss"


class Timestamp(BaseDataModel):
    """An immutable civil date and time.

    Attributes:
        year: Calendar year
        month: Month number
        day: Day of month
        hour: Hour of day
        minute: Minute of hour
        second: Second of minute

    Example:
        >>> ts = Timestamp(year=2023, month=4, day=2, hour=2, minute=0, second=0)
        >>> str(ts)
        '2023-04-02 02:00:00'
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @property
    def instant(self) -> int:
        """Milliseconds since the epoch in the fixed reference zone.

        Only meaningful for a timestamp that passed validation.

        Raises:
            ValueError: If the fields do not form a real date and time
        """
        return to_epoch_millis(
            self.year, self.month, self.day, self.hour, self.minute, self.second
        )

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )


class CallInterval(BaseDataModel):
    """A call's start and end timestamps.

    Attributes:
        start: When the call started
        end: When the call ended
        is_transform: Whether the call is expected to span the autumn
            (repeated hour) transition
    """

    start: Timestamp
    end: Timestamp
    is_transform: bool = Field(False, description="Call spans a fall-back transition")

    @property
    def raw_duration_ms(self) -> int:
        """Naive elapsed milliseconds (end - start), without DST adjustment."""
        return self.end.instant - self.start.instant


class DstWindow(BaseDataModel):
    """The two DST boundaries of one year.

    Each boundary implicitly defines a one hour window starting at 02:00 on
    the boundary Sunday.

    Attributes:
        year: Year the window applies to
        spring_start: First Sunday of April at 02:00 (clocks go forward)
        fall_start: Last Sunday of October at 02:00 (clocks go back)
    """

    year: int
    spring_start: Timestamp
    fall_start: Timestamp

    @property
    def spring_end(self) -> int:
        """Instant at which the skipped spring hour ends (03:00)."""
        return self.spring_start.instant + MILLIS_PER_HOUR

    @property
    def fall_end(self) -> int:
        """Last instant of the repeated autumn hour (02:59:59)."""
        return self.fall_start.instant + MILLIS_PER_HOUR - 1000
