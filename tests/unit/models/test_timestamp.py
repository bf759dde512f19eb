"""Unit tests for Timestamp, CallInterval and DstWindow models."""

import pytest
from pydantic import ValidationError

from callcharge.models.timestamp import CallInterval, DstWindow, Timestamp
from callcharge.utils.calendar_utils import MILLIS_PER_HOUR, MILLIS_PER_MINUTE


class TestTimestampModel:
    """Test Timestamp creation and derived values."""

    def test_create_timestamp(self):
        """Test creating a timestamp with every field."""
        ts = Timestamp(year=2023, month=4, day=2, hour=1, minute=30, second=15)

        assert ts.year == 2023
        assert ts.month == 4
        assert ts.day == 2
        assert ts.hour == 1
        assert ts.minute == 30
        assert ts.second == 15

    def test_time_defaults_to_midnight(self):
        """Test that omitted clock fields default to 00:00:00."""
        ts = Timestamp(year=2023, month=1, day=1)
        assert (ts.hour, ts.minute, ts.second) == (0, 0, 0)

    def test_str_is_zero_padded(self):
        """Test the canonical text rendering."""
        ts = Timestamp(year=2023, month=4, day=2, hour=2, minute=5, second=9)
        assert str(ts) == "2023-04-02 02:05:09"

    def test_out_of_range_fields_are_accepted(self):
        """Test that the model itself does not range-check fields."""
        ts = Timestamp(year=2023, month=13, day=1)
        assert ts.month == 13

    def test_timestamp_is_immutable(self):
        """Test that fields cannot be reassigned."""
        ts = Timestamp(year=2023, month=1, day=1)
        with pytest.raises(ValidationError):
            ts.year = 2024

    def test_extra_fields_rejected(self):
        """Test that unknown fields are rejected."""
        with pytest.raises(ValidationError):
            Timestamp(year=2023, month=1, day=1, millisecond=5)

    def test_instant_difference(self):
        """Test that instants subtract to elapsed milliseconds."""
        start = Timestamp(year=2023, month=1, day=1)
        end = Timestamp(year=2023, month=1, day=1, minute=10)
        assert end.instant - start.instant == 10 * MILLIS_PER_MINUTE

    def test_instant_of_invalid_timestamp_raises(self):
        """Test that an invalid timestamp has no instant."""
        with pytest.raises(ValueError):
            Timestamp(year=2023, month=2, day=30).instant

    def test_equal_timestamps(self):
        """Test value equality."""
        assert Timestamp(year=2023, month=1, day=1) == Timestamp(
            year=2023, month=1, day=1
        )


class TestCallIntervalModel:
    """Test CallInterval."""

    def test_raw_duration(self):
        """Test naive duration of an interval."""
        interval = CallInterval(
            start=Timestamp(year=2023, month=1, day=1),
            end=Timestamp(year=2023, month=1, day=1, minute=25),
        )
        assert interval.raw_duration_ms == 25 * MILLIS_PER_MINUTE
        assert interval.is_transform is False

    def test_negative_raw_duration(self):
        """Test that a reversed interval has a negative duration."""
        interval = CallInterval(
            start=Timestamp(year=2023, month=10, day=29, hour=2, minute=30),
            end=Timestamp(year=2023, month=10, day=29, hour=2, minute=10),
            is_transform=True,
        )
        assert interval.raw_duration_ms == -20 * MILLIS_PER_MINUTE


class TestDstWindowModel:
    """Test DstWindow derived boundaries."""

    @pytest.fixture
    def window(self):
        return DstWindow(
            year=2023,
            spring_start=Timestamp(year=2023, month=4, day=2, hour=2),
            fall_start=Timestamp(year=2023, month=10, day=29, hour=2),
        )

    def test_spring_end_is_one_hour_later(self, window):
        """Test that the spring window ends at 03:00."""
        expected = Timestamp(year=2023, month=4, day=2, hour=3).instant
        assert window.spring_end == expected
        assert window.spring_end - window.spring_start.instant == MILLIS_PER_HOUR

    def test_fall_end_is_last_second_of_hour(self, window):
        """Test that the autumn window ends at 02:59:59."""
        expected = Timestamp(
            year=2023, month=10, day=29, hour=2, minute=59, second=59
        ).instant
        assert window.fall_end == expected
