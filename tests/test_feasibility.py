"""
Tests for the minimum-connection-time rule.

Tests cover:
- Inclusive boundary at the threshold
- Default threshold of 60 minutes
- Negative gaps (departure before arrival)
- Negative thresholds rejected as caller errors
"""

import pytest

from src.itinerary_search.exceptions import InvalidConnectionTimeError
from src.itinerary_search.feasibility import (
    DEFAULT_MIN_CONNECTION_MINUTES,
    connection_gap_minutes,
    is_connection_feasible,
    is_feasible,
)


class TestConnectionGap:
    def test_gap_in_minutes(self, make_leg):
        first = make_leg("1", "A", "B", "08:00", "10:00")
        second = make_leg("2", "B", "C", "10:45", "12:00")
        assert connection_gap_minutes(first, second) == 45

    def test_negative_gap(self, make_leg):
        first = make_leg("1", "A", "B", "08:00", "10:00")
        second = make_leg("2", "B", "C", "09:30", "11:00")
        assert connection_gap_minutes(first, second) == -30


class TestIsFeasible:
    """Tests for is_feasible()."""

    def test_default_threshold_is_sixty(self):
        assert DEFAULT_MIN_CONNECTION_MINUTES == 60

    def test_exact_threshold_is_accepted(self, make_leg):
        legs = [
            make_leg("1", "A", "B", "08:00", "10:00"),
            make_leg("2", "B", "C", "11:00", "12:00"),
        ]
        assert is_feasible(legs)

    def test_one_minute_short_is_rejected(self, make_leg):
        legs = [
            make_leg("1", "A", "B", "08:00", "10:01"),
            make_leg("2", "B", "C", "11:00", "12:00"),
        ]
        assert not is_feasible(legs)

    def test_custom_threshold(self, make_leg):
        legs = [
            make_leg("1", "A", "B", "08:00", "10:01"),
            make_leg("2", "B", "C", "11:00", "12:00"),
        ]
        assert is_feasible(legs, min_connection_minutes=59)
        assert not is_feasible(legs, min_connection_minutes=60)

    def test_departure_before_arrival_rejected_even_at_zero(self, make_leg):
        legs = [
            make_leg("1", "A", "B", "08:00", "10:00"),
            make_leg("2", "B", "C", "09:00", "11:00"),
        ]
        assert not is_feasible(legs, min_connection_minutes=0)

    def test_zero_gap_accepted_at_zero_threshold(self, make_leg):
        legs = [
            make_leg("1", "A", "B", "08:00", "10:00"),
            make_leg("2", "B", "C", "10:00", "11:00"),
        ]
        assert is_feasible(legs, min_connection_minutes=0)

    def test_every_connection_is_checked(self, make_leg):
        legs = [
            make_leg("1", "A", "B", "08:00", "09:00"),
            make_leg("2", "B", "C", "10:00", "11:00"),
            make_leg("3", "C", "D", "11:30", "12:30"),
        ]
        assert not is_feasible(legs)

    def test_no_wraparound_to_next_day(self, make_leg):
        """An early-morning departure does not roll over to the next day."""
        legs = [
            make_leg("1", "A", "B", "20:00", "23:00"),
            make_leg("2", "B", "C", "01:00", "02:00"),
        ]
        assert not is_feasible(legs)

    def test_single_leg_always_feasible(self, make_leg):
        assert is_feasible([make_leg("1", "A", "B")])

    def test_empty_sequence_feasible(self):
        assert is_feasible([])

    def test_negative_threshold_raises(self, make_leg):
        with pytest.raises(InvalidConnectionTimeError) as exc_info:
            is_feasible([make_leg("1", "A", "B")], min_connection_minutes=-1)
        assert exc_info.value.minutes == -1

    def test_nan_threshold_raises(self, make_leg):
        """NaN would otherwise make every comparison false."""
        with pytest.raises(InvalidConnectionTimeError, match="finite"):
            is_feasible(
                [make_leg("1", "A", "B"), make_leg("2", "B", "C", "07:00", "08:00")],
                min_connection_minutes=float("nan"),
            )


class TestIsConnectionFeasible:
    def test_offsets_compared_as_instants(self, make_leg):
        """10:00+02:00 is 08:00 UTC, so a 09:00Z departure is 60 minutes later."""
        first = make_leg(
            "1", "A", "B", "2024-01-01T07:00:00+02:00", "2024-01-01T10:00:00+02:00"
        )
        second = make_leg("2", "B", "C", "09:00", "10:00")
        assert is_connection_feasible(first, second, 60)
