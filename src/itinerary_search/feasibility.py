"""
Minimum-connection-time feasibility rule.

Timestamps are compared as absolute instants. A next leg that departs
before the previous one arrives gives a negative gap and is rejected;
there is no next-day wraparound.
"""

import math
from typing import Sequence

from .exceptions import InvalidConnectionTimeError
from .models import Leg

DEFAULT_MIN_CONNECTION_MINUTES = 60


def validate_min_connection(min_connection_minutes: float) -> None:
    """
    Raises:
        InvalidConnectionTimeError: If the threshold is negative or not
            finite (NaN, infinity).
    """
    if not math.isfinite(min_connection_minutes) or min_connection_minutes < 0:
        raise InvalidConnectionTimeError(min_connection_minutes)


def connection_gap_minutes(arriving: Leg, departing: Leg) -> float:
    """Minutes between arriving.arrival and departing.departure."""
    return (departing.departure - arriving.arrival).total_seconds() / 60


def is_connection_feasible(
    arriving: Leg,
    departing: Leg,
    min_connection_minutes: float = DEFAULT_MIN_CONNECTION_MINUTES,
) -> bool:
    """Check one connection; the boundary is inclusive."""
    return connection_gap_minutes(arriving, departing) >= min_connection_minutes


def is_feasible(
    legs: Sequence[Leg],
    min_connection_minutes: float = DEFAULT_MIN_CONNECTION_MINUTES,
) -> bool:
    """
    Check every consecutive pair of legs against the connection rule.

    Args:
        legs: Itinerary legs in hop order.
        min_connection_minutes: Minimum gap between an arrival and the
            next departure.

    Returns:
        True if every gap is at least the threshold. Itineraries with
        zero or one leg are always feasible.

    Raises:
        InvalidConnectionTimeError: If the threshold is negative or not finite.
    """
    validate_min_connection(min_connection_minutes)
    return all(
        is_connection_feasible(legs[i], legs[i + 1], min_connection_minutes)
        for i in range(len(legs) - 1)
    )
