"""
Shared fixtures for itinerary search tests.

Timestamps are given as 'HH:MM' on a fixed UTC day unless a full ISO
string is passed.
"""

from datetime import datetime, timezone
from typing import Callable

import pytest

from src.itinerary_router.adapters.data_providers.static_provider import (
    SAMPLE_LEGS,
    StaticLegProvider,
)
from src.itinerary_router.adapters.repositories.leg_catalog_repo import (
    build_leg_catalog,
)
from src.itinerary_search.catalog import LegCatalog
from src.itinerary_search.models import Leg


def at(clock: str) -> datetime:
    """'08:30' -> 2024-01-01 08:30 UTC; full ISO strings are parsed as-is."""
    if "T" in clock:
        return datetime.fromisoformat(clock.replace("Z", "+00:00"))
    hour, minute = clock.split(":")
    return datetime(2024, 1, 1, int(hour), int(minute), tzinfo=timezone.utc)


@pytest.fixture
def make_leg() -> Callable[..., Leg]:
    """Factory for Leg objects with short clock-time arguments."""

    def _make(
        leg_id: str,
        origin: str,
        destination: str,
        departure: str = "08:00",
        arrival: str = "09:00",
        operator: str = "Garuda",
        duration_minutes: int = 60,
    ) -> Leg:
        return Leg(
            leg_id=leg_id,
            origin=origin,
            destination=destination,
            operator=operator,
            duration_minutes=duration_minutes,
            departure=at(departure),
            arrival=at(arrival),
        )

    return _make


@pytest.fixture
def chain_catalog(make_leg) -> LegCatalog:
    """A -> B -> C with a 60 minute connection at B."""
    return LegCatalog.from_legs(
        [
            make_leg("1", "A", "B", "08:00", "10:00", duration_minutes=120),
            make_leg("2", "B", "C", "11:00", "13:00", duration_minutes=120),
        ]
    )


@pytest.fixture
def sample_catalog() -> LegCatalog:
    """The built-in JKT/SUB/JOG/DPS schedule."""
    return build_leg_catalog(StaticLegProvider().get_legs_df())


@pytest.fixture
def sample_records():
    """Copy of the built-in sample records."""
    return [dict(r) for r in SAMPLE_LEGS]
