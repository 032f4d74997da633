"""
Core data types for itinerary search.

Legs are immutable edge records loaded from an external catalog. Paths
describe which hops exist, itineraries pin one leg to every hop, and
summaries are the read-only view handed to callers.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Tuple

Location = str
Path = Tuple[Location, ...]


def format_timestamp(value: datetime) -> str:
    """Render an instant as an ISO-8601 UTC string ('2024-12-08T06:00:00Z')."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


@dataclass(frozen=True)
class Leg:
    """
    A single scheduled leg between two locations.

    Multiple legs may share the same origin/destination pair.
    `duration_minutes` is the declared duration and is not required to
    agree with `arrival - departure`.

    Attributes:
        leg_id: Catalog identifier (e.g. flight number).
        origin: Departure location code.
        destination: Arrival location code.
        operator: Operating carrier name.
        duration_minutes: Declared duration, positive.
        departure: Departure instant.
        arrival: Arrival instant.
    """

    leg_id: str
    origin: Location
    destination: Location
    operator: str
    duration_minutes: int
    departure: datetime
    arrival: datetime

    def __post_init__(self) -> None:
        """Validate the declared duration."""
        if self.duration_minutes <= 0:
            raise ValueError(
                f"duration_minutes must be > 0, got {self.duration_minutes}"
            )

    @property
    def label(self) -> str:
        """Display label, e.g. '1 (Garuda)'."""
        return f"{self.leg_id} ({self.operator})"


@dataclass(frozen=True)
class Itinerary:
    """
    One concrete leg per hop of a path.

    Legs are not required to be in chronological order; temporal
    validity is checked separately by the feasibility filter.
    """

    path: Path
    legs: Tuple[Leg, ...]

    def __post_init__(self) -> None:
        """Check that every leg matches its hop."""
        if not self.path:
            raise ValueError("Itinerary path must contain at least one location")
        if len(self.legs) != len(self.path) - 1:
            raise ValueError(
                f"Expected {len(self.path) - 1} legs for path of length "
                f"{len(self.path)}, got {len(self.legs)}"
            )
        for i, leg in enumerate(self.legs):
            if leg.origin != self.path[i] or leg.destination != self.path[i + 1]:
                raise ValueError(
                    f"Leg {leg.leg_id} ({leg.origin}->{leg.destination}) does not "
                    f"match hop {self.path[i]}->{self.path[i + 1]}"
                )

    @property
    def num_hops(self) -> int:
        return len(self.legs)


@dataclass(frozen=True)
class ItinerarySummary:
    """
    Read-only summary of a feasible itinerary.

    Attributes:
        itinerary_id: 1-based sequential identifier within one result.
        path: Ordered locations visited.
        legs: Ordered legs taken.
        total_duration_minutes: Sum of declared leg durations.
        schedule: Ordered (departure, arrival) pairs, one per leg.
    """

    itinerary_id: int
    path: Path
    legs: Tuple[Leg, ...]
    total_duration_minutes: int
    schedule: Tuple[Tuple[datetime, datetime], ...]

    @property
    def path_display(self) -> str:
        """Path as 'JKT → SUB → DPS'."""
        return " → ".join(self.path)

    @property
    def legs_display(self) -> str:
        """Legs as '1 (Garuda), 3 (Citilink)'."""
        return ", ".join(leg.label for leg in self.legs)

    @property
    def schedule_display(self) -> List[str]:
        """Schedule as 'departure - arrival' strings in path order."""
        return [
            f"{format_timestamp(dep)} - {format_timestamp(arr)}"
            for dep, arr in self.schedule
        ]


@dataclass(frozen=True)
class SearchLimits:
    """
    Optional guards against combinatorial blow-up.

    All limits default to None, which keeps the search unbounded.

    Attributes:
        max_paths: Stop after this many paths have been explored.
        max_itineraries: Stop after this many feasible itineraries.
        deadline_seconds: Stop once this much wall-clock time has passed.
    """

    max_paths: Optional[int] = None
    max_itineraries: Optional[int] = None
    deadline_seconds: Optional[float] = None

    @property
    def is_unbounded(self) -> bool:
        return (
            self.max_paths is None
            and self.max_itineraries is None
            and self.deadline_seconds is None
        )


UNBOUNDED = SearchLimits()


@dataclass(frozen=True)
class SearchOutcome:
    """
    Result of one itinerary search.

    Attributes:
        itineraries: Feasible itinerary summaries in enumeration order.
        paths_explored: Number of origin-destination paths processed.
        truncated: True if a SearchLimits guard stopped the search early.
    """

    itineraries: Tuple[ItinerarySummary, ...]
    paths_explored: int
    truncated: bool = False

    @property
    def total(self) -> int:
        return len(self.itineraries)
