"""
Search constraints for itinerary queries.
"""

from dataclasses import dataclass
from typing import Optional

from src.itinerary_search.feasibility import DEFAULT_MIN_CONNECTION_MINUTES
from src.itinerary_search.lookup import normalize_operator
from src.itinerary_search.models import SearchLimits
from src.itinerary_search.validation import validate_search_inputs


@dataclass(frozen=True)
class SearchConstraints:
    """
    Immutable, validated itinerary search parameters.

    Frozen to prevent accidental mutation during concurrent access.

    Attributes:
        origin: Starting location code.
        destination: Target location code.
        operator: Optional operator filter (None = any operator).
        min_connection_minutes: Minimum gap between consecutive legs.
        limits: Optional caps and deadline for the search.
    """

    origin: str
    destination: str
    operator: Optional[str] = None
    min_connection_minutes: float = DEFAULT_MIN_CONNECTION_MINUTES
    limits: SearchLimits = SearchLimits()

    def __post_init__(self) -> None:
        """Validate constraints after initialization."""
        if not self.origin:
            raise ValueError("origin cannot be empty")
        if not self.destination:
            raise ValueError("destination cannot be empty")
        validate_search_inputs(self.min_connection_minutes, self.limits)

    @classmethod
    def create(
        cls,
        origin: str,
        destination: str,
        operator: Optional[str] = None,
        min_connection_minutes: Optional[float] = None,
        limits: Optional[SearchLimits] = None,
    ) -> "SearchConstraints":
        """
        Factory method for creating SearchConstraints.

        Strips location codes, drops blank operator filters and fills in
        defaults for omitted values.
        """
        return cls(
            origin=origin.strip(),
            destination=destination.strip(),
            operator=operator.strip() if normalize_operator(operator) else None,
            min_connection_minutes=(
                DEFAULT_MIN_CONNECTION_MINUTES
                if min_connection_minutes is None
                else min_connection_minutes
            ),
            limits=limits or SearchLimits(),
        )

    def with_operator(self, operator: Optional[str]) -> "SearchConstraints":
        """Create new constraints with a different operator filter."""
        return SearchConstraints.create(
            origin=self.origin,
            destination=self.destination,
            operator=operator,
            min_connection_minutes=self.min_connection_minutes,
            limits=self.limits,
        )
