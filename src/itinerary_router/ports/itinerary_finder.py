"""
Itinerary Finder port interface.

Defines the abstract contract for itinerary search algorithms.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.itinerary_router.schemas.constraints import SearchConstraints
    from src.itinerary_search.catalog import LegCatalog
    from src.itinerary_search.models import SearchOutcome


class ItineraryFinder(ABC):
    """
    Abstract interface for itinerary search algorithms.

    Implementations:
    - DepthFirstItineraryFinder: exhaustive simple-path enumeration
    """

    @abstractmethod
    def find_itineraries(
        self,
        catalog: LegCatalog,
        constraints: SearchConstraints,
    ) -> SearchOutcome:
        """
        Find feasible itineraries in the catalog.

        Args:
            catalog: Read-only leg catalog.
            constraints: Validated search parameters.

        Returns:
            SearchOutcome with numbered itinerary summaries.
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable algorithm name."""
        ...
