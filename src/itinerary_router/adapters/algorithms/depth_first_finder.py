"""
Depth-first itinerary finder - bridge between the router and the search core.
"""

import logging

from src.itinerary_router.ports.itinerary_finder import ItineraryFinder
from src.itinerary_router.schemas.constraints import SearchConstraints
from src.itinerary_search.catalog import LegCatalog
from src.itinerary_search.models import SearchOutcome
from src.itinerary_search.pipeline import search_itineraries

logger = logging.getLogger(__name__)


class DepthFirstItineraryFinder(ItineraryFinder):
    """
    Exhaustive simple-path search with per-hop leg expansion.

    Attributes:
        _prune: If True, partial itineraries are dropped at the first
            connection violation; otherwise every combination is built
            and filtered afterwards. Results are identical either way.
    """

    def __init__(self, prune_during_expansion: bool = True) -> None:
        self._prune = prune_during_expansion

    @property
    def name(self) -> str:
        return "Depth-First Enumeration"

    def find_itineraries(
        self,
        catalog: LegCatalog,
        constraints: SearchConstraints,
    ) -> SearchOutcome:
        """
        Run the search core with the given constraints.

        Args:
            catalog: Read-only leg catalog.
            constraints: Validated search parameters.

        Returns:
            SearchOutcome from the core pipeline.
        """
        outcome = search_itineraries(
            catalog,
            constraints.origin,
            constraints.destination,
            operator=constraints.operator,
            min_connection_minutes=constraints.min_connection_minutes,
            limits=constraints.limits,
            prune=self._prune,
        )

        logger.debug(
            "%s found %d itineraries for %s -> %s (operator=%s)",
            self.name,
            outcome.total,
            constraints.origin,
            constraints.destination,
            constraints.operator,
        )
        return outcome
