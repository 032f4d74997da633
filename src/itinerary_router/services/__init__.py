"""
Domain services for the Itinerary Router.

Services orchestrate the interaction between ports (repositories,
algorithms) and the search core.
"""

from src.itinerary_router.services.itinerary_search_service import (
    ItinerarySearchService,
)

__all__ = ["ItinerarySearchService"]
