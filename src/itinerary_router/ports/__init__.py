"""
Port interfaces for the Itinerary Router.

Ports define the abstract interfaces (ABCs and Protocols) that the
service layer uses to talk to data sources, caches and algorithms.
"""

from src.itinerary_router.ports.catalog_cache import (
    CatalogNotInitializedError,
    LegCatalogCache,
)
from src.itinerary_router.ports.itinerary_finder import ItineraryFinder
from src.itinerary_router.ports.leg_data_provider import LegDataProvider

__all__ = [
    "CatalogNotInitializedError",
    "ItineraryFinder",
    "LegCatalogCache",
    "LegDataProvider",
]
