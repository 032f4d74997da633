"""
Schema definitions for the Itinerary Router.

Pandera-validated DataFrames for the leg catalog, plus the immutable
search and result types shared with the search core.
"""

from src.itinerary_search.catalog import LegCatalog
from src.itinerary_search.models import (
    Itinerary,
    ItinerarySummary,
    Leg,
    SearchLimits,
    SearchOutcome,
)

from .constraints import SearchConstraints
from .leg import LEG_COLUMNS, LegDataFrame, LegSchema

__all__ = [
    # Catalog schemas
    "LEG_COLUMNS",
    "LegSchema",
    "LegDataFrame",
    "LegCatalog",
    "Leg",
    # Constraints
    "SearchConstraints",
    "SearchLimits",
    # Result types
    "Itinerary",
    "ItinerarySummary",
    "SearchOutcome",
]
