"""
Data provider adapters for leg catalogs.
"""

from src.itinerary_router.adapters.data_providers.sqlite_provider import (
    SQLiteLegProvider,
    write_legs,
)
from src.itinerary_router.adapters.data_providers.static_provider import (
    SAMPLE_LEGS,
    StaticLegProvider,
)

__all__ = ["SAMPLE_LEGS", "SQLiteLegProvider", "StaticLegProvider", "write_legs"]
