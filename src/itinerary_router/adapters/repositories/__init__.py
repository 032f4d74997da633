"""
Repository adapters for leg catalog caching.
"""

from src.itinerary_router.adapters.repositories.leg_catalog_repo import (
    CachedLegCatalog,
    InMemoryLegCatalogCache,
    LegCatalogRepository,
    build_leg_catalog,
)

__all__ = [
    "CachedLegCatalog",
    "InMemoryLegCatalogCache",
    "LegCatalogRepository",
    "build_leg_catalog",
]
