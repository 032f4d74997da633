"""
Leg catalog cache port interface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from src.itinerary_router.adapters.repositories.leg_catalog_repo import (
        CachedLegCatalog,
    )


class CatalogNotInitializedError(Exception):
    """Raised when the catalog cannot be loaded on first access."""

    pass


@runtime_checkable
class LegCatalogCache(Protocol):
    """
    Protocol for leg catalog caches.

    Implementations must be thread-safe; snapshots are immutable and are
    handed out by reference.
    """

    def get(self) -> Optional[CachedLegCatalog]:
        """Return the cached snapshot, or None on a miss."""
        ...

    def set(self, snapshot: CachedLegCatalog) -> None:
        """Store a snapshot, replacing any previous one."""
        ...

    @property
    def is_stale(self) -> bool:
        """True if the cache is empty or its TTL has expired."""
        ...
