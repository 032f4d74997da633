"""
Itinerary Search Service - Domain orchestrator for itinerary queries.

Coordinates the interaction between:
- LegCatalogRepository (cached leg catalog)
- ItineraryFinder (algorithm adapter)
- SearchConstraints (validated search parameters)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, FrozenSet, Optional

from src.itinerary_router.schemas.constraints import SearchConstraints
from src.itinerary_search.models import SearchLimits, SearchOutcome
from src.itinerary_search.pipeline import list_locations, list_operators

if TYPE_CHECKING:
    from src.itinerary_router.adapters.repositories.leg_catalog_repo import (
        LegCatalogRepository,
    )
    from src.itinerary_router.ports.itinerary_finder import ItineraryFinder

logger = logging.getLogger(__name__)


class ItinerarySearchService:
    """
    Domain service for finding feasible itineraries.

    Orchestrates a search:
    1. Validates and normalizes input constraints
    2. Retrieves the cached leg catalog (non-blocking after warm-up)
    3. Delegates enumeration to the algorithm adapter
    4. Logs timings

    The service holds no per-query state and is safe to share between
    threads.

    Attributes:
        _catalog_repo: Repository providing catalog snapshots.
        _finder: Algorithm adapter.
        _default_limits: Limits applied when a query does not pass its own.
    """

    def __init__(
        self,
        catalog_repo: LegCatalogRepository,
        finder: ItineraryFinder,
        default_limits: Optional[SearchLimits] = None,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._finder = finder
        self._default_limits = default_limits or SearchLimits()

    def find_itineraries(
        self,
        origin: str,
        destination: str,
        operator: Optional[str] = None,
        min_connection_minutes: Optional[float] = None,
        limits: Optional[SearchLimits] = None,
    ) -> SearchOutcome:
        """
        Find every feasible itinerary from origin to destination.

        Args:
            origin: Origin location code (e.g. 'JKT').
            destination: Destination location code.
            operator: Optional case-insensitive operator filter.
            min_connection_minutes: Minimum connection time (default 60).
            limits: Optional caps and deadline; falls back to the
                service's default limits.

        Returns:
            SearchOutcome with numbered itinerary summaries.

        Raises:
            ValueError: If origin or destination is empty.
            ValidationError: If the connection time or limits are invalid.
            CatalogNotInitializedError: If the catalog cannot be loaded.
        """
        start_time = time.perf_counter()

        constraints = SearchConstraints.create(
            origin=origin,
            destination=destination,
            operator=operator,
            min_connection_minutes=min_connection_minutes,
            limits=limits or self._default_limits,
        )

        logger.debug(
            "Search constraints: origin=%s, destination=%s, operator=%s, "
            "min_connection=%.0f",
            constraints.origin,
            constraints.destination,
            constraints.operator,
            constraints.min_connection_minutes,
        )

        catalog_start = time.perf_counter()
        snapshot = self._catalog_repo.get_catalog()
        catalog_time = time.perf_counter() - catalog_start

        algo_start = time.perf_counter()
        outcome = self._finder.find_itineraries(snapshot.catalog, constraints)
        algo_time = time.perf_counter() - algo_start

        total_time = time.perf_counter() - start_time

        logger.info(
            "Itinerary search %s -> %s completed: %d itineraries over %d paths "
            "in %.3fms (catalog: %.3fms, algo: %.3fms)%s",
            constraints.origin,
            constraints.destination,
            outcome.total,
            outcome.paths_explored,
            total_time * 1000,
            catalog_time * 1000,
            algo_time * 1000,
            " [truncated]" if outcome.truncated else "",
        )

        return outcome

    def list_locations(self) -> FrozenSet[str]:
        """Every origin and destination in the catalog."""
        return list_locations(self._catalog_repo.get_catalog().catalog)

    def list_operators(self) -> FrozenSet[str]:
        """Every operator name in the catalog."""
        return list_operators(self._catalog_repo.get_catalog().catalog)

    @property
    def algorithm_name(self) -> str:
        return self._finder.name

    @property
    def is_ready(self) -> bool:
        return self._catalog_repo.is_loaded
