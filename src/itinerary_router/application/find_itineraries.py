"""
FindItineraries Use Case - Public API for itinerary search.

Acts as a Facade/Factory: wires the data provider, catalog repository,
algorithm adapter and service, and exposes a small interface to the
transport layer.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from datetime import timedelta
from pathlib import Path
from typing import FrozenSet, Optional, Union

from src.itinerary_router.adapters.algorithms.depth_first_finder import (
    DepthFirstItineraryFinder,
)
from src.itinerary_router.adapters.data_providers.sqlite_provider import (
    SQLiteLegProvider,
)
from src.itinerary_router.adapters.data_providers.static_provider import (
    StaticLegProvider,
)
from src.itinerary_router.adapters.repositories.leg_catalog_repo import (
    InMemoryLegCatalogCache,
    LegCatalogRepository,
)
from src.itinerary_router.config import Settings
from src.itinerary_router.ports.itinerary_finder import ItineraryFinder
from src.itinerary_router.ports.leg_data_provider import LegDataProvider
from src.itinerary_router.services.itinerary_search_service import (
    ItinerarySearchService,
)
from src.itinerary_search.models import SearchLimits, SearchOutcome

logger = logging.getLogger(__name__)


class FindItineraries:
    """
    Public API for finding feasible itineraries.

    Example usage:
        >>> with FindItineraries() as finder:
        ...     outcome = finder.search("JKT", "DPS", operator="garuda")
        ...     for summary in outcome.itineraries:
        ...         print(summary.path_display, summary.total_duration_minutes)

    Attributes:
        _settings: Defaults for connection time, limits and caching.
        _service: Underlying ItinerarySearchService.
        _catalog_repo: Catalog repository (for refresh and shutdown).
    """

    def __init__(
        self,
        db_path: Optional[Union[str, Path]] = None,
        data_provider: Optional[LegDataProvider] = None,
        finder: Optional[ItineraryFinder] = None,
        settings: Optional[Settings] = None,
        auto_refresh: bool = True,
    ) -> None:
        """
        Initialize the facade with optional custom dependencies.

        Args:
            db_path: SQLite database with a legs table. Ignored when
                data_provider is given.
            data_provider: Custom provider. If None and no db_path is
                available, the static sample schedule is served.
            finder: Custom algorithm. Defaults to DepthFirstItineraryFinder.
            settings: Search and cache defaults. Defaults to Settings().
            auto_refresh: Refresh the catalog in the background when stale.
        """
        self._settings = settings or Settings()

        if data_provider is not None:
            self._data_provider = data_provider
        else:
            db_path = db_path or self._settings.db_path
            if db_path is not None:
                self._data_provider = SQLiteLegProvider(db_path=db_path)
            else:
                self._data_provider = StaticLegProvider()

        self._cache = InMemoryLegCatalogCache(
            ttl=timedelta(minutes=self._settings.cache_ttl_minutes)
        )
        self._catalog_repo = LegCatalogRepository(
            data_provider=self._data_provider,
            cache=self._cache,
            auto_refresh=auto_refresh,
        )

        self._finder = finder or DepthFirstItineraryFinder()

        self._service = ItinerarySearchService(
            catalog_repo=self._catalog_repo,
            finder=self._finder,
            default_limits=self._settings.search_limits,
        )

        logger.info(
            "FindItineraries initialized with %s provider and %s algorithm",
            self._data_provider.name,
            self._finder.name,
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "FindItineraries":
        """Build a facade from environment settings."""
        return cls(settings=settings or Settings.from_env())

    def search(
        self,
        origin: str,
        destination: str,
        operator: Optional[str] = None,
        min_connection_minutes: Optional[float] = None,
        limits: Optional[SearchLimits] = None,
    ) -> SearchOutcome:
        """
        Search for feasible itineraries.

        Args:
            origin: Origin location code.
            destination: Destination location code.
            operator: Optional case-insensitive operator filter.
            min_connection_minutes: Minimum connection time. Defaults to
                the configured value.
            limits: Optional caps and deadline. Defaults to the
                configured limits.

        Returns:
            SearchOutcome with numbered itinerary summaries.
        """
        if min_connection_minutes is None:
            min_connection_minutes = self._settings.min_connection_minutes

        return self._service.find_itineraries(
            origin=origin,
            destination=destination,
            operator=operator,
            min_connection_minutes=min_connection_minutes,
            limits=limits,
        )

    def list_locations(self) -> FrozenSet[str]:
        """All location codes in the catalog."""
        return self._service.list_locations()

    def list_operators(self) -> FrozenSet[str]:
        """All operator names in the catalog."""
        return self._service.list_operators()

    @property
    def is_ready(self) -> bool:
        return self._service.is_ready

    @property
    def algorithm_name(self) -> str:
        return self._service.algorithm_name

    @property
    def catalog_version(self) -> Optional[str]:
        return self._catalog_repo.loaded_version

    def refresh_data(self) -> Future:
        """Reload the leg catalog in the background."""
        return self._catalog_repo.refresh_catalog()

    def shutdown(self) -> None:
        """
        Clean shutdown.

        Stops the refresh thread and closes the data provider if it holds
        a connection.
        """
        self._catalog_repo.shutdown()
        if hasattr(self._data_provider, "close"):
            self._data_provider.close()
        logger.info("FindItineraries shutdown complete")

    def __enter__(self) -> "FindItineraries":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()
