"""
Tests for ItinerarySearchService.

Tests cover:
- Constraint building and defaults
- Delegation to the catalog repository and algorithm adapter
- Error propagation
- Catalog queries and readiness
"""

from unittest.mock import MagicMock

import pytest

from src.itinerary_router.adapters.algorithms import DepthFirstItineraryFinder
from src.itinerary_router.ports.catalog_cache import CatalogNotInitializedError
from src.itinerary_router.ports.itinerary_finder import ItineraryFinder
from src.itinerary_router.services.itinerary_search_service import (
    ItinerarySearchService,
)
from src.itinerary_search.exceptions import InvalidConnectionTimeError
from src.itinerary_search.models import SearchLimits, SearchOutcome


@pytest.fixture
def mock_repo(sample_catalog):
    repo = MagicMock()
    repo.get_catalog.return_value.catalog = sample_catalog
    repo.is_loaded = True
    return repo


@pytest.fixture
def service(mock_repo):
    return ItinerarySearchService(mock_repo, DepthFirstItineraryFinder())


class TestFindItineraries:
    """Tests for ItinerarySearchService.find_itineraries()."""

    def test_returns_outcome(self, service, mock_repo):
        outcome = service.find_itineraries("JKT", "DPS")

        assert isinstance(outcome, SearchOutcome)
        assert outcome.total == 4
        mock_repo.get_catalog.assert_called_once()

    def test_builds_constraints_for_finder(self, mock_repo, sample_catalog):
        finder = MagicMock(spec=ItineraryFinder)
        finder.find_itineraries.return_value = SearchOutcome((), 0)
        service = ItinerarySearchService(mock_repo, finder)

        service.find_itineraries(" JKT ", "DPS", operator="  ", min_connection_minutes=45)

        catalog, constraints = finder.find_itineraries.call_args.args
        assert catalog is sample_catalog
        assert constraints.origin == "JKT"
        assert constraints.operator is None
        assert constraints.min_connection_minutes == 45

    def test_default_threshold(self, mock_repo):
        finder = MagicMock(spec=ItineraryFinder)
        finder.find_itineraries.return_value = SearchOutcome((), 0)
        service = ItinerarySearchService(mock_repo, finder)

        service.find_itineraries("JKT", "DPS")

        _, constraints = finder.find_itineraries.call_args.args
        assert constraints.min_connection_minutes == 60

    def test_default_limits_applied(self, mock_repo):
        service = ItinerarySearchService(
            mock_repo,
            DepthFirstItineraryFinder(),
            default_limits=SearchLimits(max_itineraries=2),
        )

        outcome = service.find_itineraries("JKT", "DPS")

        assert outcome.total == 2
        assert outcome.truncated

    def test_per_call_limits_override_defaults(self, mock_repo):
        service = ItinerarySearchService(
            mock_repo,
            DepthFirstItineraryFinder(),
            default_limits=SearchLimits(max_itineraries=1),
        )

        outcome = service.find_itineraries(
            "JKT", "DPS", limits=SearchLimits(max_itineraries=10)
        )

        assert outcome.total == 4
        assert not outcome.truncated

    def test_negative_threshold_rejected_before_catalog_load(self, service, mock_repo):
        with pytest.raises(InvalidConnectionTimeError):
            service.find_itineraries("JKT", "DPS", min_connection_minutes=-1)
        mock_repo.get_catalog.assert_not_called()

    def test_empty_origin_rejected(self, service):
        with pytest.raises(ValueError):
            service.find_itineraries("", "DPS")

    def test_catalog_failure_propagates(self, service, mock_repo):
        mock_repo.get_catalog.side_effect = CatalogNotInitializedError("boom")
        with pytest.raises(CatalogNotInitializedError):
            service.find_itineraries("JKT", "DPS")

    def test_unknown_location_gives_empty_outcome(self, service):
        assert service.find_itineraries("JKT", "CGK").total == 0


class TestCatalogQueries:
    def test_list_locations(self, service):
        assert service.list_locations() == frozenset({"JKT", "SUB", "JOG", "DPS"})

    def test_list_operators(self, service):
        assert "Sriwijaya" in service.list_operators()

    def test_ready_and_algorithm(self, service, mock_repo):
        assert service.is_ready
        assert service.algorithm_name == "Depth-First Enumeration"

        mock_repo.is_loaded = False
        assert not service.is_ready
