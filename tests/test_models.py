"""
Tests for core data types and the leg catalog.
"""

from dataclasses import FrozenInstanceError

import pytest

from src.itinerary_search.catalog import LegCatalog
from src.itinerary_search.models import Itinerary, SearchLimits, SearchOutcome


class TestLeg:
    def test_label(self, make_leg):
        assert make_leg("42", "A", "B", operator="Lion").label == "42 (Lion)"

    @pytest.mark.parametrize("duration", [0, -10])
    def test_non_positive_duration_rejected(self, make_leg, duration):
        with pytest.raises(ValueError, match="duration_minutes"):
            make_leg("1", "A", "B", duration_minutes=duration)

    def test_frozen(self, make_leg):
        leg = make_leg("1", "A", "B")
        with pytest.raises(FrozenInstanceError):
            leg.origin = "C"


class TestItinerary:
    def test_leg_count_must_match_path(self, make_leg):
        with pytest.raises(ValueError, match="Expected 2 legs"):
            Itinerary(path=("A", "B", "C"), legs=(make_leg("1", "A", "B"),))

    def test_leg_must_match_hop(self, make_leg):
        with pytest.raises(ValueError, match="does not match hop"):
            Itinerary(path=("A", "C"), legs=(make_leg("1", "A", "B"),))

    def test_empty_path_rejected(self):
        with pytest.raises(ValueError):
            Itinerary(path=(), legs=())

    def test_num_hops(self, chain_catalog):
        itinerary = Itinerary(path=("A", "B", "C"), legs=chain_catalog.legs)
        assert itinerary.num_hops == 2


class TestLegCatalog:
    """Tests for LegCatalog."""

    def test_legs_from_keeps_catalog_order(self, make_leg):
        catalog = LegCatalog.from_legs(
            [
                make_leg("1", "A", "B"),
                make_leg("2", "B", "C"),
                make_leg("3", "A", "C"),
            ]
        )
        assert [leg.leg_id for leg in catalog.legs_from("A")] == ["1", "3"]
        assert catalog.legs_from("C") == ()

    def test_locations_include_destinations(self, chain_catalog):
        assert chain_catalog.locations == frozenset({"A", "B", "C"})

    def test_operators(self, chain_catalog):
        assert chain_catalog.operators == frozenset({"Garuda"})

    def test_len_and_iter(self, chain_catalog):
        assert len(chain_catalog) == 2
        assert [leg.leg_id for leg in chain_catalog] == ["1", "2"]

    def test_equal_catalogs(self, chain_catalog):
        assert LegCatalog.from_legs(chain_catalog.legs) == chain_catalog


class TestSearchTypes:
    def test_limits_unbounded(self):
        assert SearchLimits().is_unbounded
        assert not SearchLimits(max_paths=10).is_unbounded

    def test_outcome_total(self):
        assert SearchOutcome(itineraries=(), paths_explored=0).total == 0
