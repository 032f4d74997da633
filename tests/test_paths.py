"""
Tests for simple-path enumeration.

Tests cover:
- Branch-local visited set (regions reachable through several ancestors)
- Cycles
- Unknown endpoints and the trivial origin == destination path
- Deterministic order
- Early stop through a caller-supplied check
"""

from src.itinerary_search.network import NetworkModel
from src.itinerary_search.paths import enumerate_paths, hops


def _network(*edges):
    adjacency = {}
    for origin, destination in edges:
        adjacency.setdefault(origin, [])
        adjacency.setdefault(destination, [])
        adjacency[origin].append(destination)
    return NetworkModel({k: tuple(v) for k, v in adjacency.items()})


class TestEnumeratePaths:
    """Tests for enumerate_paths()."""

    def test_single_chain(self):
        network = _network(("A", "B"), ("B", "C"))
        assert list(enumerate_paths(network, "A", "C")) == [("A", "B", "C")]

    def test_diamond_yields_both_branches(self):
        """D is reachable through B and C; both paths are produced."""
        network = _network(("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"))

        paths = list(enumerate_paths(network, "A", "D"))

        assert paths == [("A", "B", "D"), ("A", "C", "D")]

    def test_shared_region_explored_per_ancestor_chain(self):
        """X -> E is found from both B and C, not only the first time X is seen."""
        network = _network(
            ("A", "B"), ("A", "C"), ("B", "X"), ("C", "X"), ("X", "E")
        )

        paths = list(enumerate_paths(network, "A", "E"))

        assert paths == [("A", "B", "X", "E"), ("A", "C", "X", "E")]

    def test_cycle_does_not_repeat_locations(self):
        network = _network(("A", "B"), ("B", "A"), ("B", "C"), ("C", "A"))

        paths = list(enumerate_paths(network, "A", "C"))

        assert paths == [("A", "B", "C")]
        for path in paths:
            assert len(path) == len(set(path))

    def test_path_stops_at_destination(self):
        """The search never continues through the destination."""
        network = _network(("A", "B"), ("B", "C"), ("A", "C"))

        paths = list(enumerate_paths(network, "A", "B"))

        assert paths == [("A", "B")]

    def test_origin_equals_destination(self):
        network = _network(("A", "B"))
        assert list(enumerate_paths(network, "A", "A")) == [("A",)]

    def test_unknown_origin(self):
        network = _network(("A", "B"))
        assert list(enumerate_paths(network, "Z", "B")) == []

    def test_unknown_destination(self):
        network = _network(("A", "B"))
        assert list(enumerate_paths(network, "A", "Z")) == []

    def test_unreachable_destination(self):
        network = _network(("A", "B"), ("C", "D"))
        assert list(enumerate_paths(network, "A", "D")) == []

    def test_sample_network_order(self, sample_catalog):
        network = NetworkModel.from_legs(sample_catalog.legs)

        paths = list(enumerate_paths(network, "JKT", "DPS"))

        assert paths == [
            ("JKT", "SUB", "DPS"),
            ("JKT", "SUB", "JOG", "DPS"),
            ("JKT", "JOG", "DPS"),
            ("JKT", "DPS"),
        ]

    def test_deep_chain_does_not_recurse(self):
        """A long chain is walked without hitting the recursion limit."""
        names = [f"L{i}" for i in range(3000)]
        network = _network(*zip(names[:-1], names[1:]))

        paths = list(enumerate_paths(network, names[0], names[-1]))

        assert paths == [tuple(names)]

    def test_repeated_calls_are_independent(self):
        network = _network(("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"))

        first = list(enumerate_paths(network, "A", "D"))
        second = list(enumerate_paths(network, "A", "D"))

        assert first == second


    def test_stop_check_before_first_step(self):
        network = _network(("A", "B"), ("B", "C"))
        assert list(enumerate_paths(network, "A", "C", should_stop=lambda: True)) == []

    def test_stop_check_ends_search_early(self):
        network = _network(
            ("A", "B"), ("A", "C"), ("A", "D"),
            ("B", "E"), ("C", "E"), ("D", "E"),
        )
        calls = []

        def stop_after_first_path():
            calls.append(None)
            return len(calls) > 2

        paths = list(enumerate_paths(network, "A", "E", should_stop=stop_after_first_path))

        assert paths == [("A", "B", "E")]
        assert len(calls) == 3


class TestHops:
    def test_hops(self):
        assert hops(("A", "B", "C")) == [("A", "B"), ("B", "C")]

    def test_trivial_path_has_no_hops(self):
        assert hops(("A",)) == []
