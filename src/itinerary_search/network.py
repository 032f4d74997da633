"""
Network model over a leg catalog.

Locations are nodes and legs are directed edges. Parallel legs between
the same pair of locations collapse into a single adjacency entry; the
legs themselves stay in the catalog and are looked up per hop.
"""

from typing import Dict, FrozenSet, Iterable, List, Tuple

from .models import Leg, Location


class NetworkModel:
    """
    Directed multigraph view of the catalog, structural queries only.

    Built once per query. Successors are kept in first-seen catalog order
    so that traversal order is deterministic.

    Example:
        >>> network = NetworkModel.from_legs(catalog.legs)
        >>> network.neighbors("JKT")
        frozenset({'SUB', 'JOG', 'DPS'})
    """

    def __init__(self, adjacency: Dict[Location, Tuple[Location, ...]]) -> None:
        self._successors = adjacency
        self._neighbor_sets = {loc: frozenset(nbrs) for loc, nbrs in adjacency.items()}

    @classmethod
    def from_legs(cls, legs: Iterable[Leg]) -> "NetworkModel":
        """
        Build the network from legs.

        Every origin and destination becomes a node, including locations
        that have no outgoing legs.
        """
        ordered: Dict[Location, List[Location]] = {}
        seen: Dict[Location, set] = {}
        for leg in legs:
            ordered.setdefault(leg.destination, [])
            seen.setdefault(leg.destination, set())
            successors = ordered.setdefault(leg.origin, [])
            known = seen.setdefault(leg.origin, set())
            if leg.destination not in known:
                known.add(leg.destination)
                successors.append(leg.destination)

        return cls({loc: tuple(nbrs) for loc, nbrs in ordered.items()})

    def neighbors(self, location: Location) -> FrozenSet[Location]:
        """Locations reachable by at least one direct leg."""
        return self._neighbor_sets.get(location, frozenset())

    def successors(self, location: Location) -> Tuple[Location, ...]:
        """Same as neighbors(), in first-seen catalog order."""
        return self._successors.get(location, ())

    def has_location(self, location: Location) -> bool:
        return location in self._successors

    @property
    def locations(self) -> FrozenSet[Location]:
        return frozenset(self._successors)

    def __contains__(self, location: object) -> bool:
        return location in self._successors

    def __len__(self) -> int:
        return len(self._successors)
