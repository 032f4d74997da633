"""
Itinerary search pipeline.

Single parameterized entry point chaining the network model, path
enumeration, per-hop leg lookup, combination expansion, the feasibility
filter and aggregation. Each call builds its own network and traversal
state; the catalog is only read.

The search is unbounded by default. Dense catalogs with many parallel
legs and long paths can produce a combinatorial number of itineraries;
pass SearchLimits to cap paths, itineraries or wall-clock time.
"""

import logging
import time
from typing import FrozenSet, Iterator, List, Optional, Sequence

from .aggregate import summarize
from .catalog import LegCatalog
from .combinations import Combination, expand_combinations, expand_feasible
from .feasibility import DEFAULT_MIN_CONNECTION_MINUTES, is_feasible
from .lookup import legs_between
from .models import (
    UNBOUNDED,
    Itinerary,
    ItinerarySummary,
    Leg,
    Location,
    SearchLimits,
    SearchOutcome,
)
from .network import NetworkModel
from .paths import enumerate_paths, hops
from .validation import validate_search_inputs

logger = logging.getLogger(__name__)


class _Deadline:
    """
    Wall-clock stop check shared by path search and expansion.

    Remembers that it fired, so the caller can tell a deadline stop from
    a search that simply ran out of work.
    """

    def __init__(self, seconds: Optional[float]) -> None:
        self._at = None if seconds is None else time.monotonic() + seconds
        self.expired = False

    def __call__(self) -> bool:
        if not self.expired and self._at is not None:
            self.expired = time.monotonic() >= self._at
        return self.expired


def _expand(
    candidates: Sequence[Sequence[Leg]],
    min_connection_minutes: float,
    prune: bool,
    should_stop: _Deadline,
) -> Iterator[Combination]:
    if prune:
        return expand_feasible(candidates, min_connection_minutes, should_stop)
    return (
        combo
        for combo in expand_combinations(candidates, should_stop)
        if is_feasible(combo, min_connection_minutes)
    )


def search_itineraries(
    catalog: LegCatalog,
    origin: Location,
    destination: Location,
    operator: Optional[str] = None,
    min_connection_minutes: float = DEFAULT_MIN_CONNECTION_MINUTES,
    limits: Optional[SearchLimits] = None,
    prune: bool = True,
) -> SearchOutcome:
    """
    Enumerate every feasible itinerary from origin to destination.

    Args:
        catalog: Read-only leg catalog.
        origin: Starting location.
        destination: Target location.
        operator: Optional case-insensitive operator filter applied to
            every hop.
        min_connection_minutes: Minimum gap between consecutive legs.
        limits: Optional caps and deadline. None means unbounded.
        prune: If True, drop partial itineraries at the first connection
            violation. If False, build every combination and filter
            afterwards. Both give identical results.

    Returns:
        SearchOutcome with summaries numbered from 1 in enumeration order.
        Unknown endpoints or missing paths give an empty outcome.

    Raises:
        InvalidConnectionTimeError: If min_connection_minutes is negative
            or not finite.
        InvalidSearchLimitError: If a limit is not a positive finite number.
    """
    validate_search_inputs(min_connection_minutes, limits)
    limits = limits or UNBOUNDED

    deadline = _Deadline(limits.deadline_seconds)

    network = NetworkModel.from_legs(catalog.legs)

    summaries: List[ItinerarySummary] = []
    paths_explored = 0
    truncated = False

    for path in enumerate_paths(network, origin, destination, should_stop=deadline):
        if limits.max_paths is not None and paths_explored >= limits.max_paths:
            truncated = True
            break

        paths_explored += 1
        candidates = [legs_between(catalog, a, b, operator) for a, b in hops(path)]

        for legs in _expand(candidates, min_connection_minutes, prune, deadline):
            if (
                limits.max_itineraries is not None
                and len(summaries) >= limits.max_itineraries
            ):
                truncated = True
                break
            summaries.append(
                summarize(Itinerary(path=path, legs=legs), len(summaries) + 1)
            )

        if truncated:
            break

    if deadline.expired:
        truncated = True

    if truncated:
        logger.warning(
            "Search %s -> %s truncated after %d paths and %d itineraries (%s)",
            origin,
            destination,
            paths_explored,
            len(summaries),
            limits,
        )
    else:
        logger.debug(
            "Search %s -> %s: %d itineraries over %d paths",
            origin,
            destination,
            len(summaries),
            paths_explored,
        )

    return SearchOutcome(
        itineraries=tuple(summaries),
        paths_explored=paths_explored,
        truncated=truncated,
    )


def enumerate_feasible_itineraries(
    catalog: LegCatalog,
    origin: Location,
    destination: Location,
    operator: Optional[str] = None,
    min_connection_minutes: float = DEFAULT_MIN_CONNECTION_MINUTES,
    limits: Optional[SearchLimits] = None,
) -> List[ItinerarySummary]:
    """Summaries of every feasible itinerary; see search_itineraries()."""
    outcome = search_itineraries(
        catalog,
        origin,
        destination,
        operator=operator,
        min_connection_minutes=min_connection_minutes,
        limits=limits,
    )
    return list(outcome.itineraries)


def list_locations(catalog: LegCatalog) -> FrozenSet[Location]:
    """Distinct origins and destinations in the catalog."""
    return catalog.locations


def list_operators(catalog: LegCatalog) -> FrozenSet[str]:
    """Distinct operator names in the catalog."""
    return catalog.operators
