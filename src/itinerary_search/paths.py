"""
Simple-path enumeration over the network model.

Depth-first search that yields every path from origin to destination in
which no location repeats. "Visited" means "already on the current
branch", so a region reachable through several ancestors is explored once
per ancestor chain.
"""

import logging
from typing import Callable, Iterator, List, Optional, Set

from .models import Location, Path
from .network import NetworkModel

logger = logging.getLogger(__name__)


def enumerate_paths(
    network: NetworkModel,
    origin: Location,
    destination: Location,
    should_stop: Optional[Callable[[], bool]] = None,
) -> Iterator[Path]:
    """
    Yield every simple path from origin to destination.

    The branch is a single shared sequence with push/pop on descend and
    backtrack, plus a membership set mirroring it. An explicit stack of
    successor iterators replaces recursion, so depth is bounded only by
    the number of locations.

    A path ends as soon as it reaches the destination; the search never
    continues through it.

    Args:
        network: Network built from the catalog.
        origin: Starting location.
        destination: Target location.
        should_stop: Optional check polled before every step; once it
            returns True the search ends without yielding more paths.

    Yields:
        Tuples of locations, first element origin, last element destination.
        Nothing if either endpoint is unknown to the network.

    Example:
        >>> list(enumerate_paths(network, "A", "C"))
        [('A', 'B', 'C')]
    """
    if origin not in network or destination not in network:
        logger.debug("No coverage for %s -> %s", origin, destination)
        return

    if origin == destination:
        yield (origin,)
        return

    branch: List[Location] = [origin]
    on_branch: Set[Location] = {origin}
    stack = [iter(network.successors(origin))]

    while stack:
        if should_stop is not None and should_stop():
            logger.debug("Path search %s -> %s stopped early", origin, destination)
            return

        nxt = next(stack[-1], None)

        if nxt is None:
            # Successors exhausted: backtrack one level
            stack.pop()
            on_branch.discard(branch.pop())
            continue

        if nxt in on_branch:
            continue

        if nxt == destination:
            yield (*branch, nxt)
            continue

        branch.append(nxt)
        on_branch.add(nxt)
        stack.append(iter(network.successors(nxt)))


def hops(path: Path) -> List[tuple]:
    """Adjacent (from, to) pairs of a path."""
    return list(zip(path[:-1], path[1:]))
