"""
Leg combination expansion.

Turns per-hop candidate lists into concrete leg sequences, one leg per
hop, in hop order. The first hop varies slowest.

Both expanders accept an optional `should_stop` check, polled before
every step, so a wall-clock deadline can end an expansion even while it
is producing nothing.
"""

import itertools
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

from .feasibility import is_connection_feasible, validate_min_connection
from .models import Leg

Combination = Tuple[Leg, ...]

StopCheck = Callable[[], bool]


def expand_combinations(
    candidates_per_hop: Sequence[Sequence[Leg]],
    should_stop: Optional[StopCheck] = None,
) -> Iterator[Combination]:
    """
    Yield the Cartesian product of the per-hop candidates.

    Zero hops yields a single empty combination. If any hop has no
    candidates nothing is yielded.

    Args:
        candidates_per_hop: One list of candidate legs per hop.
        should_stop: Optional check; once it returns True no further
            combinations are yielded.

    Yields:
        Tuples with exactly one leg per hop.
    """
    if any(len(candidates) == 0 for candidates in candidates_per_hop):
        return

    for combo in itertools.product(*candidates_per_hop):
        if should_stop is not None and should_stop():
            return
        yield combo


def expand_feasible(
    candidates_per_hop: Sequence[Sequence[Leg]],
    min_connection_minutes: float,
    should_stop: Optional[StopCheck] = None,
) -> Iterator[Combination]:
    """
    Yield only combinations that satisfy the connection rule.

    Produces the same combinations, in the same order, as filtering
    expand_combinations() with is_feasible(), but drops a partial
    combination at the first violating connection instead of building
    every completion of it.

    Args:
        candidates_per_hop: One list of candidate legs per hop.
        min_connection_minutes: Minimum connection time between legs.
        should_stop: Optional check; once it returns True the expansion
            ends, including while every partial combination is failing.

    Yields:
        Feasible tuples with exactly one leg per hop.

    Raises:
        InvalidConnectionTimeError: If the threshold is negative or not finite.
    """
    validate_min_connection(min_connection_minutes)

    if any(len(candidates) == 0 for candidates in candidates_per_hop):
        return

    num_hops = len(candidates_per_hop)
    if num_hops == 0:
        yield ()
        return

    chosen: List[Leg] = []
    stack = [iter(candidates_per_hop[0])]

    while stack:
        if should_stop is not None and should_stop():
            return

        leg = next(stack[-1], None)

        if leg is None:
            stack.pop()
            if chosen:
                chosen.pop()
            continue

        if chosen and not is_connection_feasible(
            chosen[-1], leg, min_connection_minutes
        ):
            continue

        if len(chosen) + 1 == num_hops:
            yield (*chosen, leg)
            continue

        chosen.append(leg)
        stack.append(iter(candidates_per_hop[len(chosen)]))
