"""
Leg lookup between adjacent locations.
"""

from typing import List, Optional

from .catalog import LegCatalog
from .models import Leg, Location


def normalize_operator(operator: Optional[str]) -> Optional[str]:
    """Casefold an operator filter; empty or blank means no filter."""
    if operator is None or not operator.strip():
        return None
    return operator.strip().casefold()


def legs_between(
    catalog: LegCatalog,
    origin: Location,
    destination: Location,
    operator: Optional[str] = None,
) -> List[Leg]:
    """
    Return legs from origin to destination in catalog order.

    Args:
        catalog: Leg catalog to search.
        origin: Hop start.
        destination: Hop end.
        operator: Optional operator name, compared case-insensitively.

    Returns:
        Matching legs. An empty list means the hop has no viable legs.
    """
    wanted = normalize_operator(operator)
    return [
        leg
        for leg in catalog.legs_from(origin)
        if leg.destination == destination
        and (wanted is None or leg.operator.casefold() == wanted)
    ]
