"""
Read-only leg catalog.

The catalog is owned by the caller and passed into every search. It is
never mutated after construction, so a single instance can be shared by
concurrent queries without locking.
"""

from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Tuple

from .models import Leg, Location


@dataclass(frozen=True)
class LegCatalog:
    """
    Immutable, ordered collection of legs.

    Keeps legs in catalog order and a per-origin grouping that preserves
    that order, so hop lookups only scan legs leaving one location.

    Attributes:
        legs: All legs in catalog order.
    """

    legs: Tuple[Leg, ...]
    _by_origin: Mapping[Location, Tuple[Leg, ...]] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Build the per-origin grouping."""
        grouped: Dict[Location, List[Leg]] = {}
        for leg in self.legs:
            grouped.setdefault(leg.origin, []).append(leg)
        object.__setattr__(
            self,
            "_by_origin",
            MappingProxyType({k: tuple(v) for k, v in grouped.items()}),
        )

    @classmethod
    def from_legs(cls, legs: Iterable[Leg]) -> "LegCatalog":
        return cls(legs=tuple(legs))

    def legs_from(self, origin: Location) -> Tuple[Leg, ...]:
        """Legs departing from origin, in catalog order."""
        return self._by_origin.get(origin, ())

    @cached_property
    def locations(self) -> FrozenSet[Location]:
        """Every location seen as an origin or destination."""
        return frozenset(
            loc for leg in self.legs for loc in (leg.origin, leg.destination)
        )

    @cached_property
    def operators(self) -> FrozenSet[str]:
        """Distinct operator names."""
        return frozenset(leg.operator for leg in self.legs)

    def __len__(self) -> int:
        return len(self.legs)

    def __iter__(self):
        return iter(self.legs)
