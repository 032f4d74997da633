"""
Leg Data Provider port interface.

Defines the abstract contract for data sources that provide leg data.
Implementations handle the specifics of each backend (in-memory, SQLite).
"""

from abc import ABC, abstractmethod
from typing import Optional, Set

from src.itinerary_router.schemas.leg import LegDataFrame


class LegDataProvider(ABC):
    """
    Abstract interface for leg data providers.

    Providers return validated DataFrames. Schema validation (LegSchema)
    happens here at the boundary, so malformed rows fail at load time
    rather than in the middle of a search.

    Implementations:
    - StaticLegProvider: in-memory records
    - SQLiteLegProvider: `legs` table in a SQLite database
    """

    @abstractmethod
    def get_legs_df(self, origin: Optional[str] = None) -> LegDataFrame:
        """
        Return legs as a validated DataFrame in catalog order.

        Args:
            origin: Only return legs departing from this location (optional).

        Returns:
            DataFrame validated against LegSchema.

        Raises:
            pandera.errors.SchemaError: If data fails validation.
        """
        ...

    @abstractmethod
    def get_locations(self) -> Set[str]:
        """Return every origin and destination code in the data source."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name of this data provider."""
        ...

    @property
    def is_available(self) -> bool:
        """
        Check if the data source is currently available.

        Default implementation returns True. Override for providers
        backed by external storage.
        """
        return True
