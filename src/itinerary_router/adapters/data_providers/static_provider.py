"""
Static Leg Provider - in-memory records to DataFrame adapter.

Serves a fixed list of leg records. Without arguments it serves the
sample JKT/SUB/JOG/DPS schedule used by the demo API.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Set

import pandas as pd

from src.itinerary_router.ports.leg_data_provider import LegDataProvider
from src.itinerary_router.schemas.leg import LEG_COLUMNS, LegDataFrame, LegSchema

logger = logging.getLogger(__name__)

# Sample schedule. Leg 7 carries an arrival before its departure on
# purpose: totals use the declared duration, not timestamp arithmetic.
SAMPLE_LEGS: List[Dict[str, Any]] = [
    {"leg_id": "1", "origin": "JKT", "destination": "SUB", "operator": "Garuda", "duration_minutes": 90, "departure": "2024-12-08T06:00:00Z", "arrival": "2024-12-08T07:01:00Z"},
    {"leg_id": "2", "origin": "JKT", "destination": "JOG", "operator": "Lion", "duration_minutes": 85, "departure": "2024-12-08T06:30:00Z", "arrival": "2024-12-08T08:00:00Z"},
    {"leg_id": "3", "origin": "SUB", "destination": "DPS", "operator": "Citilink", "duration_minutes": 70, "departure": "2024-12-08T08:00:00Z", "arrival": "2024-12-08T09:00:00Z"},
    {"leg_id": "4", "origin": "JOG", "destination": "DPS", "operator": "AirAsia", "duration_minutes": 110, "departure": "2024-12-08T11:00:00Z", "arrival": "2024-12-08T12:30:00Z"},
    {"leg_id": "5", "origin": "SUB", "destination": "JOG", "operator": "Sriwijaya", "duration_minutes": 120, "departure": "2024-12-08T09:00:00Z", "arrival": "2024-12-08T09:45:00Z"},
    {"leg_id": "6", "origin": "JKT", "destination": "SUB", "operator": "Batik", "duration_minutes": 75, "departure": "2024-12-08T07:00:00Z", "arrival": "2024-12-08T08:00:00Z"},
    {"leg_id": "7", "origin": "JKT", "destination": "DPS", "operator": "Garuda", "duration_minutes": 200, "departure": "2024-12-08T06:45:00Z", "arrival": "2023-10-02T09:45:00Z"},
    {"leg_id": "8", "origin": "JOG", "destination": "JKT", "operator": "Lion", "duration_minutes": 80, "departure": "2024-12-08T08:30:00Z", "arrival": "2024-12-08T10:10:00Z"},
]


class StaticLegProvider(LegDataProvider):
    """
    Data provider backed by a list of record dicts.

    Records are copied on construction, so later changes to the caller's
    list do not leak into the catalog.

    Attributes:
        _records: Leg records in catalog order.
    """

    def __init__(self, records: Optional[Sequence[Dict[str, Any]]] = None) -> None:
        """
        Args:
            records: Leg records with LegSchema columns. Defaults to SAMPLE_LEGS.
        """
        source = SAMPLE_LEGS if records is None else records
        self._records: List[Dict[str, Any]] = [dict(r) for r in source]

    def get_legs_df(self, origin: Optional[str] = None) -> LegDataFrame:
        """Build and validate a DataFrame from the stored records."""
        df = pd.DataFrame(self._records, columns=None if self._records else LEG_COLUMNS)

        if origin:
            df = df[df["origin"] == origin].reset_index(drop=True)

        validated = LegSchema.validate(df)
        logger.debug("Serving %d static legs", len(validated))
        return validated

    def get_locations(self) -> Set[str]:
        return {r["origin"] for r in self._records} | {
            r["destination"] for r in self._records
        }

    @property
    def name(self) -> str:
        return "Static"
