"""
Leg catalog schema using Pandera.

Defines the tabular contract for leg data handed over by providers.
Schema validation happens at the provider boundary, not per-row.
"""

import pandas as pd
import pandera as pa
from pandera.typing import DataFrame, Series


class LegSchema(pa.DataFrameModel):
    """
    Contract for the leg catalog.

    Every provider must supply these columns. Extra columns are allowed
    and preserved. Timestamps stay as strings here and are parsed into
    timezone-aware instants when the catalog is built; the checks below
    make unparseable timestamps fail at load time.
    """

    leg_id: Series[str] = pa.Field(
        nullable=False,
        description="Leg identifier (e.g. flight number)",
    )
    origin: Series[str] = pa.Field(
        nullable=False,
        description="Departure location code (e.g. 'JKT')",
    )
    destination: Series[str] = pa.Field(
        nullable=False,
        description="Arrival location code",
    )
    operator: Series[str] = pa.Field(
        nullable=False,
        description="Operating carrier name",
    )
    duration_minutes: Series[int] = pa.Field(
        gt=0,
        description="Declared duration in minutes",
    )
    departure: Series[str] = pa.Field(
        nullable=False,
        description="Departure timestamp (ISO-8601)",
    )
    arrival: Series[str] = pa.Field(
        nullable=False,
        description="Arrival timestamp (ISO-8601)",
    )

    class Config:
        strict = False
        coerce = True
        name = "LegSchema"
        description = "Scheduled legs between locations"

    @pa.check("departure", "arrival")
    def timestamps_parseable(cls, series: Series[str]) -> Series[bool]:
        """Every timestamp must parse as an absolute instant."""
        return pd.to_datetime(series, utc=True, errors="coerce", format="ISO8601").notna()


LEG_COLUMNS = [
    "leg_id",
    "origin",
    "destination",
    "operator",
    "duration_minutes",
    "departure",
    "arrival",
]

LegDataFrame = DataFrame[LegSchema]
