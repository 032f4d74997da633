"""
Input validation for the itinerary search module.

Checks run before any enumeration starts so that caller errors fail fast
with clear messages.
"""

import math
from typing import Optional, Set

import pandas as pd

from .exceptions import InvalidSearchLimitError, MissingColumnsError
from .feasibility import validate_min_connection
from .models import SearchLimits

# Required columns for the tabular leg catalog
REQUIRED_COLUMNS: Set[str] = {
    "leg_id",
    "origin",
    "destination",
    "operator",
    "duration_minutes",
    "departure",
    "arrival",
}


def validate_legs_df(legs_df: pd.DataFrame) -> None:
    """
    Validate the leg catalog DataFrame structure.

    An empty catalog is allowed; it simply covers no locations.

    Raises:
        MissingColumnsError: If required columns are missing.
    """
    missing_columns = REQUIRED_COLUMNS - set(legs_df.columns)

    if missing_columns:
        raise MissingColumnsError(missing_columns)


def validate_limits(limits: Optional[SearchLimits]) -> None:
    """
    Raises:
        InvalidSearchLimitError: If any configured limit is not a positive
            finite number.
    """
    if limits is None:
        return

    for name in ("max_paths", "max_itineraries", "deadline_seconds"):
        value = getattr(limits, name)
        if value is not None and (not math.isfinite(value) or value <= 0):
            raise InvalidSearchLimitError(name, value)


def validate_search_inputs(
    min_connection_minutes: float,
    limits: Optional[SearchLimits] = None,
) -> None:
    """
    Validate all search parameters.

    Raises:
        InvalidConnectionTimeError: If the connection threshold is negative
            or not finite.
        InvalidSearchLimitError: If a limit is not a positive finite number.
    """
    validate_min_connection(min_connection_minutes)
    validate_limits(limits)
