"""
Itinerary aggregation.

Summaries use the declared leg durations for the total. Timestamps in
source data may disagree with the declared duration (overnight legs,
data-entry errors), so they are only used for the schedule.
"""

from .models import Itinerary, ItinerarySummary


def total_duration_minutes(itinerary: Itinerary) -> int:
    """Sum of declared leg durations."""
    return sum(leg.duration_minutes for leg in itinerary.legs)


def summarize(itinerary: Itinerary, itinerary_id: int) -> ItinerarySummary:
    """
    Build the read-only summary of a feasible itinerary.

    Args:
        itinerary: Itinerary already accepted by the feasibility filter.
        itinerary_id: Sequential identifier within the result.

    Returns:
        ItinerarySummary with total duration and ordered schedule.
    """
    return ItinerarySummary(
        itinerary_id=itinerary_id,
        path=itinerary.path,
        legs=itinerary.legs,
        total_duration_minutes=total_duration_minutes(itinerary),
        schedule=tuple((leg.departure, leg.arrival) for leg in itinerary.legs),
    )
