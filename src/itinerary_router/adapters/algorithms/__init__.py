"""
Algorithm adapters for itinerary search.
"""

from src.itinerary_router.adapters.algorithms.depth_first_finder import (
    DepthFirstItineraryFinder,
)

__all__ = ["DepthFirstItineraryFinder"]
