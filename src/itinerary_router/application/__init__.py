"""
Application layer for the Itinerary Router.

Provides the public facade used by the HTTP layer and other consumers.
"""

from src.itinerary_router.application.find_itineraries import FindItineraries

__all__ = ["FindItineraries"]
