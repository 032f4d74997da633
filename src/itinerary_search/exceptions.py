"""
Custom exceptions for the itinerary search module.

Provides a hierarchy of exceptions so callers can tell caller errors
(bad search parameters) apart from data faults in the leg catalog.
"""


class ItinerarySearchError(Exception):
    """Base exception for all itinerary search errors."""

    pass


class ValidationError(ItinerarySearchError):
    """Base exception for input validation errors."""

    pass


class InvalidConnectionTimeError(ValidationError):
    """Raised when the minimum connection time is negative or not finite."""

    def __init__(self, minutes: float) -> None:
        self.minutes = minutes
        message = (
            f"Minimum connection time must be a finite number >= 0 minutes, "
            f"got {minutes}"
        )
        super().__init__(message)


class InvalidSearchLimitError(ValidationError):
    """Raised when a search cap or deadline is not a positive finite number."""

    def __init__(self, name: str, value: float) -> None:
        self.name = name
        self.value = value
        message = f"Search limit '{name}' must be a finite number > 0, got {value}"
        super().__init__(message)


class MissingColumnsError(ValidationError):
    """Raised when required leg catalog columns are missing."""

    def __init__(self, missing: set[str]) -> None:
        self.missing = missing
        columns_str = ", ".join(sorted(missing))
        message = f"Missing required columns: {columns_str}"
        super().__init__(message)


class MalformedLegDataError(ItinerarySearchError):
    """Raised when leg records cannot be turned into Leg objects."""

    def __init__(self, leg_id: str, reason: str) -> None:
        self.leg_id = leg_id
        self.reason = reason
        message = f"Malformed leg '{leg_id}': {reason}"
        super().__init__(message)
