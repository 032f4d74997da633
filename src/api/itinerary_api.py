"""
HTTP API for itinerary search.

/flight-routes takes origin, destination and operator; the older names
start, end and preferredAirline are accepted as aliases and the new names
win when both are sent. /cities and /airlines return sorted lists.
"""

from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from src.itinerary_router.application import FindItineraries
from src.itinerary_router.config import Settings
from src.itinerary_router.logging_config import setup_logging
from src.itinerary_router.ports.catalog_cache import CatalogNotInitializedError
from src.itinerary_search.exceptions import ValidationError
from src.itinerary_search.models import ItinerarySummary

settings = Settings.from_env()
setup_logging(settings.log_level)

finder = FindItineraries.from_settings(settings)

app = FastAPI(title="Itinerary Routing API")

# Enable CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Pydantic Schemas (The JSON Contract) ---


class ItineraryRouteSchema(BaseModel):
    id: int
    path: str  # e.g. "JKT → SUB → DPS"
    legs: str  # e.g. "1 (Garuda), 3 (Citilink)"
    total_duration_minutes: int  # sum of declared leg durations
    schedule: List[str]  # "departure - arrival" per leg

    @classmethod
    def from_summary(cls, summary: ItinerarySummary) -> "ItineraryRouteSchema":
        return cls(
            id=summary.itinerary_id,
            path=summary.path_display,
            legs=summary.legs_display,
            total_duration_minutes=summary.total_duration_minutes,
            schedule=summary.schedule_display,
        )


class ItinerarySearchResponse(BaseModel):
    total_routes: int
    truncated: bool
    routes: List[ItineraryRouteSchema]


class CitiesResponse(BaseModel):
    cities: List[str]


class AirlinesResponse(BaseModel):
    airlines: List[str]


class HealthResponse(BaseModel):
    status: str
    ready: bool
    algorithm: str


# --- API Endpoints ---


@app.get("/flight-routes", response_model=ItinerarySearchResponse)
def find_flight_routes(
    origin: Optional[str] = None,
    destination: Optional[str] = None,
    operator: Optional[str] = None,
    min_connection_minutes: Optional[float] = None,
    start: Optional[str] = None,
    end: Optional[str] = None,
    preferred_airline: Optional[str] = Query(None, alias="preferredAirline"),
):
    """
    Every feasible itinerary from origin to destination.

    Args:
        origin: Origin location code (required).
        destination: Destination location code (required).
        operator: Only use legs flown by this operator (case-insensitive).
        min_connection_minutes: Minimum connection time; defaults to the
            configured value (60).
        start, end, preferred_airline: Aliases for origin, destination
            and operator.
    """
    origin = origin or start
    destination = destination or end
    operator = operator or preferred_airline

    if not origin or not destination:
        raise HTTPException(
            status_code=400,
            detail="Parameters origin and destination are required",
        )

    try:
        outcome = finder.search(
            origin=origin,
            destination=destination,
            operator=operator,
            min_connection_minutes=min_connection_minutes,
        )
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except CatalogNotInitializedError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e

    return ItinerarySearchResponse(
        total_routes=outcome.total,
        truncated=outcome.truncated,
        routes=[ItineraryRouteSchema.from_summary(s) for s in outcome.itineraries],
    )


@app.get("/cities", response_model=CitiesResponse)
def get_cities():
    """All location codes served by the catalog."""
    try:
        return CitiesResponse(cities=sorted(finder.list_locations()))
    except CatalogNotInitializedError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e


@app.get("/airlines", response_model=AirlinesResponse)
def get_airlines():
    """All operator names served by the catalog."""
    try:
        return AirlinesResponse(airlines=sorted(finder.list_operators()))
    except CatalogNotInitializedError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(
        status="ok",
        ready=finder.is_ready,
        algorithm=finder.algorithm_name,
    )

