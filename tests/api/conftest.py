"""
Fixtures for FastAPI endpoint tests.

The module-level finder in the API is replaced by one serving the
built-in sample schedule, so tests never touch a database.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from src.itinerary_router.adapters.data_providers.static_provider import (
    StaticLegProvider,
)
from src.itinerary_router.application import FindItineraries
from src.itinerary_router.config import Settings


@pytest.fixture
def sample_finder():
    finder = FindItineraries(
        data_provider=StaticLegProvider(),
        settings=Settings(),
        auto_refresh=False,
    )
    yield finder
    finder.shutdown()


@pytest.fixture
def client(sample_finder):
    """TestClient with the sample finder patched in."""
    from src.api.itinerary_api import app

    with patch("src.api.itinerary_api.finder", sample_finder):
        yield TestClient(app)
