"""Shared test fixtures and configuration."""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Never hit aviationstack with a real key during tests
os.environ["AVIATIONSTACK_API_KEY"] = ""

from flight_tracker.config import Settings  # noqa: E402
from flight_tracker.integrations.aviationstack import AviationstackClient  # noqa: E402
from flight_tracker.main import create_app  # noqa: E402
from flight_tracker.services.cache import FlightCache  # noqa: E402
from flight_tracker.services.flight_lookup import FlightLookupService  # noqa: E402

TEST_API_KEY = "test-secret-key-9876"


class FakeClock:
    """Manually advanced timer for TTL tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    return Settings(aviationstack_api_key=TEST_API_KEY, _env_file=None)


@pytest.fixture
def aviationstack_client(settings):
    return AviationstackClient(api_key=settings.aviationstack_api_key)


@pytest.fixture
def flight_cache(clock):
    return FlightCache(ttl=3600, timer=clock)


@pytest.fixture
def lookup_service(aviationstack_client, flight_cache):
    return FlightLookupService(aviationstack_client, flight_cache)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def flight_a():
    """Trimmed aviationstack flight record."""
    return {
        "flight_date": "2024-01-01",
        "flight_status": "scheduled",
        "departure": {"airport": "John F Kennedy International", "iata": "JFK"},
        "arrival": {"airport": "Los Angeles International", "iata": "LAX"},
        "airline": {"name": "Delta Air Lines", "iata": "DL"},
        "flight": {"number": "423", "iata": "DL423"},
    }


@pytest.fixture
def flight_b():
    return {
        "flight_date": "2024-01-01",
        "flight_status": "active",
        "departure": {"airport": "John F Kennedy International", "iata": "JFK"},
        "arrival": {"airport": "Los Angeles International", "iata": "LAX"},
        "airline": {"name": "JetBlue Airways", "iata": "B6"},
        "flight": {"number": "23", "iata": "B623"},
    }


@pytest.fixture
def sample_flights_response(flight_a, flight_b):
    """Sample aviationstack /flights response."""
    return {
        "pagination": {"limit": 100, "offset": 0, "count": 2, "total": 2},
        "data": [flight_a, flight_b],
    }
