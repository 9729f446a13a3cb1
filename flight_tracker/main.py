"""Flight Tracker Backend — FastAPI application entry point.

Provides /api/flights (cached aviationstack proxy) and /api/booking-url.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from flight_tracker.config import Settings
from flight_tracker.errors import register_error_handlers
from flight_tracker.integrations.aviationstack import AviationstackClient
from flight_tracker.schemas import (
    BookingLink,
    FlightQuery,
    FlightResponse,
    HealthStatus,
    ServiceStatus,
)
from flight_tracker.services.booking import resolve_booking_url
from flight_tracker.services.cache import FlightCache
from flight_tracker.services.flight_lookup import FlightLookupService

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
# httpx logs full request URLs at INFO, access_key included
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger("flight_tracker")


# ═══════════════ LIFESPAN ═══════════════

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info("Backend running on port %d", settings.port)
    logger.info("API Key: %s", settings.masked_api_key)

    yield

    app.state.cache.clear()
    logger.info("Flight Tracker backend shutting down")


# ═══════════════ DEPENDENCIES ═══════════════

def get_flight_service(request: Request) -> FlightLookupService:
    return request.app.state.flight_service


def get_cache(request: Request) -> FlightCache:
    return request.app.state.cache


# ═══════════════ APP ═══════════════

def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app with its own settings, cache and upstream client."""
    settings = settings or Settings()

    app = FastAPI(
        title="Flight Tracker API",
        description="Cached flight lookups and airline booking links",
        version="1.0.0",
        lifespan=lifespan,
    )

    cache = FlightCache(ttl=settings.cache_ttl_flights, max_entries=settings.cache_max_entries)
    client = AviationstackClient(
        api_key=settings.aviationstack_api_key,
        base_url=settings.aviationstack_base_url,
        timeout=settings.upstream_timeout_seconds,
    )
    app.state.settings = settings
    app.state.cache = cache
    app.state.flight_service = FlightLookupService(client, cache, limit=settings.flights_limit)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # ═══════════════ ENDPOINTS ═══════════════

    @app.get("/", response_model=ServiceStatus)
    async def root():
        return ServiceStatus()

    @app.get("/health", response_model=HealthStatus)
    async def health(cache: FlightCache = Depends(get_cache)):
        return HealthStatus(has_api_key=settings.has_api_key, cache_entries=len(cache))

    @app.get("/api/flights", response_model=FlightResponse)
    async def flights(
        dep_iata: str | None = None,
        arr_iata: str | None = None,
        flight_date: str | None = None,
        service: FlightLookupService = Depends(get_flight_service),
    ):
        query = FlightQuery(dep_iata=dep_iata, arr_iata=arr_iata, flight_date=flight_date)
        return await service.lookup(query)

    @app.get("/api/booking-url", response_model=BookingLink)
    async def booking_url(
        airline: str | None = None,
        origin: str | None = None,
        dest: str | None = None,
    ):
        return resolve_booking_url(airline, origin, dest)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn."""
    import uvicorn

    settings: Settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)
