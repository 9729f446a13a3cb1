"""Pydantic models for API input/output."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ═══════════════ REQUESTS ═══════════════

class FlightQuery(BaseModel):
    """Query string of /api/flights. Presence is checked by the lookup service."""
    dep_iata: str | None = None
    arr_iata: str | None = None
    flight_date: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.dep_iata) and bool(self.arr_iata)


# ═══════════════ RESULTS ═══════════════

class FlightResult(BaseModel):
    """Normalized upstream answer, shared read-only by cache and responses."""
    model_config = ConfigDict(frozen=True)

    data: list[Any] = Field(default_factory=list)
    count: int = 0
    route: str = ""
    date: str = "today"

    @classmethod
    def from_upstream(cls, body: dict[str, Any], query: FlightQuery) -> FlightResult:
        data = body.get("data") or []
        return cls(
            data=data,
            count=len(data),
            route=f"{query.dep_iata} → {query.arr_iata}",
            date=query.flight_date or "today",
        )


class FlightResponse(FlightResult):
    cached: bool = False


class BookingLink(BaseModel):
    url: str
    airline: str | None = None
    route: str


# ═══════════════ SERVICE ═══════════════

class ServiceStatus(BaseModel):
    status: str = "running"
    message: str = "Flight Tracker Backend"
    endpoints: list[str] = Field(default_factory=lambda: ["/api/flights", "/api/booking-url"])


class HealthStatus(BaseModel):
    status: str = "ok"
    has_api_key: bool = False
    cache_entries: int = 0
