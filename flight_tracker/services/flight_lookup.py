"""Flight lookup: cache first, aviationstack on a miss."""

import logging

from pydantic import ValidationError

from flight_tracker.errors import InvalidRequestError, UpstreamDomainError, UpstreamTransportError
from flight_tracker.integrations.aviationstack import AviationstackClient
from flight_tracker.schemas import FlightQuery, FlightResponse, FlightResult
from flight_tracker.services.cache import FlightCache

logger = logging.getLogger(__name__)


class FlightLookupService:
    """Serves /api/flights from the cache, falling back to aviationstack."""

    def __init__(self, client: AviationstackClient, cache: FlightCache, limit: int = 100):
        self.client = client
        self.cache = cache
        self.limit = limit

    async def lookup(self, query: FlightQuery) -> FlightResponse:
        """Return the flights for a route, flagged with whether they were cached.

        At most one upstream call and one cache write per request; a cache hit
        makes neither.
        """
        if not query.is_complete:
            raise InvalidRequestError()

        key = self.cache.make_key(query.dep_iata, query.arr_iata, query.flight_date)
        cached = self.cache.get(key)
        if cached is not None:
            return FlightResponse(**cached.model_dump(), cached=True)

        body = await self.client.get_flights(self._build_params(query))

        # An empty error object still counts as an error
        error = body.get("error")
        if error or isinstance(error, dict):
            message = error.get("message") if isinstance(error, dict) else None
            raise UpstreamDomainError(message or "API error")

        try:
            result = FlightResult.from_upstream(body, query)
        except ValidationError as e:
            logger.error("Unexpected flights payload | key=%s | %s", key, str(e)[:200])
            raise UpstreamTransportError("Unexpected response shape from upstream") from e

        self.cache.set(key, result)
        return FlightResponse(**result.model_dump(), cached=False)

    def _build_params(self, query: FlightQuery) -> dict:
        params = {
            "dep_iata": query.dep_iata,
            "arr_iata": query.arr_iata,
            "limit": self.limit,
        }
        if query.flight_date:
            params["flight_date"] = query.flight_date
        return params
