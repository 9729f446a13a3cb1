"""aviationstack REST API integration.

Docs: https://aviationstack.com/documentation
Endpoint: http://api.aviationstack.com/v1/flights
"""

import logging
import time
from typing import Any

import httpx

from flight_tracker.errors import UpstreamTransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://api.aviationstack.com/v1"


class AviationstackClient:
    """Async client for the aviationstack flights resource.

    One GET per call, no retry. The access key is appended here so callers
    never handle the credential themselves.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL, timeout: int = 30):
        self._api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def get_flights(self, params: dict[str, Any]) -> dict[str, Any]:
        """GET /flights and return the parsed JSON body.

        Raises UpstreamTransportError on network failure, timeout, non-2xx
        status or a body that is not a JSON object.
        """
        url = f"{self.base_url}/flights"
        query = {"access_key": self._api_key, **params}
        route = f"{params.get('dep_iata')}-{params.get('arr_iata')}"

        start = time.monotonic()
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                resp = await client.get(url, params=query)
                elapsed_ms = int((time.monotonic() - start) * 1000)
                resp.raise_for_status()
                data = resp.json()
        except httpx.TimeoutException as e:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            logger.warning("aviationstack timeout | %dms | route=%s", elapsed_ms, route)
            raise UpstreamTransportError(str(e) or "Upstream request timed out") from e
        except httpx.HTTPStatusError as e:
            logger.warning(
                "aviationstack | status=%d | %dms | route=%s",
                e.response.status_code, elapsed_ms, route,
            )
            raise UpstreamTransportError(
                f"Request failed with status code {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            elapsed_ms = int((time.monotonic() - start) * 1000)
            logger.error("aviationstack error | %dms | %s", elapsed_ms, str(e)[:200])
            raise UpstreamTransportError(str(e) or type(e).__name__) from e
        except ValueError as e:
            logger.error("aviationstack returned invalid JSON | route=%s", route)
            raise UpstreamTransportError(f"Invalid JSON from upstream: {e}") from e

        if not isinstance(data, dict):
            raise UpstreamTransportError("Unexpected response shape from upstream")

        logger.info(
            "aviationstack OK | results=%d | %dms | route=%s",
            len(data.get("data") or []), elapsed_ms, route,
        )
        return data
