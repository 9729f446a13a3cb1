"""Exception taxonomy and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

MISSING_PARAMS_MESSAGE = "Missing required parameters: dep_iata, arr_iata"


class FlightTrackerError(Exception):
    """Base exception with HTTP status code."""

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidRequestError(FlightTrackerError):
    """Caller omitted a required query parameter."""

    def __init__(self, message: str = MISSING_PARAMS_MESSAGE):
        super().__init__(message, status_code=400)


class UpstreamDomainError(FlightTrackerError):
    """aviationstack answered with a structured ``error`` object."""

    def __init__(self, message: str = "API error"):
        super().__init__(message, status_code=400)


class UpstreamTransportError(FlightTrackerError):
    """Network failure, timeout, non-2xx status or unreadable body."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)


def _server_error(message: str) -> JSONResponse:
    return JSONResponse({"error": "Server error", "message": message}, status_code=500)


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(UpstreamTransportError)
    async def handle_transport_error(_request: Request, exc: UpstreamTransportError):
        logger.error("Error: %s", exc.message)
        return _server_error(exc.message)

    @app.exception_handler(FlightTrackerError)
    async def handle_flight_tracker_error(_request: Request, exc: FlightTrackerError):
        logger.warning("Request rejected | status=%d | %s", exc.status_code, exc.message)
        return JSONResponse({"error": exc.message}, status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return _server_error(str(exc))
