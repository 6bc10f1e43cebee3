"""
Centralized error handlers for FastAPI.

Last line of defence for errors that escape a route. Market routes
answer through the MarketQueryAdapter and normally never get here.
All error responses use the {"error", "message"?} body.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.domain.markets.errors import (
    InvalidQueryParameterError,
    MarketDomainError,
    MarketNotFoundError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500


def error_response(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str] = {"error": error}
    if message:
        body["message"] = message
    return JSONResponse(status_code=status_code, content=body)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(MarketNotFoundError)
    async def handle_market_not_found(
        _request: Request, exc: MarketNotFoundError
    ) -> JSONResponse:
        logger.warning("Market not found: %s", exc.market_id)
        return error_response(HTTP_404, "Market not found", exc.message)

    @app.exception_handler(InvalidQueryParameterError)
    async def handle_invalid_query_parameter(
        _request: Request, exc: InvalidQueryParameterError
    ) -> JSONResponse:
        logger.warning("Invalid query parameter: %s", exc.parameter)
        return error_response(HTTP_400, "Invalid query parameter", exc.message)

    @app.exception_handler(MarketDomainError)
    async def handle_market_domain(
        _request: Request, exc: MarketDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled market domain errors."""
        logger.error("Unhandled market domain error: %s", exc.message)
        return error_response(HTTP_500, "Internal server error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected(
        _request: Request, exc: Exception
    ) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(HTTP_500, "Internal server error")
