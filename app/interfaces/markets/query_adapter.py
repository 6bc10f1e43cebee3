"""
Market query adapter.

Sits between raw HTTP input and the market use cases:
- Parses untyped query/path values into MarketFilters or a market ID.
- Awaits the relevant use case.
- Translates the result, or the failure, into a ResponseEnvelope.

The adapter never re-raises. Every path ends in an envelope that the
router serializes as JSON.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from fastapi.responses import JSONResponse

from app.application.markets.get_market_by_id import GetMarketByIdUseCase
from app.application.markets.get_markets import GetMarketsUseCase
from app.domain.markets.entities import MarketFilters, SortBy, SortOrder
from app.domain.markets.errors import InvalidQueryParameterError, MarketNotFoundError
from app.interfaces.markets.schemas import (
    error_to_dto,
    market_list_to_dto,
    market_to_dto,
)

logger = logging.getLogger(__name__)

HTTP_200 = 200
HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

MARKET_ID_REQUIRED = "Market ID is required"
INVALID_QUERY_PARAMETER = "Invalid query parameter"
MARKET_NOT_FOUND = "Market not found"
INTERNAL_SERVER_ERROR = "Internal server error"
UNKNOWN_ERROR = "Unknown error"

_INTEGER_PATTERN = re.compile(r"-?\d+")
_SORT_BY_VALUES = {s.value: s for s in SortBy}
_SORT_ORDER_VALUES = {s.value: s for s in SortOrder}


@dataclass(frozen=True)
class ResponseEnvelope:
    """Status code plus JSON body, built once per request."""

    status_code: int
    body: dict[str, Any] = field(default_factory=dict)

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.body)


class FailureKind(Enum):
    """How the adapter classifies a failure raised by a use case."""

    NOT_FOUND = "not_found"
    UNCLASSIFIED = "unclassified"


FAILURE_STATUS: dict[FailureKind, tuple[int, str]] = {
    FailureKind.NOT_FOUND: (HTTP_404, MARKET_NOT_FOUND),
    FailureKind.UNCLASSIFIED: (HTTP_500, INTERNAL_SERVER_ERROR),
}


def classify_failure(exc: Exception) -> FailureKind:
    """Map an exception raised by a use case onto a FailureKind."""
    if isinstance(exc, MarketNotFoundError):
        return FailureKind.NOT_FOUND
    return FailureKind.UNCLASSIFIED


def failure_message(exc: Exception) -> str:
    """Extract a client-safe message from a failure, or a fixed fallback."""
    message = getattr(exc, "message", None)
    if not isinstance(message, str):
        message = str(exc)
    return message or UNKNOWN_ERROR


def _parse_int(name: str, value: str) -> int:
    candidate = value.strip()
    if not _INTEGER_PATTERN.fullmatch(candidate):
        raise InvalidQueryParameterError(name, value)
    try:
        return int(candidate)
    except ValueError:
        # digit strings longer than sys.get_int_max_str_digits()
        raise InvalidQueryParameterError(name, value) from None


def parse_market_filters(raw_query: Mapping[str, Any]) -> MarketFilters:
    """Build MarketFilters from raw query parameters.

    Only recognized keys that are present and non-empty are copied.
    Unknown ``sortBy``/``sortOrder`` values are dropped, not rejected.

    Args:
        raw_query: Query string parameters as received.

    Returns:
        The typed filters, with absent fields left as None.

    Raises:
        InvalidQueryParameterError: If ``limit`` or ``offset`` is not an integer.
    """

    def present(key: str) -> Optional[str]:
        value = raw_query.get(key)
        return value if isinstance(value, str) and value else None

    status = present("status")
    creator_id = present("creatorId")
    limit = present("limit")
    offset = present("offset")
    sort_by = present("sortBy")
    sort_order = present("sortOrder")

    return MarketFilters(
        status=status,
        creator_id=creator_id,
        limit=_parse_int("limit", limit) if limit is not None else None,
        offset=_parse_int("offset", offset) if offset is not None else None,
        sort_by=_SORT_BY_VALUES.get(sort_by) if sort_by else None,
        sort_order=_SORT_ORDER_VALUES.get(sort_order) if sort_order else None,
    )


class MarketQueryAdapter:
    """Translates market HTTP requests into use-case calls and envelopes.

    Holds no per-request state; one instance may serve concurrent requests.
    """

    def __init__(
        self,
        get_markets: GetMarketsUseCase,
        get_market_by_id: GetMarketByIdUseCase,
        log: Optional[logging.Logger] = None,
    ) -> None:
        """Initialize the adapter.

        Args:
            get_markets: Use case listing markets.
            get_market_by_id: Use case fetching a single market.
            log: Logger for failure diagnostics. Defaults to the module logger.
        """
        self._get_markets = get_markets
        self._get_market_by_id = get_market_by_id
        self._logger = log or logger

    async def list_markets(self, raw_query: Mapping[str, Any]) -> ResponseEnvelope:
        """Handle ``GET /markets``."""
        try:
            filters = parse_market_filters(raw_query)
        except InvalidQueryParameterError as exc:
            self._logger.warning("Rejected market listing query: %s", exc.message)
            return ResponseEnvelope(HTTP_400, error_to_dto(INVALID_QUERY_PARAMETER, exc.message))

        try:
            result = await self._get_markets.execute(filters)
            body = market_list_to_dto(result)
        except Exception as exc:
            self._logger.error("Error fetching markets: %r", exc, exc_info=exc)
            return ResponseEnvelope(
                HTTP_500, error_to_dto(INTERNAL_SERVER_ERROR, failure_message(exc))
            )

        return ResponseEnvelope(HTTP_200, body)

    async def get_market_by_id(self, raw_id: Optional[str]) -> ResponseEnvelope:
        """Handle ``GET /markets/{market_id}``."""
        if not raw_id:
            return ResponseEnvelope(HTTP_400, error_to_dto(MARKET_ID_REQUIRED))

        try:
            result = await self._get_market_by_id.execute(raw_id)
            body = market_to_dto(result)
        except Exception as exc:
            kind = classify_failure(exc)
            if kind is FailureKind.NOT_FOUND:
                self._logger.warning("Market not found: %s", raw_id)
            else:
                self._logger.error(
                    "Error fetching market by ID %s: %r", raw_id, exc, exc_info=exc
                )
            status_code, error = FAILURE_STATUS[kind]
            return ResponseEnvelope(status_code, error_to_dto(error, failure_message(exc)))

        return ResponseEnvelope(HTTP_200, body)
