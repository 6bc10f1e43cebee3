"""
FastAPI router for the markets bounded context.

Routes hand raw request input to the MarketQueryAdapter and
serialize the envelope it returns. No business logic here.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.interfaces.markets.dependencies import get_market_query_adapter
from app.interfaces.markets.query_adapter import MarketQueryAdapter
from app.interfaces.markets.schemas import (
    MarketErrorResponse,
    MarketListResponse,
    MarketResponse,
)

router = APIRouter(prefix="/markets", tags=["markets"])


@router.get(
    "",
    response_model=MarketListResponse,
    responses={
        400: {"model": MarketErrorResponse, "description": "Malformed limit or offset"},
        500: {"model": MarketErrorResponse, "description": "Internal server error"},
    },
    summary="Get a list of markets",
    description=(
        "Returns a list of markets with optional filters: status, creatorId, "
        "limit, offset, sortBy (createTms|resolutionTime), sortOrder (asc|desc)."
    ),
)
async def list_markets(
    request: Request,
    adapter: MarketQueryAdapter = Depends(get_market_query_adapter),
) -> JSONResponse:
    """List markets matching the query string filters."""
    envelope = await adapter.list_markets(dict(request.query_params))
    return envelope.to_response()


@router.get(
    "/{market_id}",
    response_model=MarketResponse,
    response_model_by_alias=True,
    responses={
        400: {"model": MarketErrorResponse, "description": "Market ID is required"},
        404: {"model": MarketErrorResponse, "description": "Market not found"},
        500: {"model": MarketErrorResponse, "description": "Internal server error"},
    },
    summary="Get market by ID",
    description="Returns a market by its ID.",
)
async def get_market_by_id(
    market_id: str,
    adapter: MarketQueryAdapter = Depends(get_market_query_adapter),
) -> JSONResponse:
    """Fetch a single market."""
    envelope = await adapter.get_market_by_id(market_id)
    return envelope.to_response()
