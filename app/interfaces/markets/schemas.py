"""
Pydantic schemas for the markets API responses.

These schemas define the wire contract: camelCase keys, ISO-8601 datetimes.
The mapping functions at the bottom convert domain entities to wire shapes.
No business logic belongs here.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from app.domain.markets.entities import Market, MarketList


class MarketResponse(BaseModel):
    """Wire shape of a single market."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    question: str
    description: str | None = None
    status: str
    creator_id: str = Field(..., alias="creatorId")
    create_tms: datetime = Field(..., alias="createTms")
    resolution_time: datetime | None = Field(default=None, alias="resolutionTime")
    outcome: str | None = None


class MarketListResponse(BaseModel):
    """Wire shape of a page of markets."""

    markets: list[MarketResponse]
    total: int
    limit: int
    offset: int


class MarketErrorResponse(BaseModel):
    """Standard error response returned by every markets endpoint.

    Attributes:
        error: Short, stable description of the failure.
        message: Optional detail derived from the underlying failure.
    """

    error: str
    message: str | None = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


def market_to_dto(market: Market) -> dict[str, Any]:
    """Convert a market entity into its JSON-ready wire shape."""
    return MarketResponse(
        id=market.id,
        question=market.question,
        description=market.description,
        status=market.status.value,
        creator_id=market.creator_id,
        create_tms=market.create_tms,
        resolution_time=market.resolution_time,
        outcome=market.outcome,
    ).model_dump(mode="json", by_alias=True)


def market_list_to_dto(market_list: MarketList) -> dict[str, Any]:
    """Convert a page of markets into its JSON-ready wire shape."""
    return {
        "markets": [market_to_dto(m) for m in market_list.markets],
        "total": market_list.total,
        "limit": market_list.limit,
        "offset": market_list.offset,
    }


def error_to_dto(error: str, message: str | None = None) -> dict[str, Any]:
    """Build an error body, omitting ``message`` when there is none."""
    return MarketErrorResponse(error=error, message=message).model_dump(
        exclude_none=True
    )
