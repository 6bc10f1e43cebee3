"""
Domain entities for the markets bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class MarketStatus(Enum):
    """Lifecycle state of a prediction market."""

    OPEN = "open"
    CLOSED = "closed"
    RESOLVED = "resolved"
    CANCELLED = "cancelled"


class SortBy(Enum):
    """Columns a market listing may be ordered by."""

    CREATE_TMS = "createTms"
    RESOLUTION_TIME = "resolutionTime"


class SortOrder(Enum):
    """Direction of a market listing sort."""

    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class Market:
    """A single prediction market."""

    id: str
    question: str
    description: Optional[str]
    status: MarketStatus
    creator_id: str
    create_tms: datetime
    resolution_time: Optional[datetime] = None
    outcome: Optional[str] = None


@dataclass(frozen=True)
class MarketList:
    """A page of markets together with the total number of matches."""

    markets: list[Market] = field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0


@dataclass(frozen=True)
class MarketFilters:
    """Optional filters for a market listing.

    Every field is optional; ``None`` means the caller did not supply it.
    Defaults are applied by the listing use case, never here.
    """

    status: Optional[str] = None
    creator_id: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    sort_by: Optional[SortBy] = None
    sort_order: Optional[SortOrder] = None

    def as_dict(self) -> dict[str, Any]:
        """Return the present fields keyed by their query-string names."""
        wire = {
            "status": self.status,
            "creatorId": self.creator_id,
            "limit": self.limit,
            "offset": self.offset,
            "sortBy": self.sort_by.value if self.sort_by else None,
            "sortOrder": self.sort_order.value if self.sort_order else None,
        }
        return {key: value for key, value in wire.items() if value is not None}
