"""
Use case: List prediction markets.

Input: MarketFilters (all fields optional)
Output: MarketList
Side effects: None (read-only query).
Failure cases: MarketRepositoryError.
"""

import asyncio
import logging
from dataclasses import replace

from app.domain.markets.entities import MarketFilters, MarketList, SortBy, SortOrder
from app.domain.markets.ports import MarketRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class GetMarketsUseCase:
    """Orchestrates listing markets.

    Owns the defaulting policy for filters the client left out and
    clamps paging values into range before hitting the repository.
    """

    def __init__(
        self,
        market_repo: MarketRepository,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        """Initialize the use case.

        Args:
            market_repo: Repository for reading markets.
            default_page_size: Limit applied when none was requested.
            max_page_size: Largest limit a caller may request.
        """
        self._market_repo = market_repo
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    def apply_defaults(self, filters: MarketFilters) -> MarketFilters:
        """Fill in missing paging and sort fields and clamp paging values."""
        limit = self._default_page_size if filters.limit is None else filters.limit
        offset = 0 if filters.offset is None else filters.offset
        return replace(
            filters,
            limit=max(1, min(limit, self._max_page_size)),
            offset=max(0, offset),
            sort_by=filters.sort_by or SortBy.CREATE_TMS,
            sort_order=filters.sort_order or SortOrder.DESC,
        )

    async def execute(self, filters: MarketFilters) -> MarketList:
        """Run the list markets use case.

        Args:
            filters: Filters parsed from the request.

        Returns:
            One page of markets plus the unpaged total.
        """
        effective = self.apply_defaults(filters)
        logger.info("Listing markets: filters=%s", effective.as_dict())
        return await asyncio.to_thread(self._market_repo.list_markets, effective)
