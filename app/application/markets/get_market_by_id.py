"""
Use case: Retrieve a single prediction market.

Input: market_id (non-empty string)
Output: Market
Side effects: None (read-only query).
Failure cases: MarketNotFoundError, MarketRepositoryError.
"""

import asyncio
import logging

from app.domain.markets.entities import Market
from app.domain.markets.errors import MarketNotFoundError
from app.domain.markets.ports import MarketRepository

logger = logging.getLogger(__name__)


class GetMarketByIdUseCase:
    """Orchestrates looking up one market by its identifier."""

    def __init__(self, market_repo: MarketRepository) -> None:
        self._market_repo = market_repo

    async def execute(self, market_id: str) -> Market:
        """Run the get market use case.

        Args:
            market_id: Identifier of the market to fetch.

        Returns:
            The matching market.

        Raises:
            MarketNotFoundError: If no market has the given ID.
        """
        logger.info("Fetching market: market_id=%s", market_id)
        market = await asyncio.to_thread(self._market_repo.get_by_id, market_id)
        if market is None:
            raise MarketNotFoundError(market_id)
        return market
