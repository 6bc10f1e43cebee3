"""
Port interfaces (ABCs) for the markets bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.markets.entities import Market, MarketFilters, MarketList


class MarketRepository(ABC):
    """Port for reading markets from storage."""

    @abstractmethod
    def list_markets(self, filters: MarketFilters) -> MarketList:
        """Return one page of markets matching the filters.

        Args:
            filters: Fully defaulted filters (limit, offset and sort set).

        Returns:
            The matching page together with the unpaged total.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, market_id: str) -> Optional[Market]:
        """Return a market by its ID, or None if not found."""
        raise NotImplementedError
