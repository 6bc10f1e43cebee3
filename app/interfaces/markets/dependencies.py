"""
Dependency injection for the markets bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
These are the composition root for the markets context.
"""

import logging
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from app.application.markets.get_market_by_id import GetMarketByIdUseCase
from app.application.markets.get_markets import GetMarketsUseCase
from app.core.config import settings
from app.infrastructure.markets.market_repository import SqlMarketRepository
from app.interfaces.markets.query_adapter import MarketQueryAdapter


@lru_cache(maxsize=1)
def get_db_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return create_engine(settings.database_url, pool_pre_ping=True)


def get_markets_use_case() -> GetMarketsUseCase:
    """Build GetMarketsUseCase with its infrastructure dependencies."""
    return GetMarketsUseCase(
        market_repo=SqlMarketRepository(engine=get_db_engine()),
        default_page_size=settings.default_page_size,
        max_page_size=settings.max_page_size,
    )


def get_market_by_id_use_case() -> GetMarketByIdUseCase:
    """Build GetMarketByIdUseCase with its infrastructure dependencies."""
    return GetMarketByIdUseCase(
        market_repo=SqlMarketRepository(engine=get_db_engine()),
    )


def get_market_query_adapter() -> MarketQueryAdapter:
    """Build the MarketQueryAdapter around both market use cases."""
    return MarketQueryAdapter(
        get_markets=get_markets_use_case(),
        get_market_by_id=get_market_by_id_use_case(),
        log=logging.getLogger("app.interfaces.markets"),
    )
