"""
Shared fixtures for the market query service tests.

Provides sample markets, an in-memory SQLite engine with the markets
schema, and a TestClient whose adapter is wired to that engine.
"""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.application.markets.get_market_by_id import GetMarketByIdUseCase
from app.application.markets.get_markets import GetMarketsUseCase
from app.domain.markets.entities import Market, MarketStatus
from app.infrastructure.markets.market_repository import (
    SqlMarketRepository,
    ensure_schema,
    insert_markets,
)
from app.interfaces.markets.dependencies import get_market_query_adapter
from app.interfaces.markets.query_adapter import MarketQueryAdapter
from app.main import app
from app.shared.security.rate_limiting import limiter


def make_market(
    market_id: str,
    day: int,
    status: MarketStatus = MarketStatus.OPEN,
    creator_id: str = "alice",
    resolution_day: int | None = None,
) -> Market:
    """Build a Market created on 2024-01-{day}."""
    return Market(
        id=market_id,
        question=f"Will {market_id} happen?",
        description=f"Test market {market_id}",
        status=status,
        creator_id=creator_id,
        create_tms=datetime(2024, 1, day, 12, 0),
        resolution_time=(
            datetime(2024, 2, resolution_day, 12, 0) if resolution_day else None
        ),
        outcome="YES" if status is MarketStatus.RESOLVED else None,
    )


@pytest.fixture
def sample_markets() -> list[Market]:
    """Five markets from two creators with distinct timestamps."""
    return [
        make_market("m1", 1, resolution_day=20),
        make_market("m2", 2, creator_id="bob", resolution_day=5),
        make_market("m3", 3, status=MarketStatus.RESOLVED, resolution_day=10),
        make_market("m4", 4, status=MarketStatus.CLOSED, creator_id="bob", resolution_day=1),
        make_market("m5", 5, resolution_day=15),
    ]


@pytest.fixture
def engine(sample_markets):
    """In-memory SQLite engine seeded with sample_markets."""
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    ensure_schema(eng)
    insert_markets(eng, sample_markets)
    yield eng
    eng.dispose()


@pytest.fixture
def repository(engine) -> SqlMarketRepository:
    return SqlMarketRepository(engine=engine)


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    """Keep the process-wide limiter from leaking counts between tests."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client(repository):
    """TestClient whose market routes read from the seeded SQLite engine."""
    app.dependency_overrides[get_market_query_adapter] = lambda: MarketQueryAdapter(
        get_markets=GetMarketsUseCase(market_repo=repository),
        get_market_by_id=GetMarketByIdUseCase(market_repo=repository),
    )
    yield TestClient(app)
    app.dependency_overrides.clear()
