"""
Adapter: Market repository.

Implements MarketRepository port.
Reads markets from a SQL database through SQLAlchemy Core.
"""

import logging
from typing import Any, Iterable, Optional

from sqlalchemy import (
    Column,
    DateTime,
    MetaData,
    String,
    Table,
    Text,
    func,
    select,
)
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError

from app.domain.markets.entities import (
    Market,
    MarketFilters,
    MarketList,
    MarketStatus,
    SortBy,
    SortOrder,
)
from app.domain.markets.errors import MarketRepositoryError
from app.domain.markets.ports import MarketRepository

logger = logging.getLogger(__name__)

metadata = MetaData()

markets_table = Table(
    "markets",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("question", Text, nullable=False),
    Column("description", Text, nullable=True),
    Column("status", String(16), nullable=False, index=True),
    Column("creator_id", String(64), nullable=False, index=True),
    Column("create_tms", DateTime(timezone=True), nullable=False),
    Column("resolution_time", DateTime(timezone=True), nullable=True),
    Column("outcome", String(64), nullable=True),
)

SORT_COLUMNS = {
    SortBy.CREATE_TMS: markets_table.c.create_tms,
    SortBy.RESOLUTION_TIME: markets_table.c.resolution_time,
}


def ensure_schema(engine: Engine) -> None:
    """Create the markets table if it does not exist yet."""
    metadata.create_all(engine, tables=[markets_table])
    logger.info("Market schema ensured on %s.", engine.url.render_as_string(hide_password=True))


def insert_markets(engine: Engine, markets: Iterable[Market]) -> int:
    """Insert markets in a single transaction.

    Args:
        engine: Target database engine.
        markets: Market entities to persist.

    Returns:
        Number of rows inserted.
    """
    rows = [_to_row(m) for m in markets]
    if not rows:
        return 0
    with engine.begin() as conn:
        conn.execute(markets_table.insert(), rows)
    logger.info("Inserted %d markets.", len(rows))
    return len(rows)


def _to_row(market: Market) -> dict[str, Any]:
    return {
        "id": market.id,
        "question": market.question,
        "description": market.description,
        "status": market.status.value,
        "creator_id": market.creator_id,
        "create_tms": market.create_tms,
        "resolution_time": market.resolution_time,
        "outcome": market.outcome,
    }


def _to_market(row: RowMapping) -> Market:
    return Market(
        id=row["id"],
        question=row["question"],
        description=row["description"],
        status=MarketStatus(row["status"]),
        creator_id=row["creator_id"],
        create_tms=row["create_tms"],
        resolution_time=row["resolution_time"],
        outcome=row["outcome"],
    )


class SqlMarketRepository(MarketRepository):
    """SQL implementation of the market repository.

    Works against any SQLAlchemy-supported backend; SQLite locally and
    in tests, PostgreSQL in deployment.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_markets(self, filters: MarketFilters) -> MarketList:
        """Return one page of markets matching the filters.

        Args:
            filters: Filters with limit, offset and sort already defaulted.

        Returns:
            The requested page and the total number of matching markets.
        """
        conditions = []
        if filters.status:
            conditions.append(markets_table.c.status == filters.status)
        if filters.creator_id:
            conditions.append(markets_table.c.creator_id == filters.creator_id)

        sort_column = SORT_COLUMNS[filters.sort_by or SortBy.CREATE_TMS]
        ordering = (
            sort_column.asc()
            if filters.sort_order is SortOrder.ASC
            else sort_column.desc()
        )
        limit = filters.limit or 0
        offset = filters.offset or 0

        page_query = (
            select(markets_table)
            .where(*conditions)
            .order_by(ordering, markets_table.c.id.asc())
            .limit(limit)
            .offset(offset)
        )
        count_query = (
            select(func.count()).select_from(markets_table).where(*conditions)
        )

        try:
            with self._engine.connect() as conn:
                rows = conn.execute(page_query).mappings().all()
                total = conn.execute(count_query).scalar_one()
        except SQLAlchemyError as exc:
            logger.error("Failed to list markets: %s", type(exc).__name__)
            raise MarketRepositoryError(type(exc).__name__) from exc

        return MarketList(
            markets=[_to_market(row) for row in rows],
            total=total,
            limit=limit,
            offset=offset,
        )

    def get_by_id(self, market_id: str) -> Optional[Market]:
        """Return a market by its ID, or None if not found."""
        query = select(markets_table).where(markets_table.c.id == market_id)
        try:
            with self._engine.connect() as conn:
                row = conn.execute(query).mappings().first()
        except SQLAlchemyError as exc:
            logger.error("Failed to load market %s: %s", market_id, type(exc).__name__)
            raise MarketRepositoryError(type(exc).__name__) from exc

        if row is None:
            logger.debug("No market with id=%s.", market_id)
            return None
        return _to_market(row)
