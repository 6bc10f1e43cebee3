"""
Tests for the MarketQueryAdapter.

Use cases are replaced by AsyncMocks; the logger is injected so that
diagnostics can be asserted without touching global logging.
"""

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.domain.markets.entities import (
    Market,
    MarketFilters,
    MarketList,
    MarketStatus,
    SortBy,
    SortOrder,
)
from app.domain.markets.errors import MarketNotFoundError, MarketRepositoryError
from app.interfaces.markets.query_adapter import (
    FailureKind,
    MarketQueryAdapter,
    ResponseEnvelope,
    classify_failure,
    failure_message,
)

MARKET = Market(
    id="m1",
    question="Will it rain?",
    description=None,
    status=MarketStatus.OPEN,
    creator_id="alice",
    create_tms=datetime(2024, 1, 1, 12, 0),
    resolution_time=datetime(2024, 2, 1, 12, 0),
)


def _adapter(list_result=None, list_error=None, get_result=None, get_error=None):
    get_markets = MagicMock()
    get_markets.execute = AsyncMock(return_value=list_result, side_effect=list_error)
    get_by_id = MagicMock()
    get_by_id.execute = AsyncMock(return_value=get_result, side_effect=get_error)
    log = MagicMock()
    adapter = MarketQueryAdapter(
        get_markets=get_markets, get_market_by_id=get_by_id, log=log
    )
    return adapter, get_markets, get_by_id, log


class TestListMarkets:
    @pytest.mark.asyncio
    async def test_forwards_parsed_filters(self) -> None:
        page = MarketList(markets=[MARKET], total=1, limit=10, offset=0)
        adapter, get_markets, _, _ = _adapter(list_result=page)

        envelope = await adapter.list_markets(
            {"limit": "10", "offset": "0", "sortBy": "createTms", "sortOrder": "desc"}
        )

        get_markets.execute.assert_awaited_once_with(
            MarketFilters(
                limit=10, offset=0, sort_by=SortBy.CREATE_TMS, sort_order=SortOrder.DESC
            )
        )
        assert envelope.status_code == 200
        assert envelope.body["total"] == 1
        assert envelope.body["markets"][0]["id"] == "m1"
        assert envelope.body["markets"][0]["creatorId"] == "alice"
        assert envelope.body["markets"][0]["createTms"] == "2024-01-01T12:00:00"

    @pytest.mark.asyncio
    async def test_unknown_keys_not_forwarded(self) -> None:
        adapter, get_markets, _, _ = _adapter(list_result=MarketList())
        await adapter.list_markets({"foo": "bar", "sortBy": "name"})
        get_markets.execute.assert_awaited_once_with(MarketFilters())

    @pytest.mark.asyncio
    async def test_failure_maps_to_500(self) -> None:
        adapter, _, _, log = _adapter(list_error=RuntimeError("db down"))
        envelope = await adapter.list_markets({})
        assert envelope == ResponseEnvelope(
            500, {"error": "Internal server error", "message": "db down"}
        )
        log.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_not_found_is_not_distinguished_on_list(self) -> None:
        adapter, _, _, _ = _adapter(list_error=MarketNotFoundError("x", "gone"))
        envelope = await adapter.list_markets({})
        assert envelope.status_code == 500
        assert envelope.body["error"] == "Internal server error"

    @pytest.mark.asyncio
    async def test_empty_message_falls_back(self) -> None:
        adapter, _, _, _ = _adapter(list_error=RuntimeError())
        envelope = await adapter.list_markets({})
        assert envelope.body == {"error": "Internal server error", "message": "Unknown error"}

    @pytest.mark.asyncio
    async def test_oversized_limit_rejected_without_call(self) -> None:
        adapter, get_markets, _, _ = _adapter(list_result=MarketList())
        envelope = await adapter.list_markets({"limit": "9" * 5000})
        assert envelope.status_code == 400
        assert envelope.body["error"] == "Invalid query parameter"
        get_markets.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_limit_rejected_without_call(self) -> None:
        adapter, get_markets, _, _ = _adapter(list_result=MarketList())
        envelope = await adapter.list_markets({"limit": "ten"})
        assert envelope.status_code == 400
        assert envelope.body["error"] == "Invalid query parameter"
        assert "limit" in envelope.body["message"]
        get_markets.execute.assert_not_awaited()


class TestGetMarketById:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["", None])
    async def test_missing_id_is_400(self, raw_id) -> None:
        adapter, _, get_by_id, log = _adapter(get_result=MARKET)
        envelope = await adapter.get_market_by_id(raw_id)
        assert envelope == ResponseEnvelope(400, {"error": "Market ID is required"})
        get_by_id.execute.assert_not_awaited()
        log.error.assert_not_called()

    @pytest.mark.asyncio
    async def test_success(self) -> None:
        adapter, _, get_by_id, _ = _adapter(get_result=MARKET)
        envelope = await adapter.get_market_by_id("m1")
        get_by_id.execute.assert_awaited_once_with("m1")
        assert envelope.status_code == 200
        assert envelope.body == {
            "id": "m1",
            "question": "Will it rain?",
            "description": None,
            "status": "open",
            "creatorId": "alice",
            "createTms": "2024-01-01T12:00:00",
            "resolutionTime": "2024-02-01T12:00:00",
            "outcome": None,
        }

    @pytest.mark.asyncio
    async def test_not_found_is_404(self) -> None:
        adapter, _, _, log = _adapter(get_error=MarketNotFoundError("m1", "no market m1"))
        envelope = await adapter.get_market_by_id("m1")
        assert envelope == ResponseEnvelope(
            404, {"error": "Market not found", "message": "no market m1"}
        )
        log.warning.assert_called_once()

    @pytest.mark.asyncio
    async def test_generic_failure_is_500(self) -> None:
        adapter, _, _, log = _adapter(get_error=RuntimeError("db down"))
        envelope = await adapter.get_market_by_id("m1")
        assert envelope == ResponseEnvelope(
            500, {"error": "Internal server error", "message": "db down"}
        )
        log.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_repository_failure_message_passed_through(self) -> None:
        adapter, _, _, _ = _adapter(get_error=MarketRepositoryError("OperationalError"))
        envelope = await adapter.get_market_by_id("m1")
        assert envelope.status_code == 500
        assert envelope.body["message"] == "Market repository failure: OperationalError"

    @pytest.mark.asyncio
    async def test_identical_calls_give_identical_envelopes(self) -> None:
        adapter, _, _, _ = _adapter(get_result=MARKET)
        first = await adapter.get_market_by_id("m1")
        second = await adapter.get_market_by_id("m1")
        assert first == second
        assert first.to_response().body == second.to_response().body


class TestFailureClassification:
    def test_not_found(self) -> None:
        assert classify_failure(MarketNotFoundError("m1")) is FailureKind.NOT_FOUND

    @pytest.mark.parametrize(
        "exc", [RuntimeError("x"), MarketRepositoryError("x"), KeyError("k")]
    )
    def test_everything_else_unclassified(self, exc) -> None:
        assert classify_failure(exc) is FailureKind.UNCLASSIFIED

    def test_message_prefers_domain_message(self) -> None:
        assert failure_message(MarketNotFoundError("m1")) == "Market not found: m1"

    def test_message_fallback(self) -> None:
        assert failure_message(ValueError("")) == "Unknown error"
