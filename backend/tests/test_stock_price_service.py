"""Tests for StockPriceService."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from ingestion.stock_exchange import UpstreamError
from stock_service.models import PricePoint
from stock_service.services.stock_price_service import StockPriceService


def _history(prices, prefix="t"):
    return [
        PricePoint(price=p, lastUpdatedAt=f"{prefix}{i}") for i, p in enumerate(prices)
    ]


def _service(histories):
    """Service whose client returns histories[ticker]."""
    client = MagicMock()

    async def fetch(ticker, minutes):
        return histories[ticker]

    client.get_price_history = AsyncMock(side_effect=fetch)
    return StockPriceService(client), client


class TestGetAverage:
    @pytest.mark.asyncio
    async def test_average_and_history(self):
        history = _history([100, 200])
        service, client = _service({"AAPL": history})

        result = await service.get_average("AAPL", 5)

        client.get_price_history.assert_awaited_once_with("AAPL", 5)
        assert result.averageStockPrice == 150
        assert result.priceHistory == history

    @pytest.mark.asyncio
    async def test_empty_history_averages_to_zero(self):
        service, _ = _service({"AAPL": []})
        result = await service.get_average("AAPL", 5)
        assert result.averageStockPrice == 0
        assert result.priceHistory == []

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(self):
        client = MagicMock()
        client.get_price_history = AsyncMock(side_effect=UpstreamError("AAPL", "boom"))
        service = StockPriceService(client)

        with pytest.raises(UpstreamError):
            await service.get_average("AAPL", 5)


class TestGetCorrelation:
    @pytest.mark.asyncio
    async def test_linearly_related_prices(self):
        service, client = _service({
            "AAPL": _history([1, 2, 3, 4]),
            "GOOG": _history([10, 20, 30, 40]),
        })

        result = await service.get_correlation(["AAPL", "GOOG"], 5)

        assert result.correlation == pytest.approx(1.0, abs=1e-9)
        assert list(result.stocks) == ["AAPL", "GOOG"]
        assert result.stocks["AAPL"].averagePrice == 2.5
        assert result.stocks["GOOG"].averagePrice == 25
        assert client.get_price_history.await_count == 2

    @pytest.mark.asyncio
    async def test_undefined_correlation_is_none(self):
        service, _ = _service({
            "AAPL": _history([1, 2, 3]),
            "GOOG": _history([1, 2]),
        })

        result = await service.get_correlation(["AAPL", "GOOG"], 5)

        assert result.correlation is None
        assert result.stocks["AAPL"].averagePrice == 2
        assert result.stocks["GOOG"].averagePrice == 1.5

    @pytest.mark.asyncio
    async def test_fetches_run_concurrently(self):
        started = []
        both_started = asyncio.Event()

        async def fetch(ticker, minutes):
            started.append(ticker)
            if len(started) == 2:
                both_started.set()
            # Sequential fetching would never reach the second call
            await asyncio.wait_for(both_started.wait(), timeout=1)
            return _history([1, 2, 3])

        client = MagicMock()
        client.get_price_history = AsyncMock(side_effect=fetch)
        service = StockPriceService(client)

        result = await service.get_correlation(["AAPL", "GOOG"], 5)

        assert sorted(started) == ["AAPL", "GOOG"]
        assert result.correlation == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.asyncio
    async def test_one_failed_fetch_fails_the_call(self):
        async def fetch(ticker, minutes):
            if ticker == "GOOG":
                raise UpstreamError(ticker, "503 Service Unavailable")
            return _history([1, 2, 3])

        client = MagicMock()
        client.get_price_history = AsyncMock(side_effect=fetch)
        service = StockPriceService(client)

        with pytest.raises(UpstreamError) as exc_info:
            await service.get_correlation(["AAPL", "GOOG"], 5)
        assert exc_info.value.ticker == "GOOG"

    @pytest.mark.asyncio
    async def test_same_ticker_twice(self):
        service, _ = _service({"AAPL": _history([5, 7, 6])})

        result = await service.get_correlation(["AAPL", "AAPL"], 5)

        assert result.correlation == pytest.approx(1.0, abs=1e-9)
        assert list(result.stocks) == ["AAPL"]

    @pytest.mark.asyncio
    async def test_requires_two_tickers(self):
        service, client = _service({})

        with pytest.raises(ValueError):
            await service.get_correlation(["AAPL", "GOOG", "MSFT"], 5)
        client.get_price_history.assert_not_awaited()
