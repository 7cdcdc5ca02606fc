"""Service combining provider price histories with price statistics."""

import asyncio
import logging

from ingestion.stock_exchange import StockExchangeClient
from stock_service.models import AverageStockPriceResponse, CorrelationResponse
from stock_service.services.aggregation import aggregate, average
from stock_service.services.correlation import correlate

logger = logging.getLogger(__name__)


class StockPriceService:
    """Fetches price histories and computes averages and correlations."""

    def __init__(self, client: StockExchangeClient):
        self.client = client

    async def get_average(self, ticker: str, minutes: int) -> AverageStockPriceResponse:
        """
        Average price of a ticker over the lookback window.

        Args:
            ticker: Stock ticker symbol (e.g., "AAPL")
            minutes: Lookback window in minutes

        Returns:
            AverageStockPriceResponse with the mean price and the raw history
        """
        history = await self.client.get_price_history(ticker, minutes)
        return AverageStockPriceResponse(
            averageStockPrice=average(history),
            priceHistory=history,
        )

    async def get_correlation(self, tickers: list[str], minutes: int) -> CorrelationResponse:
        """
        Correlation of two tickers' prices over the lookback window.

        Both histories are fetched concurrently; the first UpstreamError fails
        the whole call.
        """
        if len(tickers) != 2:
            raise ValueError(f"Exactly 2 tickers required, got {len(tickers)}")

        first, second = tickers
        history_a, history_b = await asyncio.gather(
            self.client.get_price_history(first, minutes),
            self.client.get_price_history(second, minutes),
        )

        correlation = correlate(history_a, history_b)
        if correlation is None:
            logger.info(f"Correlation undefined for {first}/{second} over {minutes}m")

        return CorrelationResponse(
            correlation=correlation,
            stocks={
                first: aggregate(history_a),
                second: aggregate(history_b),
            },
        )
