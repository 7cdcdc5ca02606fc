"""Async client for the remote stock exchange price-history API."""

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from stock_service.config import settings
from stock_service.models import PricePoint, ProviderPriceHistory

logger = logging.getLogger(__name__)


class UpstreamError(Exception):
    """Raised when the provider cannot return a usable price history."""

    def __init__(self, ticker: str, message: str):
        self.ticker = ticker
        self.message = message
        super().__init__(f"{ticker}: {message}")


class StockExchangeClient:
    """Fetches price histories from GET {base}/stocks/{ticker}?minutes={n}."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.STOCK_API_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.STOCK_API_TIMEOUT
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def get_price_history(self, ticker: str, minutes: int) -> list[PricePoint]:
        """
        Fetch the price history of *ticker* over the last *minutes* minutes.

        Raises:
            UpstreamError: on network failure, a non-2xx status, or a body
                without a valid priceHistory list.
        """
        client = await self._get_client()
        path = f"/stocks/{ticker}"

        logger.debug(f"Requesting: {self.base_url}{path}?minutes={minutes}")
        try:
            response = await client.get(path, params={"minutes": minutes})
            response.raise_for_status()
            body = ProviderPriceHistory.model_validate(response.json())
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch price history for {ticker}: {e}")
            raise UpstreamError(ticker, str(e)) from e
        except (ValueError, ValidationError) as e:
            # ValueError covers an undecodable JSON body
            logger.error(f"Malformed price history for {ticker}: {e}")
            raise UpstreamError(ticker, "malformed response body") from e

        logger.debug(f"Fetched {len(body.priceHistory)} price points for {ticker}")
        return body.priceHistory
