"""Stock exchange price-history ingestion module."""

from ingestion.stock_exchange.exchange_client import StockExchangeClient, UpstreamError

__all__ = [
    "StockExchangeClient",
    "UpstreamError",
]
