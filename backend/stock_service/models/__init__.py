"""Pydantic models for the stock price statistics service."""

from stock_service.models.prices import (
    PricePoint,
    PriceSeries,
    ProviderPriceHistory,
)
from stock_service.models.responses import (
    AggregationResult,
    AverageStockPriceResponse,
    CorrelationResponse,
)

__all__ = [
    # Prices
    "PricePoint",
    "PriceSeries",
    "ProviderPriceHistory",
    # Responses
    "AggregationResult",
    "AverageStockPriceResponse",
    "CorrelationResponse",
]
