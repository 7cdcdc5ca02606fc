"""Pydantic models for API responses."""

from typing import Optional

from pydantic import BaseModel

from stock_service.models.prices import PricePoint


class AggregationResult(BaseModel):
    """Average price of one ticker together with the series it was computed from."""

    averagePrice: float
    priceHistory: list[PricePoint]


class AverageStockPriceResponse(BaseModel):
    """Response for GET /stocks/{ticker}."""

    averageStockPrice: float
    priceHistory: list[PricePoint]


class CorrelationResponse(BaseModel):
    """Response for GET /stockcorrelation."""

    correlation: Optional[float] = None  # None when undefined for the input
    stocks: dict[str, AggregationResult]
