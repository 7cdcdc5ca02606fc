"""Pydantic models for provider price data."""

from typing import Union

from pydantic import BaseModel, ConfigDict

# Opaque, compared only for equality: ISO-8601 string or epoch number
Timestamp = Union[str, int, float]


class PricePoint(BaseModel):
    """A single price observation as reported by the provider."""

    model_config = ConfigDict(frozen=True, extra="ignore", allow_inf_nan=False)

    price: float
    lastUpdatedAt: Timestamp


# Ordered price points for one ticker over a lookback window
PriceSeries = list[PricePoint]


class ProviderPriceHistory(BaseModel):
    """Body returned by the provider's /stocks/{ticker} endpoint."""

    priceHistory: list[PricePoint]
