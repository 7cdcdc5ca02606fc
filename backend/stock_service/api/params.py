"""Query parameter parsing shared by the stock routes."""

from typing import Optional, Union

from fastapi import HTTPException

INVALID_PARAMETERS = "Missing or invalid parameters"
TICKER_COUNT = "Exactly 2 tickers required"

# A query parameter is absent, given once, or repeated
QueryValue = Union[None, str, list[str]]


def normalize(value: QueryValue) -> list[str]:
    """Flatten a query value into an ordered list, keeping every given value."""
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def parse_minutes(value: QueryValue) -> int:
    """Lookback window in minutes. Raises HTTP 400 unless a positive integer."""
    values = normalize(value)
    if not values:
        raise HTTPException(status_code=400, detail=INVALID_PARAMETERS)
    try:
        minutes = int(values[0])
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_PARAMETERS)
    if minutes < 1:
        raise HTTPException(status_code=400, detail=INVALID_PARAMETERS)
    return minutes


def parse_tickers(value: QueryValue) -> list[str]:
    """Exactly two tickers. Empty values count towards the total."""
    tickers = normalize(value)
    if not any(tickers):
        raise HTTPException(status_code=400, detail=INVALID_PARAMETERS)
    if len(tickers) != 2:
        raise HTTPException(status_code=400, detail=TICKER_COUNT)
    if not all(tickers):
        raise HTTPException(status_code=400, detail=INVALID_PARAMETERS)
    return tickers


def require_aggregation(value: Optional[str], supported: set[str]) -> str:
    if not value or value not in supported:
        raise HTTPException(status_code=400, detail=INVALID_PARAMETERS)
    return value
