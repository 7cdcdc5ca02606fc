"""API endpoint for price correlation between two stocks."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ingestion.stock_exchange import UpstreamError
from stock_service.api.deps import get_stock_price_service
from stock_service.api.params import parse_minutes, parse_tickers
from stock_service.models import CorrelationResponse
from stock_service.services.stock_price_service import StockPriceService

router = APIRouter()


@router.get("", response_model=CorrelationResponse)
async def get_stock_correlation(
    minutes: Optional[str] = Query(None, description="Number of minutes to look back"),
    ticker: Optional[list[str]] = Query(None, description="Exactly two stock tickers"),
    service: StockPriceService = Depends(get_stock_price_service),
) -> CorrelationResponse:
    """
    Get the Pearson correlation of two tickers' prices over the last m minutes.

    Prices are aligned on their lastUpdatedAt timestamps. correlation is null
    when it cannot be computed (different history lengths, no shared
    timestamps, a single shared timestamp, or a flat series).

    Example:
        GET /stockcorrelation?minutes=30&ticker=NVDA&ticker=PYPL
    """
    lookback = parse_minutes(minutes)
    tickers = parse_tickers(ticker)
    try:
        return await service.get_correlation(tickers, lookback)
    except UpstreamError:
        raise HTTPException(
            status_code=500, detail="Failed to fetch or correlate stock data"
        )
