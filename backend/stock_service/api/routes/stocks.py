"""API endpoint for average stock price."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ingestion.stock_exchange import UpstreamError
from stock_service.api.deps import get_stock_price_service
from stock_service.api.params import parse_minutes, require_aggregation
from stock_service.models import AverageStockPriceResponse
from stock_service.services.aggregation import SUPPORTED_AGGREGATIONS
from stock_service.services.stock_price_service import StockPriceService

router = APIRouter()


@router.get("/{ticker}", response_model=AverageStockPriceResponse)
async def get_average_stock_price(
    ticker: str,
    minutes: Optional[str] = Query(None, description="Number of minutes to look back"),
    aggregation: Optional[str] = Query(None, description='Must be "average"'),
    service: StockPriceService = Depends(get_stock_price_service),
) -> AverageStockPriceResponse:
    """
    Get the average price of a ticker over the last m minutes.

    Example:
        GET /stocks/AAPL?minutes=30&aggregation=average
    """
    lookback = parse_minutes(minutes)
    require_aggregation(aggregation, SUPPORTED_AGGREGATIONS)
    try:
        return await service.get_average(ticker, lookback)
    except UpstreamError:
        raise HTTPException(status_code=500, detail="Failed to fetch stock data")
