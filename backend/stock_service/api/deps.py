"""FastAPI dependencies."""

from fastapi import Request

from stock_service.services.stock_price_service import StockPriceService


def get_stock_price_service(request: Request) -> StockPriceService:
    """Service bound to the exchange client opened in the app lifespan."""
    return StockPriceService(request.app.state.exchange_client)
