"""FastAPI application entry point for the stock price statistics service."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ingestion.stock_exchange import StockExchangeClient
from stock_service.config import settings
from stock_service.api.routes import correlation, health, stocks

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown."""
    # Startup
    app.state.exchange_client = StockExchangeClient()
    logger.info(f"Using price-history provider at {settings.STOCK_API_BASE_URL}")
    yield
    # Shutdown
    await app.state.exchange_client.close()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Average price and price correlation over remote stock price histories",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, tags=["Health"])
app.include_router(stocks.router, prefix="/stocks", tags=["Stocks"])
app.include_router(correlation.router, prefix="/stockcorrelation", tags=["Correlation"])


@app.get("/")
async def root() -> dict[str, Any]:
    """Root endpoint describing the available API."""
    return {
        "message": "Stock API is running",
        "endpoints": {
            "/stocks/:ticker": {
                "method": "GET",
                "description": "Get average stock price for a ticker",
                "queryParams": {
                    "minutes": "Number of minutes to look back",
                    "aggregation": 'Must be "average"',
                },
            },
            "/stockcorrelation": {
                "method": "GET",
                "description": "Get correlation between two stocks",
                "queryParams": {
                    "minutes": "Number of minutes to look back",
                    "ticker": "Array of two stock tickers",
                },
            },
        },
    }


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
