"""Price aggregation over a single ticker's price history."""

from stock_service.models import AggregationResult, PricePoint

# Aggregation names accepted by GET /stocks/{ticker}
SUPPORTED_AGGREGATIONS = {"average"}


def average(series: list[PricePoint]) -> float:
    """Arithmetic mean of the prices in *series*, 0.0 when it is empty."""
    if not series:
        return 0.0
    return sum(point.price for point in series) / len(series)


def aggregate(series: list[PricePoint]) -> AggregationResult:
    return AggregationResult(averagePrice=average(series), priceHistory=series)
