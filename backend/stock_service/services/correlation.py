"""Timestamp-aligned Pearson correlation between two price histories.

Alignment is driven by the first series: its timestamps are walked in their
original order and kept when the second series has a price at the same
timestamp. Both series are reduced to a timestamp -> price map first, so a
repeated timestamp resolves to its last price.
"""

import math
from typing import Optional

from stock_service.models import PricePoint


def align(
    series_a: list[PricePoint],
    series_b: list[PricePoint],
) -> tuple[list[float], list[float]]:
    """Return the aligned price lists (xs from series_a, ys from series_b)."""
    prices_a = {point.lastUpdatedAt: point.price for point in series_a}
    prices_b = {point.lastUpdatedAt: point.price for point in series_b}

    common = [p.lastUpdatedAt for p in series_a if p.lastUpdatedAt in prices_b]
    xs = [prices_a[ts] for ts in common]
    ys = [prices_b[ts] for ts in common]
    return xs, ys


def pearson(xs: list[float], ys: list[float]) -> Optional[float]:
    """Sample (n-1) Pearson r. Returns None if undefined.

    Undefined covers mismatched lengths, fewer than two pairs, and a zero
    standard deviation on either side.
    """
    n = len(xs)
    if n != len(ys) or n < 2:
        return None

    mean_x = sum(xs) / n
    mean_y = sum(ys) / n

    cov = 0.0
    var_x = 0.0
    var_y = 0.0
    for x, y in zip(xs, ys):
        dx = x - mean_x
        dy = y - mean_y
        cov += dx * dy
        var_x += dx * dx
        var_y += dy * dy

    cov /= n - 1
    std_x = math.sqrt(var_x / (n - 1))
    std_y = math.sqrt(var_y / (n - 1))
    if std_x == 0 or std_y == 0:
        return None

    r = cov / (std_x * std_y)
    if not math.isfinite(r):
        return None
    return r


def correlate(
    series_a: list[PricePoint],
    series_b: list[PricePoint],
) -> Optional[float]:
    """Correlation of two price histories aligned on lastUpdatedAt.

    Series of different raw lengths are never correlated, even when their
    shared timestamps would be enough to compute a value.
    """
    if len(series_a) != len(series_b):
        return None

    xs, ys = align(series_a, series_b)
    if not xs:
        return None
    return pearson(xs, ys)
