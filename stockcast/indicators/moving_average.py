"""
Simple moving averages.

Two warm-up policies exist and each call site picks one explicitly:
- padded: indices before the window is full are absent (NaN), so the result
  lines up with the raw series on a chart
- seeded: indices before the window is full carry the raw value
"""
import numpy as np
import pandas as pd

from .base import Indicator, PriceInput, as_price_series, validate_period

PADDED = "padded"
SEEDED = "seeded"
POLICIES = (PADDED, SEEDED)


def padded_moving_average(prices: PriceInput, period: int) -> pd.Series:
    """Trailing mean over period values; NaN for the first period-1 indices."""
    period = validate_period(period)
    prices = as_price_series(prices)
    return prices.rolling(window=period, min_periods=period).mean()


def seeded_moving_average(prices: PriceInput, period: int) -> pd.Series:
    """Trailing mean over period values; the raw value for the first period-1 indices."""
    period = validate_period(period)
    prices = as_price_series(prices)
    ma = prices.rolling(window=period, min_periods=period).mean()
    return ma.where(np.arange(len(prices)) >= period - 1, prices)


class MovingAverageIndicator(Indicator):
    """Simple moving average indicator with an explicit warm-up policy."""

    def __init__(self, period: int, policy: str = PADDED):
        if policy not in POLICIES:
            raise ValueError(f"policy must be one of {POLICIES}, got '{policy}'")
        self.period = validate_period(period)
        self.policy = policy
        self.name = f"ma{self.period}"

    def calculate(self, prices: PriceInput) -> pd.Series:
        """Calculate moving average values."""
        if self.policy == SEEDED:
            return seeded_moving_average(prices, self.period)
        return padded_moving_average(prices, self.period)
