"""
Relative Strength Index.

RSI = 100 - (100 / (1 + RS)), RS = Average Gain / Average Loss, where the
averages are simple means of the trailing `period` day-over-day gains and
losses. Warm-up indices (and the first point, which has no delta) are 50.
"""
import numpy as np
import pandas as pd

from .base import Indicator, PriceInput, as_price_series, validate_period
from ..shared.defaults import RSI_PERIOD, RSI_NEUTRAL


def calculate_rsi(prices: PriceInput, period: int = RSI_PERIOD) -> pd.Series:
    """
    Calculate RSI over a price series.

    Args:
        prices: Scalar price series
        period: Number of deltas averaged per value

    Returns:
        Series of RSI values in [0, 100], same index and length as prices
    """
    period = validate_period(period)
    prices = as_price_series(prices)
    if len(prices) == 0:
        return prices.copy()

    delta = prices.diff().iloc[1:]
    gain = delta.clip(lower=0.0)
    loss = (-delta).clip(lower=0.0)

    avg_gain = gain.rolling(window=period, min_periods=period).mean()
    avg_loss = loss.rolling(window=period, min_periods=period).mean()

    with np.errstate(divide="ignore", invalid="ignore"):
        rsi = 100 - (100 / (1 + avg_gain / avg_loss))
    rsi = rsi.where(avg_loss != 0, 100.0)
    rsi = rsi.where(avg_gain.notna(), RSI_NEUTRAL)

    first = pd.Series([RSI_NEUTRAL], index=prices.index[:1])
    return pd.concat([first, rsi]).astype(float)


class RSIIndicator(Indicator):
    """Relative Strength Index indicator."""

    name = "rsi"

    def __init__(self, period: int = RSI_PERIOD):
        self.period = validate_period(period)

    def calculate(self, prices: PriceInput) -> pd.Series:
        """Calculate RSI values."""
        return calculate_rsi(prices, self.period)
