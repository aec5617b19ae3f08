"""
Base indicator interface.

All indicators should follow this pattern:
1. Calculate a derived series from a scalar price series
2. Keep the input index so the result aligns point-for-point with the input
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union
import pandas as pd

PriceInput = Union[pd.Series, Sequence[float]]


def as_price_series(prices: PriceInput) -> pd.Series:
    """Return prices as a float Series; the input is never modified."""
    if isinstance(prices, pd.Series):
        return prices.astype(float)
    return pd.Series(list(prices), dtype=float)


def validate_period(period: int) -> int:
    """Raise ValueError unless period is a positive integer."""
    if int(period) != period or period < 1:
        raise ValueError(f"period must be a positive integer, got {period}")
    return int(period)


class Indicator(ABC):
    """
    Base class for all indicators.

    Indicators are pure: they never mutate their input and always return a
    series of the same length and index.
    """

    name: str = "indicator"

    @abstractmethod
    def calculate(self, prices: PriceInput) -> pd.Series:
        """
        Calculate indicator values from price data.

        Args:
            prices: Scalar price series (typically date-indexed)

        Returns:
            Series with indicator values (same index as prices)
        """
        pass

    def get_value_at(self, prices: pd.Series, timestamp: pd.Timestamp) -> Optional[float]:
        """
        Get indicator value at a specific timestamp.

        Returns:
            Indicator value at timestamp, or None if absent or not in the index
        """
        values = self.calculate(prices)
        if timestamp in values.index:
            val = values[timestamp]
            return None if pd.isna(val) else float(val)
        return None
