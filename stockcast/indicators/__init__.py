"""
Indicator calculation module.

Provides the indicators offered alongside the price chart:
- Simple moving averages (padded and seeded warm-up policies)
- RSI (Relative Strength Index)

All indicators follow a unified interface and return series aligned with their input.
"""
from .base import Indicator, as_price_series
from .moving_average import (
    padded_moving_average,
    seeded_moving_average,
    MovingAverageIndicator,
    PADDED,
    SEEDED,
)
from .rsi import calculate_rsi, RSIIndicator

__all__ = [
    'Indicator',
    'as_price_series',
    'padded_moving_average',
    'seeded_moving_average',
    'MovingAverageIndicator',
    'PADDED',
    'SEEDED',
    'calculate_rsi',
    'RSIIndicator',
]
