"""
Shared types and defaults for the price analysis pipeline.

This module provides:
- Metric enum, PricePoint, TimeSeries and Prediction
- Centralized default values for indicator and forecast parameters
- Logging setup for embedding applications
"""
from .types import Metric, PricePoint, TimeSeries, Prediction, METRIC_ACCESSORS
from .defaults import (
    MA_PERIODS, RSI_PERIOD, RSI_NEUTRAL,
    FORECAST_DAYS, FORECAST_WINDOW, MIN_FORECAST_OBSERVATIONS,
    BASE_CONFIDENCE, CONFIDENCE_FLOOR, CONFIDENCE_DECAY_SCALE,
)
from .log import setup_logging

__all__ = [
    'Metric',
    'PricePoint',
    'TimeSeries',
    'Prediction',
    'METRIC_ACCESSORS',
    'MA_PERIODS',
    'RSI_PERIOD',
    'RSI_NEUTRAL',
    'FORECAST_DAYS',
    'FORECAST_WINDOW',
    'MIN_FORECAST_OBSERVATIONS',
    'BASE_CONFIDENCE',
    'CONFIDENCE_FLOOR',
    'CONFIDENCE_DECAY_SCALE',
    'setup_logging',
]
