"""
Forecasting module.

Provides linear-trend forecasting with a volatility-scaled random walk and
decaying confidence, plus summary figures for the resulting predictions.
"""
from .trend import (
    TrendForecaster,
    predict,
    fit_linear_trend,
    calculate_volatility,
    confidence_at,
)
from .summary import PredictionSummary, summarize_predictions, confidence_band

__all__ = [
    'TrendForecaster',
    'predict',
    'fit_linear_trend',
    'calculate_volatility',
    'confidence_at',
    'PredictionSummary',
    'summarize_predictions',
    'confidence_band',
]
