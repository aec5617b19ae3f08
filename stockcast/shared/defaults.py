"""
Centralized default values for indicator and forecast parameters.

This is the SINGLE SOURCE OF TRUTH for all numeric defaults.
All modules should import from here to ensure consistency.
"""

# Moving averages offered on the chart (days)
MA_PERIODS = (7, 30, 90)

# RSI (Relative Strength Index) defaults
RSI_PERIOD = 14
RSI_NEUTRAL = 50.0  # Value emitted in the warm-up region

# Trend forecast defaults
FORECAST_DAYS = 30
FORECAST_WINDOW = 60  # Most recent observations used for the trend fit
MIN_FORECAST_OBSERVATIONS = 10  # Below this no forecast is produced

# Confidence decay: max(floor, base * exp(-i / scale))
BASE_CONFIDENCE = 0.9
CONFIDENCE_FLOOR = 0.3
CONFIDENCE_DECAY_SCALE = 10.0

# Confidence bands for presenting predictions
HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.6

# Number of leading predictions averaged for the weekly outlook
WEEK_DAYS = 7
