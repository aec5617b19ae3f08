"""
Short-horizon price forecast by linear trend extrapolation.

The last FORECAST_WINDOW observations are fitted with ordinary least squares.
Each future day i adds a uniform random-walk term scaled by the empirical
volatility and sqrt(i); confidence decays exponentially with i toward a floor.

The random source is injectable (numpy Generator or seed) so forecasts can be
reproduced exactly.
"""
import logging
import math
from typing import List, Optional, Tuple, Union

import numpy as np
import pandas as pd

from ..shared.defaults import (
    FORECAST_DAYS, FORECAST_WINDOW, MIN_FORECAST_OBSERVATIONS,
    BASE_CONFIDENCE, CONFIDENCE_FLOOR, CONFIDENCE_DECAY_SCALE,
)
from ..shared.types import Metric, Prediction, TimeSeries


logger = logging.getLogger(__name__)

RandomSource = Optional[Union[int, np.random.Generator]]


def fit_linear_trend(values) -> Tuple[float, float]:
    """
    Fit y = slope * x + intercept over x = 0..n-1 (closed-form least squares).

    Returns:
        (slope, intercept); slope is 0 and intercept the mean when the fit is
        degenerate (fewer than 2 points)
    """
    y = np.asarray(values, dtype=float)
    n = len(y)
    if n == 0:
        return 0.0, 0.0
    x = np.arange(n, dtype=float)

    sum_x = x.sum()
    sum_y = y.sum()
    sum_xy = (x * y).sum()
    sum_xx = (x * x).sum()

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        return 0.0, float(sum_y / n)

    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return float(slope), float(intercept)


def calculate_volatility(values) -> float:
    """
    Standard deviation of single-period relative returns, in price units.

    Population variance of the returns is used; the result is scaled by the
    last value. Returns from a zero base are undefined and left out.
    """
    prices = np.asarray(values, dtype=float)
    if len(prices) < 2:
        return 0.0

    base = prices[:-1]
    valid = base != 0
    if not valid.all():
        logger.debug(f"Ignoring {int((~valid).sum())} return(s) with zero base value")
    returns = np.diff(prices)[valid] / base[valid]
    if len(returns) == 0:
        return 0.0

    mean = returns.mean()
    variance = ((returns - mean) ** 2).mean()
    return float(math.sqrt(variance) * prices[-1])


def confidence_at(
    step: int,
    base: float = BASE_CONFIDENCE,
    floor: float = CONFIDENCE_FLOOR,
    scale: float = CONFIDENCE_DECAY_SCALE,
) -> float:
    """Confidence for the step-th day ahead: max(floor, base * exp(-step / scale))."""
    return max(floor, base * math.exp(-step / scale))


class TrendForecaster:
    """Projects future values from a linear trend plus volatility-scaled noise."""

    def __init__(
        self,
        window: int = FORECAST_WINDOW,
        min_observations: int = MIN_FORECAST_OBSERVATIONS,
        base_confidence: float = BASE_CONFIDENCE,
        confidence_floor: float = CONFIDENCE_FLOOR,
        decay_scale: float = CONFIDENCE_DECAY_SCALE,
        rng: RandomSource = None,
    ):
        """
        Initialize the forecaster.

        Args:
            window: Number of most recent observations used for the fit
            min_observations: Below this many observations predict() returns []
            base_confidence: Confidence before decay
            confidence_floor: Lower bound for confidence
            decay_scale: Days for confidence to shrink by a factor of e
            rng: numpy Generator or integer seed (None = fresh OS entropy)
        """
        if window < 2:
            raise ValueError(f"window must be >= 2, got {window}")
        if min_observations < 2:
            raise ValueError(f"min_observations must be >= 2, got {min_observations}")
        if not (0 <= confidence_floor <= base_confidence <= 1):
            raise ValueError(
                f"Expected 0 <= confidence_floor ({confidence_floor}) <= "
                f"base_confidence ({base_confidence}) <= 1"
            )
        if decay_scale <= 0:
            raise ValueError(f"decay_scale must be > 0, got {decay_scale}")
        self.window = window
        self.min_observations = min_observations
        self.base_confidence = base_confidence
        self.confidence_floor = confidence_floor
        self.decay_scale = decay_scale
        self.rng = np.random.default_rng(rng)

    def predict(
        self,
        series: Union[TimeSeries, pd.Series],
        days: int = FORECAST_DAYS,
        metric: Metric = Metric.CLOSE,
    ) -> List[Prediction]:
        """
        Forecast the next `days` calendar days.

        Args:
            series: TimeSeries (metric selects the field) or a date-indexed Series
            days: Number of days to forecast
            metric: Field used when series is a TimeSeries

        Returns:
            Predictions for last date + 1 .. last date + days (empty if too little data)
        """
        if days < 0:
            raise ValueError(f"days must be >= 0, got {days}")

        if isinstance(series, TimeSeries):
            values = series.values(metric)
        else:
            values = series
            if not isinstance(values.index, pd.DatetimeIndex):
                values = values.set_axis(pd.to_datetime(values.index))

        if len(values) < self.min_observations:
            logger.info(
                f"Not enough data to forecast ({len(values)} < {self.min_observations} observations)"
            )
            return []

        n = min(len(values), self.window)
        recent = values.iloc[-n:].to_numpy(dtype=float)
        slope, intercept = fit_linear_trend(recent)
        volatility = calculate_volatility(recent)
        last_date = pd.Timestamp(values.index[-1]).normalize()
        logger.debug(
            f"Trend fit over {n} points: slope={slope:.6g}, intercept={intercept:.6g}, "
            f"volatility={volatility:.6g}"
        )

        predictions = []
        for i in range(1, days + 1):
            trend_value = slope * (n + i - 1) + intercept
            random_component = (self.rng.random() - 0.5) * volatility * math.sqrt(i)
            predictions.append(Prediction(
                date=last_date + pd.Timedelta(days=i),
                predicted=max(0.0, trend_value + random_component),
                confidence=confidence_at(
                    i, self.base_confidence, self.confidence_floor, self.decay_scale
                ),
            ))
        return predictions


def predict(
    series: Union[TimeSeries, pd.Series],
    metric: Metric = Metric.CLOSE,
    days: int = FORECAST_DAYS,
    rng: RandomSource = None,
) -> List[Prediction]:
    """Forecast with default settings. See TrendForecaster.predict."""
    return TrendForecaster(rng=rng).predict(series, days=days, metric=metric)
