"""
Tests for linear trend forecasting.
"""
import math

import pytest
import numpy as np
import pandas as pd

from stockcast.forecast.trend import (
    TrendForecaster,
    predict,
    fit_linear_trend,
    calculate_volatility,
    confidence_at,
)
from stockcast.shared.types import Metric, PricePoint, TimeSeries


def _series(values, start="2024-01-01"):
    """Daily series starting at start."""
    dates = pd.date_range(start, periods=len(values), freq="D")
    return pd.Series(values, index=dates, dtype=float)


def _random_walk(days=120, seed=3):
    rng = np.random.default_rng(seed)
    return _series(100 + np.cumsum(rng.normal(0, 1, days)))


class TestFitLinearTrend:
    """Test closed-form least squares fit."""

    def test_exact_line(self):
        slope, intercept = fit_linear_trend([1.0, 3.0, 5.0, 7.0])
        assert slope == pytest.approx(2.0)
        assert intercept == pytest.approx(1.0)

    def test_constant(self):
        slope, intercept = fit_linear_trend([100.0] * 60)
        assert slope == 0.0
        assert intercept == 100.0

    def test_matches_polyfit(self):
        values = _random_walk(60).to_numpy()
        slope, intercept = fit_linear_trend(values)
        expected_slope, expected_intercept = np.polyfit(np.arange(60), values, 1)
        assert slope == pytest.approx(expected_slope)
        assert intercept == pytest.approx(expected_intercept)

    def test_degenerate_inputs_do_not_divide_by_zero(self):
        assert fit_linear_trend([5.0]) == (0.0, 5.0)
        assert fit_linear_trend([]) == (0.0, 0.0)


class TestVolatility:
    """Test return volatility in price units."""

    def test_constant_series(self):
        assert calculate_volatility([100.0] * 10) == 0.0

    def test_too_short(self):
        assert calculate_volatility([100.0]) == 0.0
        assert calculate_volatility([]) == 0.0

    def test_known_value(self):
        # returns +10%, -10%: mean 0, population std 0.1, scaled by last value 99
        assert calculate_volatility([100.0, 110.0, 99.0]) == pytest.approx(9.9)

    def test_zero_base_returns_excluded(self):
        # only returns +100% and -50% are defined: std 0.75, scaled by 10
        vol = calculate_volatility([0.0, 10.0, 20.0, 10.0])
        assert math.isfinite(vol)
        assert vol == pytest.approx(7.5)


class TestConfidence:
    """Test confidence decay."""

    def test_first_steps(self):
        expected = [0.814, 0.737, 0.667, 0.603, 0.546]
        actual = [confidence_at(i) for i in range(1, 6)]
        assert actual == pytest.approx(expected, abs=1e-3)

    def test_floor(self):
        assert confidence_at(100) == 0.3
        assert confidence_at(10) > 0.3


class TestTrendForecaster:
    """Test TrendForecaster.predict."""

    def test_too_few_observations(self):
        assert TrendForecaster(rng=1).predict(_series([1.0] * 9)) == []

    def test_minimum_observations(self):
        predictions = TrendForecaster(rng=1).predict(_series([1.0] * 10), days=30)
        assert len(predictions) == 30

    def test_dates_follow_last_date_without_gaps(self):
        series = _random_walk(90)
        predictions = TrendForecaster(rng=1).predict(series, days=30)
        assert len(predictions) == 30
        expected = pd.date_range(series.index[-1] + pd.Timedelta(days=1), periods=30, freq="D")
        assert [p.date for p in predictions] == list(expected)

    def test_constant_series_example(self):
        predictions = TrendForecaster(rng=1).predict(_series([100.0] * 60), days=5)
        assert [p.predicted for p in predictions] == [100.0] * 5
        assert [p.confidence for p in predictions] == pytest.approx(
            [0.814, 0.737, 0.667, 0.603, 0.546], abs=1e-3
        )

    def test_confidence_monotonic_and_bounded(self):
        predictions = TrendForecaster(rng=1).predict(_random_walk(), days=60)
        confidences = [p.confidence for p in predictions]
        assert all(0.3 <= c <= 0.9 for c in confidences)
        assert all(a >= b for a, b in zip(confidences, confidences[1:]))

    def test_predictions_clamped_at_zero(self):
        falling = _series(np.linspace(100.0, 5.0, 60))
        predictions = TrendForecaster(rng=1).predict(falling, days=30)
        assert all(p.predicted >= 0 for p in predictions)
        assert predictions[-1].predicted == 0.0

    def test_uses_only_recent_window(self):
        values = [1000.0] * 40 + [50.0] * 60
        predictions = TrendForecaster(rng=1).predict(_series(values), days=10)
        assert [p.predicted for p in predictions] == [50.0] * 10

    def test_linear_trend_extrapolated_with_bounded_noise(self):
        line = _series(np.arange(60) * 2.0 + 10.0)
        predictions = TrendForecaster(rng=1).predict(line, days=3)
        # noise term is bounded by volatility * sqrt(i) / 2
        vol = calculate_volatility(line.to_numpy())
        for i, p in enumerate(predictions, start=1):
            expected = 2.0 * (60 + i - 1) + 10.0
            assert abs(p.predicted - expected) <= vol * math.sqrt(i) / 2 + 1e-9

    def test_seeded_forecasts_are_reproducible(self):
        series = _random_walk()
        a = TrendForecaster(rng=np.random.default_rng(123)).predict(series)
        b = TrendForecaster(rng=np.random.default_rng(123)).predict(series)
        c = TrendForecaster(rng=np.random.default_rng(321)).predict(series)
        assert a == b
        assert a != c

    def test_accepts_time_series_with_metric(self):
        dates = pd.date_range("2024-01-01", periods=20, freq="D")
        ts = TimeSeries(tuple(
            PricePoint(date=d, close=10.0, volume=5000.0) for d in dates
        ))
        predictions = TrendForecaster(rng=1).predict(ts, days=3, metric=Metric.VOLUME)
        assert [p.predicted for p in predictions] == [5000.0] * 3
        assert predictions[0].date == pd.Timestamp("2024-01-21")

    def test_string_index_converted(self):
        series = pd.Series([1.0] * 12, index=[f"2024-02-{d:02d}" for d in range(1, 13)])
        predictions = TrendForecaster(rng=1).predict(series, days=1)
        assert predictions[0].date == pd.Timestamp("2024-02-13")

    def test_days_zero_and_negative(self):
        forecaster = TrendForecaster(rng=1)
        assert forecaster.predict(_random_walk(), days=0) == []
        with pytest.raises(ValueError, match="days must be >= 0"):
            forecaster.predict(_random_walk(), days=-1)

    def test_invalid_parameters(self):
        with pytest.raises(ValueError):
            TrendForecaster(window=1)
        with pytest.raises(ValueError):
            TrendForecaster(base_confidence=0.2, confidence_floor=0.3)
        with pytest.raises(ValueError):
            TrendForecaster(decay_scale=0)


def test_module_level_predict():
    predictions = predict(_series([100.0] * 60), metric=Metric.CLOSE, days=4, rng=9)
    assert [p.predicted for p in predictions] == [100.0] * 4
