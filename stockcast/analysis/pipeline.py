"""
Single recomputation entry point.

analyze() is a pure function of (TimeSeries, AnalysisConfig): it returns a
fresh, immutable AnalysisResult holding everything a presentation layer
needs. Call it again whenever the series or the configuration changes.
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

import pandas as pd

from .config import AnalysisConfig
from .statistics import SummaryStatistics, calculate_statistics
from ..forecast.summary import PredictionSummary, summarize_predictions
from ..forecast.trend import RandomSource, TrendForecaster
from ..indicators.moving_average import padded_moving_average
from ..indicators.rsi import calculate_rsi
from ..shared.types import Metric, Prediction, TimeSeries


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Output bundle of one analysis run."""
    series: TimeSeries
    metric: Metric
    statistics: SummaryStatistics
    indicators: Mapping[str, pd.Series] = field(default_factory=lambda: MappingProxyType({}))
    predictions: Tuple[Prediction, ...] = ()
    prediction_summary: PredictionSummary = PredictionSummary()

    @property
    def has_data(self) -> bool:
        return not self.series.is_empty


def calculate_indicators(values: pd.Series, config: AnalysisConfig) -> Dict[str, pd.Series]:
    """
    Compute the indicators enabled in config.

    Moving averages use the padded policy so they align with the raw series.
    """
    indicators: Dict[str, pd.Series] = {}
    for period in config.ma_periods:
        indicators[f"ma{period}"] = padded_moving_average(values, period)
    if config.use_rsi:
        indicators["rsi"] = calculate_rsi(values, config.rsi_period)
    return indicators


def analyze(
    series: TimeSeries,
    config: Optional[AnalysisConfig] = None,
    rng: RandomSource = None,
) -> AnalysisResult:
    """
    Compute statistics, indicators and forecast for series.

    Args:
        series: Parsed price history
        config: Analysis settings (default: AnalysisConfig())
        rng: Random source for the forecast; overrides config.seed when given

    Returns:
        AnalysisResult (empty indicators/predictions for an empty series)
    """
    config = config or AnalysisConfig()
    metric = config.metric

    statistics = calculate_statistics(series, metric)
    values = series.values(metric)
    indicators = calculate_indicators(values, config) if len(values) else {}

    forecaster = TrendForecaster(
        window=config.forecast_window,
        min_observations=config.min_observations,
        rng=rng if rng is not None else config.seed,
    )
    predictions = tuple(forecaster.predict(values, days=config.forecast_days))

    logger.info(
        f"Analyzed {len(series)} point(s) of {metric.value}: "
        f"{len(indicators)} indicator(s), {len(predictions)} prediction(s)"
    )
    return AnalysisResult(
        series=series,
        metric=metric,
        statistics=statistics,
        indicators=MappingProxyType(indicators),
        predictions=predictions,
        prediction_summary=summarize_predictions(predictions),
    )
