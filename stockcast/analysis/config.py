"""
Analysis configuration.

Holds the user-facing choices (metric, indicator toggles, forecast horizon)
that drive a recomputation. Validation runs at construction time (fail fast
with clear errors). Configurations can be loaded from and saved to YAML.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple, Union

import yaml

from ..shared.defaults import (
    RSI_PERIOD,
    FORECAST_DAYS, FORECAST_WINDOW, MIN_FORECAST_OBSERVATIONS,
)
from ..shared.types import Metric


def _validate_config(
    *,
    ma_periods: Tuple[int, ...],
    rsi_period: int,
    forecast_days: int,
    forecast_window: int,
    min_observations: int,
) -> None:
    """Validate indicator and forecast parameters. Raises ValueError with clear message on failure."""
    for period in ma_periods:
        if not isinstance(period, int) or period < 1:
            raise ValueError(f"Moving average periods must be positive integers, got {period!r}")
    if len(set(ma_periods)) != len(ma_periods):
        raise ValueError(f"Moving average periods must be unique, got {list(ma_periods)}")
    if rsi_period < 1:
        raise ValueError(f"rsi_period must be >= 1, got {rsi_period}")
    if forecast_days < 0:
        raise ValueError(f"forecast_days must be >= 0, got {forecast_days}")
    if forecast_window < 2:
        raise ValueError(f"forecast_window must be >= 2, got {forecast_window}")
    if min_observations < 2:
        raise ValueError(f"min_observations must be >= 2, got {min_observations}")


@dataclass(frozen=True)
class AnalysisConfig:
    """
    Settings for one analysis run.

    Moving averages listed in ma_periods are computed (named 'ma<period>');
    RSI is computed when use_rsi is set.
    """
    metric: Metric = Metric.CLOSE
    ma_periods: Tuple[int, ...] = ()
    use_rsi: bool = False
    rsi_period: int = RSI_PERIOD
    forecast_days: int = FORECAST_DAYS
    forecast_window: int = FORECAST_WINDOW
    min_observations: int = MIN_FORECAST_OBSERVATIONS
    seed: Optional[int] = None  # None = non-reproducible forecasts

    def __post_init__(self) -> None:
        object.__setattr__(self, 'metric', Metric.from_name(self.metric))
        object.__setattr__(self, 'ma_periods', tuple(self.ma_periods))
        _validate_config(
            ma_periods=self.ma_periods,
            rsi_period=self.rsi_period,
            forecast_days=self.forecast_days,
            forecast_window=self.forecast_window,
            min_observations=self.min_observations,
        )

    @property
    def indicator_names(self) -> Tuple[str, ...]:
        """Names of the enabled indicators, in computation order."""
        names = tuple(f"ma{p}" for p in self.ma_periods)
        return names + (("rsi",) if self.use_rsi else ())


def load_config_from_yaml(yaml_path: Union[str, Path]) -> AnalysisConfig:
    """
    Load analysis configuration from YAML file.

    Example:
        metric: Close
        indicators:
          moving_averages: [7, 30]
          rsi: {enabled: true, period: 14}
        forecast:
          days: 30
          seed: 42

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ValueError: If YAML is empty or holds invalid values
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        config_dict = yaml.safe_load(f)

    if not config_dict:
        raise ValueError(f"Empty config file: {yaml_path}")

    indicators = config_dict.get('indicators') or {}
    rsi = indicators.get('rsi') or {}
    forecast = config_dict.get('forecast') or {}

    return AnalysisConfig(
        metric=config_dict.get('metric', Metric.CLOSE.value),
        ma_periods=tuple(indicators.get('moving_averages') or ()),
        use_rsi=rsi.get('enabled', False),
        rsi_period=rsi.get('period', RSI_PERIOD),
        forecast_days=forecast.get('days', FORECAST_DAYS),
        forecast_window=forecast.get('window', FORECAST_WINDOW),
        min_observations=forecast.get('min_observations', MIN_FORECAST_OBSERVATIONS),
        seed=forecast.get('seed'),
    )


def save_config_to_yaml(config: AnalysisConfig, yaml_path: Union[str, Path]) -> None:
    """Save analysis configuration to YAML file (same layout load_config_from_yaml reads)."""
    yaml_path = Path(yaml_path)

    config_dict = {
        'metric': config.metric.value,
        'indicators': {
            'moving_averages': list(config.ma_periods),
            'rsi': {
                'enabled': config.use_rsi,
                'period': config.rsi_period,
            },
        },
        'forecast': {
            'days': config.forecast_days,
            'window': config.forecast_window,
            'min_observations': config.min_observations,
            'seed': config.seed,
        },
    }

    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with open(yaml_path, 'w') as f:
        yaml.safe_dump(config_dict, f, sort_keys=False)
