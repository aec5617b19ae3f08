"""
Descriptive statistics over the selected metric.
"""
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from ..shared.types import Metric, TimeSeries


@dataclass(frozen=True)
class SummaryStatistics:
    """Current/min/max/average of one metric plus the covered date range."""
    current: float = 0.0
    min: float = 0.0
    max: float = 0.0
    average: float = 0.0
    count: int = 0
    start_date: Optional[pd.Timestamp] = None
    end_date: Optional[pd.Timestamp] = None


def calculate_statistics(series: TimeSeries, metric: Metric = Metric.CLOSE) -> SummaryStatistics:
    """Summarize metric over series. An empty series gives all-zero statistics."""
    if series.is_empty:
        return SummaryStatistics()
    values = series.values(metric)
    return SummaryStatistics(
        current=float(values.iloc[-1]),
        min=float(values.min()),
        max=float(values.max()),
        average=float(values.mean()),
        count=len(values),
        start_date=series.first_date,
        end_date=series.last_date,
    )
