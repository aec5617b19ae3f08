"""
Shared types for the price analysis modules.

This module consolidates the Metric selector, the PricePoint record and the
TimeSeries / Prediction containers that are passed between the ingestor,
the indicator engine and the forecaster.
"""
import pandas as pd
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterator, Optional, Tuple


class Metric(Enum):
    """Field of a PricePoint used as the scalar series."""
    OPEN = "Open"
    HIGH = "High"
    LOW = "Low"
    CLOSE = "Close"
    VOLUME = "Volume"

    @classmethod
    def from_name(cls, name: str) -> "Metric":
        """Parse a metric name case-insensitively (e.g. 'close', 'Volume')."""
        if isinstance(name, cls):
            return name
        wanted = str(name).strip().lower()
        for member in cls:
            if member.value.lower() == wanted or member.name.lower() == wanted:
                return member
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown metric '{name}'. Available: {choices}")


@dataclass(frozen=True)
class PricePoint:
    """One calendar day of OHLCV data."""
    date: pd.Timestamp  # Normalized to midnight
    open: float = 0.0
    high: float = 0.0
    low: float = 0.0
    close: float = 0.0
    volume: float = 0.0
    adjusted_close: float = 0.0

    def value(self, metric: Metric) -> float:
        """Return the field selected by metric."""
        return METRIC_ACCESSORS[metric](self)


METRIC_ACCESSORS: Dict[Metric, Callable[[PricePoint], float]] = {
    Metric.OPEN: lambda p: p.open,
    Metric.HIGH: lambda p: p.high,
    Metric.LOW: lambda p: p.low,
    Metric.CLOSE: lambda p: p.close,
    Metric.VOLUME: lambda p: p.volume,
}

_missing = set(Metric) - set(METRIC_ACCESSORS)
if _missing:
    raise RuntimeError(f"No accessor for metrics: {sorted(m.value for m in _missing)}")

# Column names used by to_frame(), in source CSV order
FRAME_COLUMNS = ("Open", "High", "Low", "Close", "Volume", "Adj Close")


@dataclass(frozen=True)
class TimeSeries:
    """
    Immutable, date-ordered sequence of PricePoints.

    Produced by the CSV ingestor with unique, strictly increasing dates.
    """
    points: Tuple[PricePoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[PricePoint]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def is_empty(self) -> bool:
        return len(self.points) == 0

    @property
    def dates(self) -> pd.DatetimeIndex:
        return pd.DatetimeIndex([p.date for p in self.points], name="Date")

    @property
    def first_date(self) -> Optional[pd.Timestamp]:
        return self.points[0].date if self.points else None

    @property
    def last_date(self) -> Optional[pd.Timestamp]:
        return self.points[-1].date if self.points else None

    def values(self, metric: Metric) -> pd.Series:
        """Scalar series for metric, indexed by date."""
        metric = Metric.from_name(metric)
        accessor = METRIC_ACCESSORS[metric]
        return pd.Series(
            [accessor(p) for p in self.points],
            index=self.dates,
            name=metric.value,
            dtype=float,
        )

    def to_frame(self) -> pd.DataFrame:
        """DataFrame with OHLCV + Adj Close columns and a date index."""
        rows = [
            (p.open, p.high, p.low, p.close, p.volume, p.adjusted_close)
            for p in self.points
        ]
        return pd.DataFrame(rows, index=self.dates, columns=list(FRAME_COLUMNS), dtype=float)


@dataclass(frozen=True)
class Prediction:
    """A single forecast point."""
    date: pd.Timestamp
    predicted: float
    confidence: float  # In [CONFIDENCE_FLOOR, BASE_CONFIDENCE]

    @property
    def date_str(self) -> str:
        return self.date.strftime("%Y-%m-%d")
