"""
Headline figures for a prediction sequence.
"""
from dataclasses import dataclass
from typing import Optional, Sequence

from ..shared.defaults import HIGH_CONFIDENCE, MEDIUM_CONFIDENCE, WEEK_DAYS
from ..shared.types import Prediction

BULLISH = "bullish"
BEARISH = "bearish"


def confidence_band(confidence: float) -> str:
    """Classify a confidence as 'high', 'medium' or 'low'."""
    if confidence >= HIGH_CONFIDENCE:
        return "high"
    if confidence >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"


@dataclass(frozen=True)
class PredictionSummary:
    """Summary of a forecast for display."""
    next_day: Optional[float] = None
    next_day_confidence: Optional[float] = None
    week_average: Optional[float] = None
    horizon_days: int = 0
    trend: Optional[str] = None  # BULLISH, BEARISH, or None for < 2 predictions


def summarize_predictions(predictions: Sequence[Prediction]) -> PredictionSummary:
    """Build a PredictionSummary; an empty sequence gives an empty summary."""
    if not predictions:
        return PredictionSummary()

    first = predictions[0]
    week = [p.predicted for p in predictions[:WEEK_DAYS]]
    trend = None
    if len(predictions) >= 2:
        trend = BULLISH if predictions[-1].predicted > first.predicted else BEARISH

    return PredictionSummary(
        next_day=first.predicted,
        next_day_confidence=first.confidence,
        week_average=sum(week) / len(week),
        horizon_days=len(predictions),
        trend=trend,
    )
