"""
Daily price analysis: CSV ingestion, technical indicators and trend forecasting.
"""
from .shared import Metric, PricePoint, TimeSeries, Prediction, setup_logging
from .data import parse_price_csv, load_price_csv, ReadError
from .analysis import AnalysisConfig, AnalysisResult, analyze

__version__ = "0.1.0"

__all__ = [
    'Metric',
    'PricePoint',
    'TimeSeries',
    'Prediction',
    'setup_logging',
    'parse_price_csv',
    'load_price_csv',
    'ReadError',
    'AnalysisConfig',
    'AnalysisResult',
    'analyze',
]
