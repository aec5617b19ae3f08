"""
Data loading module.

Provides CSV ingestion of daily price history into an immutable TimeSeries.
"""
from .ingestion import parse_price_csv, load_price_csv, ReadError

__all__ = [
    'parse_price_csv',
    'load_price_csv',
    'ReadError',
]
