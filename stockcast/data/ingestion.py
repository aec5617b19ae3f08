"""
CSV ingestion for daily price history.

Parses Yahoo-style exports (Date,Open,High,Low,Close,Volume,Adj Close) into an
immutable TimeSeries:
- Header names drive field mapping (column order is free, extra columns ignored)
- Rows that are blank, have the wrong field count or an unparsable date are skipped
- Numbers are read from the leading numeric prefix of a token; no prefix coerces to 0
- Rows are re-sorted ascending by date; the last row wins for a duplicated date

Values are split on plain commas; quoted fields are not supported.
"""
import logging
import re
from pathlib import Path
from typing import IO, Dict, List, Optional, Union

import pandas as pd

from ..shared.types import PricePoint, TimeSeries


logger = logging.getLogger(__name__)

PriceSource = Union[str, Path, bytes, bytearray, IO]

# Normalized header name -> PricePoint field
HEADER_FIELDS: Dict[str, str] = {
    "date": "date",
    "open": "open",
    "high": "high",
    "low": "low",
    "close": "close",
    "volume": "volume",
    "adjclose": "adjusted_close",
    "adjustedclose": "adjusted_close",
}

NUMERIC_FIELDS = ("open", "high", "low", "close", "volume", "adjusted_close")

# Leading decimal number of a token; trailing garbage is ignored ("12abc" -> 12)
NUMBER_PREFIX = r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"


class ReadError(Exception):
    """Raised when the CSV source cannot be read."""
    pass


def _normalize_header(name: str) -> str:
    return re.sub(r"[\s_]", "", name.strip().lower())


def _map_header(headers: List[str]) -> Optional[Dict[str, int]]:
    """Map PricePoint fields to column positions. None if there is no Date column."""
    positions: Dict[str, int] = {}
    for idx, name in enumerate(headers):
        field = HEADER_FIELDS.get(_normalize_header(name))
        if field is not None and field not in positions:
            positions[field] = idx
    if "date" not in positions:
        return None
    return positions


def _parse_date(token: str) -> pd.Timestamp:
    """Calendar date of a token (wall-clock date for offset timestamps), NaT if unparsable."""
    try:
        ts = pd.Timestamp(token)
    except (ValueError, TypeError, OverflowError):
        return pd.NaT
    if pd.isna(ts):
        return pd.NaT
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.normalize()


def parse_price_csv(text: str) -> TimeSeries:
    """
    Parse CSV text into a TimeSeries.

    Args:
        text: Full CSV content, header line first

    Returns:
        TimeSeries sorted ascending by date (empty if header is missing or malformed)
    """
    if text.startswith("\ufeff"):
        text = text[1:]
    lines = text.split("\n")
    if not lines or not lines[0].strip():
        logger.warning("CSV has no header row; returning empty series")
        return TimeSeries()

    headers = [h.strip() for h in lines[0].split(",")]
    positions = _map_header(headers)
    if positions is None:
        logger.warning(f"CSV header has no Date column: {headers}; returning empty series")
        return TimeSeries()

    rows: List[List[str]] = []
    blank = 0
    mismatched = 0
    for line_no, raw in enumerate(lines[1:], start=2):
        line = raw.strip()
        if not line:
            blank += 1
            continue
        values = line.split(",")
        if len(values) != len(headers):
            mismatched += 1
            logger.debug(
                f"Line {line_no}: expected {len(headers)} fields, got {len(values)}; skipped"
            )
            continue
        rows.append([v.strip() for v in values])

    if mismatched:
        logger.info(f"Skipped {mismatched} row(s) with mismatched field count")

    if not rows:
        logger.info("CSV contains no data rows")
        return TimeSeries()

    raw = pd.DataFrame(rows)
    # Parsed per token: offsets may differ between rows (e.g. across a DST change)
    dates = pd.DatetimeIndex([_parse_date(t) for t in raw[positions["date"]]])

    bad_dates = dates.isna()
    if bad_dates.any():
        logger.info(f"Skipped {int(bad_dates.sum())} row(s) with unparsable date")

    frame = pd.DataFrame(index=dates)
    for field in NUMERIC_FIELDS:
        if field in positions:
            numbers = raw[positions[field]].str.extract(NUMBER_PREFIX, expand=False)
            column = pd.to_numeric(numbers, errors="coerce").fillna(0.0)
            frame[field] = column.astype(float).to_numpy()
        else:
            frame[field] = 0.0
    frame = frame[~bad_dates]

    # Stable sort keeps source order among equal dates so keep='last' is the last row
    frame = frame.sort_index(kind="mergesort")
    duplicated = frame.index.duplicated(keep="last")
    if duplicated.any():
        logger.warning(f"Dropped {int(duplicated.sum())} row(s) with duplicate dates (last row wins)")
        frame = frame[~duplicated]

    points = tuple(
        PricePoint(
            date=row.Index,
            open=row.open,
            high=row.high,
            low=row.low,
            close=row.close,
            volume=row.volume,
            adjusted_close=row.adjusted_close,
        )
        for row in frame.itertuples()
    )
    logger.info(
        f"Parsed {len(points)} price row(s)"
        + (f" from {points[0].date.date()} to {points[-1].date.date()}" if points else "")
    )
    return TimeSeries(points)


def _read_text(source: PriceSource, encoding: str) -> str:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode(encoding)
    if isinstance(source, (str, Path)):
        return Path(source).read_text(encoding=encoding)
    content = source.read()
    if isinstance(content, (bytes, bytearray)):
        return bytes(content).decode(encoding)
    return content


def load_price_csv(source: PriceSource, encoding: str = "utf-8") -> TimeSeries:
    """
    Read a CSV source and parse it into a TimeSeries.

    Args:
        source: Path to a CSV file, raw bytes, or a readable (binary or text) file object
        encoding: Text encoding used for bytes and files

    Returns:
        TimeSeries sorted ascending by date

    Raises:
        ReadError: If the source cannot be read or decoded
    """
    try:
        text = _read_text(source, encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(f"Could not read price CSV: {type(e).__name__}: {e}") from e
    return parse_price_csv(text)
