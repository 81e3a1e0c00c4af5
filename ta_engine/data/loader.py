"""
Bars from collaborator payloads: Binance-style kline rows, pandas DataFrames, CSV files.
No network access here; fetching is the caller's job.
"""

from __future__ import annotations
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Sequence, Union

import pandas as pd

from ta_engine.core.errors import InvalidInput
from ta_engine.core.types import Bar

PRICE_COLUMNS = ("open", "high", "low", "close")


def closes(bars: Sequence[Bar]) -> List[float]:
    """Closing prices, oldest first."""
    return [bar.close for bar in bars]


def bars_from_klines(rows: Iterable[Sequence]) -> List[Bar]:
    """
    Kline arrays: [open_time_ms, open, high, low, close, volume, ...].
    Numbers may be strings, as the exchange returns them.
    """
    bars = []
    for n, row in enumerate(rows):
        if len(row) < 6:
            raise InvalidInput(f"kline row {n} has {len(row)} fields, expected at least 6")
        try:
            bars.append(Bar(
                timestamp=datetime.fromtimestamp(int(row[0]) / 1000.0, tz=timezone.utc),
                open=float(row[1]),
                high=float(row[2]),
                low=float(row[3]),
                close=float(row[4]),
                volume=float(row[5]),
            ))
        except (TypeError, ValueError) as e:
            raise InvalidInput(f"kline row {n} is malformed: {e}") from e
    return bars


def bars_from_frame(df: pd.DataFrame) -> List[Bar]:
    """
    OHLCV DataFrame (columns: time or timestamp, open, high, low, close[, volume])
    to bars sorted oldest first.
    """
    df = df.rename(columns=str.lower)
    time_col = "timestamp" if "timestamp" in df.columns else "time"
    missing = [c for c in (time_col,) + PRICE_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidInput(f"bar data missing columns: {', '.join(missing)}")
    df = df.copy()
    df[time_col] = pd.to_datetime(df[time_col], utc=True)
    if "volume" not in df.columns:
        df["volume"] = 0.0
    df = df.sort_values(time_col, kind="stable").reset_index(drop=True)
    return [
        Bar(
            timestamp=row[time_col].to_pydatetime(),
            open=float(row["open"]),
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            volume=float(row["volume"]),
        )
        for _, row in df.iterrows()
    ]


def load_bars_csv(path: Union[str, Path]) -> List[Bar]:
    """Read bars from a CSV with a header row."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"bar file not found: {path}")
    return bars_from_frame(pd.read_csv(path))
