"""Data: bar construction from klines, DataFrames and CSV."""

from ta_engine.data.loader import bars_from_frame, bars_from_klines, closes, load_bars_csv

__all__ = ["bars_from_frame", "bars_from_klines", "closes", "load_bars_csv"]
