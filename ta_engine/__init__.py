"""Technical-analysis engine: indicators, composite signals, single-position backtests."""

from ta_engine.core.errors import AnalysisError, InsufficientData, InvalidInput, DegenerateComputation
from ta_engine.service import analyze, rsi, macd, signal, risk_management, backtest

__version__ = "0.1.0"

__all__ = [
    "AnalysisError",
    "InsufficientData",
    "InvalidInput",
    "DegenerateComputation",
    "analyze",
    "rsi",
    "macd",
    "signal",
    "risk_management",
    "backtest",
]
