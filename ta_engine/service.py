"""
Public operations handed to the serving layer. Each call is independent and
side-effect free; results offer as_dict() for JSON responses.
"""

from __future__ import annotations
from typing import Sequence, Union

from ta_engine.backtesting.engine import backtest as _run_backtest
from ta_engine.core.types import (
    AnalysisResult,
    BacktestReport,
    Bar,
    CompositeSignal,
    IndicatorResult,
    MACDResult,
    RiskReport,
)
from ta_engine.indicators import bollinger_bands, macd as _macd, rsi as _rsi
from ta_engine.indicators.kernel import as_prices
from ta_engine.risk.manager import risk_management as _risk_management
from ta_engine.signals.synthesizer import generate_signal
from ta_engine.strategies.base import BaseStrategy


def analyze(prices: Sequence[float]) -> AnalysisResult:
    """RSI, MACD, Bollinger Bands and the composite signal on one window."""
    arr = as_prices(prices)
    return AnalysisResult(
        rsi=_rsi(arr),
        macd=_macd(arr),
        bollinger_bands=bollinger_bands(arr),
        signal=generate_signal(arr),
        current_price=float(arr[-1]),
    )


def rsi(prices: Sequence[float], period: int = 14) -> IndicatorResult:
    return _rsi(prices, period)


def macd(prices: Sequence[float]) -> MACDResult:
    return _macd(prices)


def signal(prices: Sequence[float]) -> CompositeSignal:
    return generate_signal(prices)


def risk_management(balance: float, risk_pct: float, entry: float, stop: float) -> RiskReport:
    return _risk_management(balance, risk_pct, entry, stop)


def backtest(bars: Sequence[Bar], strategy: Union[str, BaseStrategy] = "combined") -> BacktestReport:
    return _run_backtest(bars, strategy)
