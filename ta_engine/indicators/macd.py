"""
MACD: fast EMA minus slow EMA, an EMA signal line over it, and the histogram.
"""

from __future__ import annotations
from typing import Sequence

from ta_engine.core.errors import InvalidInput
from ta_engine.core.types import Crossover, MACDResult, Trend
from ta_engine.indicators.kernel import as_prices, check_period, ema_values


def detect_crossover(line1: Sequence[float], line2: Sequence[float]) -> Crossover:
    """
    Compare the last two tail-aligned points of two series.
    line1 moving from below to above line2 is a bullish crossover.
    """
    if len(line1) < 2 or len(line2) < 2:
        return Crossover.NONE
    prev_diff = line1[-2] - line2[-2]
    curr_diff = line1[-1] - line2[-1]
    if prev_diff < 0 and curr_diff > 0:
        return Crossover.BULLISH
    if prev_diff > 0 and curr_diff < 0:
        return Crossover.BEARISH
    return Crossover.NONE


def macd(
    prices: Sequence[float],
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MACDResult:
    """
    Needs slow_period + signal_period - 1 prices; shorter input raises
    InsufficientData from the EMA that runs out first.
    """
    fast_period = check_period(fast_period, "fast_period")
    slow_period = check_period(slow_period, "slow_period")
    signal_period = check_period(signal_period, "signal_period")
    if fast_period >= slow_period:
        raise InvalidInput(f"fast_period ({fast_period}) must be shorter than slow_period ({slow_period})")

    arr = as_prices(prices)
    fast = ema_values(arr, fast_period)
    slow = ema_values(arr, slow_period)

    # fast starts slow - fast samples earlier
    offset = slow_period - fast_period
    macd_line = [fast[i + offset] - slow[i] for i in range(len(slow))]
    signal_line = ema_values(macd_line, signal_period)
    lag = len(macd_line) - len(signal_line)
    histogram = [macd_line[i + lag] - s for i, s in enumerate(signal_line)]

    return MACDResult(
        macd=macd_line[-1],
        signal=signal_line[-1],
        histogram=histogram[-1],
        trend=Trend.BULLISH if histogram[-1] > 0 else Trend.BEARISH,
        crossover=detect_crossover(macd_line, signal_line),
        macd_line=tuple(macd_line),
        signal_line=tuple(signal_line),
        histogram_values=tuple(histogram),
    )
