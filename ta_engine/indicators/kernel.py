"""
Indicator kernel: EMA and Wilder RSI over a closing-price sequence (oldest first).
Pure functions; each call recomputes from the full window.
"""

from __future__ import annotations
from typing import Optional, Sequence

import numpy as np

from ta_engine.core.errors import DegenerateComputation, InsufficientData, InvalidInput
from ta_engine.core.types import EMAResult, IndicatorResult, RsiZone

RSI_OVERBOUGHT = 70.0
RSI_OVERSOLD = 30.0


def as_prices(prices: Sequence[float]) -> np.ndarray:
    """Copy prices into a float array. Rejects NaN/inf."""
    try:
        arr = np.array(prices, dtype=float)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"prices must be numeric: {e}") from e
    if arr.ndim != 1:
        raise InvalidInput("prices must be a one-dimensional sequence")
    if not np.all(np.isfinite(arr)):
        raise InvalidInput("prices contain non-finite values")
    return arr


def check_period(period: int, name: str = "period") -> int:
    if isinstance(period, bool) or not isinstance(period, (int, np.integer)) or period < 1:
        raise InvalidInput(f"{name} must be a positive integer, got {period!r}")
    return int(period)


def ema_values(prices: Sequence[float], period: int) -> list[float]:
    """EMA seeded with the SMA of the first `period` prices. len = len(prices) - period + 1."""
    if len(prices) < period:
        raise InsufficientData("EMA", period, len(prices))
    k = 2.0 / (period + 1)
    ema = float(np.mean(prices[:period]))
    values = [ema]
    for price in prices[period:]:
        ema = float(price) * k + ema * (1 - k)
        values.append(ema)
    return values


def ema(prices: Sequence[float], period: int = 12) -> EMAResult:
    """Exponential moving average."""
    period = check_period(period)
    values = ema_values(as_prices(prices), period)
    return EMAResult(current=values[-1], values=tuple(values), period=period)


def _rsi_point(avg_gain: float, avg_loss: float) -> Optional[float]:
    """None when there was no movement at all (0 / 0)."""
    if avg_loss == 0:
        if avg_gain == 0:
            return None
        return 100.0
    rs = avg_gain / avg_loss
    return 100.0 - 100.0 / (1.0 + rs)


def rsi_zone(value: float) -> RsiZone:
    if value > RSI_OVERBOUGHT:
        return RsiZone.OVERBOUGHT
    if value < RSI_OVERSOLD:
        return RsiZone.OVERSOLD
    return RsiZone.NEUTRAL


def rsi(prices: Sequence[float], period: int = 14) -> IndicatorResult:
    """
    Relative Strength Index with Wilder smoothing.

    The first value uses plain averages of the first `period` changes; each
    later change updates avg = (avg * (period - 1) + x) / period.
    Zero average loss gives RSI 100. Points where both averages are zero
    (a flat opening stretch) have no RSI and are left out of `values`, so
    len(values) <= len(prices) - period. If the current point is undefined
    the whole window was flat and DegenerateComputation is raised.
    """
    period = check_period(period)
    arr = as_prices(prices)
    if len(arr) < period + 1:
        raise InsufficientData("RSI", period + 1, len(arr))

    changes = np.diff(arr)
    gains = np.where(changes > 0, changes, 0.0)
    losses = np.where(changes < 0, -changes, 0.0)

    avg_gain = float(gains[:period].sum()) / period
    avg_loss = float(losses[:period].sum()) / period
    points = [_rsi_point(avg_gain, avg_loss)]
    for gain, loss in zip(gains[period:], losses[period:]):
        avg_gain = (avg_gain * (period - 1) + float(gain)) / period
        avg_loss = (avg_loss * (period - 1) + float(loss)) / period
        points.append(_rsi_point(avg_gain, avg_loss))

    # Wilder averages never return to zero, so undefined points only lead
    values = [v for v in points if v is not None]
    if points[-1] is None:
        raise DegenerateComputation("RSI undefined: no price change in the window")
    current = values[-1]
    return IndicatorResult(current=current, values=tuple(values), signal=rsi_zone(current), period=period)
