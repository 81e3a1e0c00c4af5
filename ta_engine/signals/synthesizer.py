"""
Signal synthesizer: RSI(14) + MACD(12, 26, 9) + Bollinger(20, 2) votes fused
into BUY / SELL / HOLD with a confidence percentage.
"""

from __future__ import annotations
import logging
from typing import Iterable, List, Sequence, Tuple

from ta_engine.core.types import (
    BandZone,
    BollingerResult,
    CompositeSignal,
    Crossover,
    IndicatorResult,
    MACDResult,
    RsiZone,
    SignalAction,
    Trend,
)
from ta_engine.indicators.bollinger import bollinger_bands
from ta_engine.indicators.kernel import as_prices, rsi
from ta_engine.indicators.macd import macd

logger = logging.getLogger("ta_engine.signals")

BULLISH = "bullish"
BEARISH = "bearish"

CROSSOVER_WEIGHT = 2

Vote = Tuple[str, int]


def collect_votes(rsi_result: IndicatorResult, macd_result: MACDResult, bb: BollingerResult) -> List[Vote]:
    """One (direction, weight) entry per indicator condition that fires."""
    votes: List[Vote] = []
    if rsi_result.signal == RsiZone.OVERSOLD:
        votes.append((BULLISH, 1))
    elif rsi_result.signal == RsiZone.OVERBOUGHT:
        votes.append((BEARISH, 1))

    votes.append((BULLISH, 1) if macd_result.trend == Trend.BULLISH else (BEARISH, 1))
    # Crossover counts on top of the trend vote
    if macd_result.crossover == Crossover.BULLISH:
        votes.append((BULLISH, CROSSOVER_WEIGHT))
    elif macd_result.crossover == Crossover.BEARISH:
        votes.append((BEARISH, CROSSOVER_WEIGHT))

    if bb.signal == BandZone.OVERSOLD:
        votes.append((BULLISH, 1))
    elif bb.signal == BandZone.OVERBOUGHT:
        votes.append((BEARISH, 1))
    return votes


def tally(votes: Iterable[Vote]) -> Tuple[int, int]:
    """Sum vote weights per direction. Returns (bullish, bearish)."""
    bullish = bearish = 0
    for direction, weight in votes:
        if direction == BULLISH:
            bullish += weight
        elif direction == BEARISH:
            bearish += weight
        else:
            raise ValueError(f"unknown vote direction: {direction!r}")
    return bullish, bearish


def decide(bullish: int, bearish: int) -> Tuple[SignalAction, float]:
    """Majority wins; confidence is the winner's share of all votes. Ties hold at 0."""
    if bullish > bearish:
        return SignalAction.BUY, bullish / (bullish + bearish) * 100.0
    if bearish > bullish:
        return SignalAction.SELL, bearish / (bullish + bearish) * 100.0
    return SignalAction.HOLD, 0.0


def generate_signal(prices: Sequence[float]) -> CompositeSignal:
    """
    Compute all three indicators on the same window and fuse them.
    InsufficientData from any indicator aborts the call unchanged.
    """
    arr = as_prices(prices)
    rsi_result = rsi(arr, 14)
    macd_result = macd(arr)
    bb = bollinger_bands(arr, 20, 2.0)

    bullish, bearish = tally(collect_votes(rsi_result, macd_result, bb))
    action, confidence = decide(bullish, bearish)
    logger.debug("Votes bullish=%d bearish=%d -> %s (%.1f%%)", bullish, bearish, action.value, confidence)

    return CompositeSignal(
        action=action,
        confidence=confidence,
        bullish_signals=bullish,
        bearish_signals=bearish,
        rsi=rsi_result.current,
        rsi_signal=rsi_result.signal,
        macd=macd_result.macd,
        macd_trend=macd_result.trend,
        macd_crossover=macd_result.crossover,
        bollinger_signal=bb.signal,
    )
