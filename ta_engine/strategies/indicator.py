"""
Indicator strategies used by the backtester: RSI zones, MACD crossovers, and
the combined synthesizer.
"""

from __future__ import annotations
from typing import Dict, Sequence, Type

from ta_engine.core.errors import InvalidInput
from ta_engine.core.types import Crossover, RsiZone, SignalAction
from ta_engine.indicators.kernel import rsi
from ta_engine.indicators.macd import macd
from ta_engine.signals.synthesizer import generate_signal
from ta_engine.strategies.base import BaseStrategy


class RsiStrategy(BaseStrategy):
    """Oversold -> BUY, Overbought -> SELL, else HOLD."""

    name = "rsi"

    def __init__(self, period: int = 14):
        self.period = period

    def get_signal(self, prices: Sequence[float]) -> SignalAction:
        zone = rsi(prices, self.period).signal
        if zone == RsiZone.OVERSOLD:
            return SignalAction.BUY
        if zone == RsiZone.OVERBOUGHT:
            return SignalAction.SELL
        return SignalAction.HOLD


class MacdCrossoverStrategy(BaseStrategy):
    """Bullish crossover -> BUY, bearish crossover -> SELL. Trend alone does nothing."""

    name = "macd"

    def get_signal(self, prices: Sequence[float]) -> SignalAction:
        crossover = macd(prices).crossover
        if crossover == Crossover.BULLISH:
            return SignalAction.BUY
        if crossover == Crossover.BEARISH:
            return SignalAction.SELL
        return SignalAction.HOLD


class CombinedStrategy(BaseStrategy):
    """Full RSI + MACD + Bollinger vote."""

    name = "combined"

    def get_signal(self, prices: Sequence[float]) -> SignalAction:
        return generate_signal(prices).action


STRATEGIES: Dict[str, Type[BaseStrategy]] = {
    RsiStrategy.name: RsiStrategy,
    MacdCrossoverStrategy.name: MacdCrossoverStrategy,
    CombinedStrategy.name: CombinedStrategy,
}


def get_strategy(name: str) -> BaseStrategy:
    """Instantiate a strategy by name ("rsi", "macd", "combined")."""
    key = (name or "").strip().lower()
    if key not in STRATEGIES:
        raise InvalidInput(f"unknown strategy {name!r}; expected one of {sorted(STRATEGIES)}")
    return STRATEGIES[key]()
