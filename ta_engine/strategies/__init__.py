"""Strategies: base interface and indicator-driven implementations."""

from ta_engine.strategies.base import BaseStrategy
from ta_engine.strategies.indicator import (
    RsiStrategy,
    MacdCrossoverStrategy,
    CombinedStrategy,
    STRATEGIES,
    get_strategy,
)

__all__ = [
    "BaseStrategy",
    "RsiStrategy",
    "MacdCrossoverStrategy",
    "CombinedStrategy",
    "STRATEGIES",
    "get_strategy",
]
