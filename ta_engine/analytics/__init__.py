"""Analytics: backtest performance metrics (drawdown, win rate, profit factor, expectancy)."""

from ta_engine.analytics.metrics import (
    PerformanceMetrics,
    compute_metrics,
    max_drawdown,
    win_rate,
    profit_factor,
    expectancy,
)

__all__ = [
    "PerformanceMetrics",
    "compute_metrics",
    "max_drawdown",
    "win_rate",
    "profit_factor",
    "expectancy",
]
