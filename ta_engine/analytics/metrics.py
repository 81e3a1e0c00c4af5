"""
Backtest performance metrics: max drawdown, win rate, profit factor, expectancy.
Computed from closed-trade profits and the per-bar equity curve.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class PerformanceMetrics:
    """Aggregate performance metrics."""
    max_drawdown_pct: float
    win_rate: float
    profit_factor: Optional[float]
    expectancy: float
    avg_win: float
    avg_loss: float
    best_trade: float
    worst_trade: float

    def as_dict(self) -> dict:
        return {
            "maxDrawdownPct": round(self.max_drawdown_pct, 2),
            "winRate": round(self.win_rate, 2),
            "profitFactor": None if self.profit_factor is None else round(self.profit_factor, 4),
            "expectancy": round(self.expectancy, 2),
            "avgWin": round(self.avg_win, 2),
            "avgLoss": round(self.avg_loss, 2),
            "bestTrade": round(self.best_trade, 2),
            "worstTrade": round(self.worst_trade, 2),
        }


def max_drawdown(equity_curve: Sequence[float]) -> float:
    """Max drawdown in percent, as a non-positive number (-15.0 = 15% below peak)."""
    if len(equity_curve) == 0:
        return 0.0
    arr = np.asarray(equity_curve, dtype=float)
    peak = np.maximum.accumulate(arr)
    dd = (arr - peak) / np.where(peak != 0, peak, 1)
    return float(np.min(dd)) * 100.0


def win_rate(profits: Sequence[float]) -> float:
    """Percentage of trades with positive profit. Break-even trades count as neither."""
    if not profits:
        return 0.0
    return sum(1 for p in profits if p > 0) / len(profits) * 100.0


def profit_factor(profits: Sequence[float]) -> Optional[float]:
    """Gross profit / gross loss. None when there are wins but no losses."""
    wins = sum(p for p in profits if p > 0)
    losses = sum(-p for p in profits if p < 0)
    if losses <= 0:
        return None if wins > 0 else 0.0
    return wins / losses


def expectancy(profits: Sequence[float]) -> float:
    """Average profit per trade."""
    if not profits:
        return 0.0
    return sum(profits) / len(profits)


def compute_metrics(profits: List[float], equity_curve: Optional[Sequence[float]] = None) -> PerformanceMetrics:
    """
    Compute metrics from a list of trade profits.
    equity_curve: capital trajectory. If None, built from profits starting at 1.0.
    """
    if equity_curve is None:
        equity_curve = [1.0]
        for p in profits:
            equity_curve.append(equity_curve[-1] + p)
    wins = [p for p in profits if p > 0]
    losses = [p for p in profits if p < 0]
    return PerformanceMetrics(
        max_drawdown_pct=max_drawdown(equity_curve),
        win_rate=win_rate(profits),
        profit_factor=profit_factor(profits),
        expectancy=expectancy(profits),
        avg_win=sum(wins) / len(wins) if wins else 0.0,
        avg_loss=sum(losses) / len(losses) if losses else 0.0,
        best_trade=max(profits) if profits else 0.0,
        worst_trade=min(profits) if profits else 0.0,
    )
