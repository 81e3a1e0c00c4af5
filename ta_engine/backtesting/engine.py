"""
Backtest engine: single long position, whole shares, no fees or slippage.
Replays a strategy bar by bar using only closes up to the current bar.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

import numpy as np

from ta_engine.analytics.metrics import compute_metrics
from ta_engine.core.errors import InvalidInput
from ta_engine.core.types import BacktestReport, Bar, ExitReason, Position, PositionState, SignalAction, Trade
from ta_engine.strategies.base import BaseStrategy
from ta_engine.strategies.indicator import get_strategy

logger = logging.getLogger("ta_engine.backtest")

INITIAL_CAPITAL = 10000.0
WARMUP_BARS = 50
REPORT_TRADES = 10


@dataclass
class BacktestRun:
    """Full simulation output: every trade and the per-bar capital trajectory."""
    strategy: str
    initial_capital: float
    final_capital: float
    trades: List[Trade] = field(default_factory=list)
    equity_curve: List[float] = field(default_factory=list)
    states: List[PositionState] = field(default_factory=list)


def _close_trade(position: Position, exit_price: float, exit_timestamp, reason: ExitReason) -> Trade:
    profit = (exit_price - position.entry_price) * position.shares
    return Trade(
        entry_price=position.entry_price,
        exit_price=exit_price,
        shares=position.shares,
        profit=profit,
        profit_percent=(exit_price - position.entry_price) / position.entry_price * 100,
        entry_timestamp=position.entry_timestamp,
        exit_timestamp=exit_timestamp,
        exit_reason=reason,
    )


class BacktestEngine:
    """
    Flat/long state machine driven by a strategy's BUY/SELL/HOLD.
    BUY while flat buys floor(capital / close) shares; SELL while long sells
    them all. Anything else leaves the state unchanged. An open position is
    liquidated at the last close when the data runs out.
    """

    def __init__(self, strategy: BaseStrategy):
        self.strategy = strategy
        self.initial_capital = INITIAL_CAPITAL
        self.warmup_bars = WARMUP_BARS

    def simulate(self, bars: Sequence[Bar]) -> BacktestRun:
        closes = np.array([bar.close for bar in bars], dtype=float)
        if not np.all(np.isfinite(closes)) or np.any(closes <= 0):
            raise InvalidInput("bar closes must be finite and positive")

        capital = self.initial_capital
        state = PositionState.FLAT
        position: Optional[Position] = None
        trades: List[Trade] = []
        equity_curve = [capital]
        states: List[PositionState] = []

        for i in range(self.warmup_bars, len(bars)):
            price = float(closes[i])
            action = self.strategy.get_signal(closes[: i + 1])

            if action == SignalAction.BUY and state == PositionState.FLAT:
                shares = math.floor(capital / price)
                if shares >= 1:
                    position = Position(entry_price=price, shares=shares, entry_timestamp=bars[i].timestamp)
                    capital -= shares * price
                    state = PositionState.LONG
                    logger.debug("Bar %d: BUY %d @ %.4f", i, shares, price)
                else:
                    logger.debug("Bar %d: BUY skipped, capital %.2f below price %.4f", i, capital, price)
            elif action == SignalAction.SELL and state == PositionState.LONG:
                capital += position.shares * price
                trade = _close_trade(position, price, bars[i].timestamp, ExitReason.SIGNAL)
                trades.append(trade)
                logger.debug("Bar %d: SELL %d @ %.4f profit %.2f", i, trade.shares, price, trade.profit)
                position = None
                state = PositionState.FLAT

            held = position.shares * price if position is not None else 0.0
            equity_curve.append(capital + held)
            states.append(state)

        if state == PositionState.LONG:
            last = bars[-1]
            price = float(closes[-1])
            capital += position.shares * price
            trades.append(_close_trade(position, price, last.timestamp, ExitReason.END_OF_DATA))
            logger.debug("End of data: closed %d @ %.4f", position.shares, price)
            position = None

        return BacktestRun(
            strategy=self.strategy.name,
            initial_capital=self.initial_capital,
            final_capital=capital,
            trades=trades,
            equity_curve=equity_curve,
            states=states,
        )

    def run(self, bars: Sequence[Bar]) -> BacktestReport:
        """Simulate and aggregate. The report keeps the last REPORT_TRADES trades."""
        result = self.simulate(bars)
        trades = result.trades
        profits = [t.profit for t in trades]
        total_profit = result.final_capital - result.initial_capital
        winning = sum(1 for p in profits if p > 0)
        losing = sum(1 for p in profits if p < 0)
        win_rate = winning / len(trades) * 100 if trades else 0.0
        logger.info(
            "Backtest %s: %d bars, %d trades (wins %d, losses %d), final capital %.2f",
            result.strategy, len(bars), len(trades), winning, losing, result.final_capital,
        )
        return BacktestReport(
            strategy=result.strategy,
            initial_capital=result.initial_capital,
            final_capital=result.final_capital,
            total_profit=total_profit,
            profit_percent=total_profit / result.initial_capital * 100,
            total_trades=len(trades),
            winning_trades=winning,
            losing_trades=losing,
            win_rate=win_rate,
            trades=tuple(trades[-REPORT_TRADES:]),
            equity_curve=tuple(result.equity_curve),
            metrics=compute_metrics(profits, result.equity_curve),
        )


def backtest(bars: Sequence[Bar], strategy: Union[str, BaseStrategy] = "combined") -> BacktestReport:
    """Run a named ("rsi", "macd", "combined") or custom strategy over bars."""
    if isinstance(strategy, str):
        strategy = get_strategy(strategy)
    return BacktestEngine(strategy).run(bars)
