"""Backtesting engine: bar-by-bar single-position simulation."""

from ta_engine.backtesting.engine import BacktestEngine, BacktestRun, backtest

__all__ = ["BacktestEngine", "BacktestRun", "backtest"]
