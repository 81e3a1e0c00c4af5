"""
Core data types: bars, indicator results, signals, positions, trades, reports.
Labels are closed enums whose values are the strings the serving layer emits.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Tuple

from ta_engine.analytics.metrics import PerformanceMetrics


class SignalAction(str, Enum):
    BUY = "BUY"
    SELL = "SELL"
    HOLD = "HOLD"


class RsiZone(str, Enum):
    OVERBOUGHT = "Overbought"
    OVERSOLD = "Oversold"
    NEUTRAL = "Neutral"


class BandZone(str, Enum):
    OVERBOUGHT = "Overbought"
    OVERSOLD = "Oversold"
    NORMAL = "Normal"


class Trend(str, Enum):
    BULLISH = "Bullish"
    BEARISH = "Bearish"


class Crossover(str, Enum):
    BULLISH = "Bullish Crossover"
    BEARISH = "Bearish Crossover"
    NONE = "None"


class PositionState(str, Enum):
    FLAT = "flat"
    LONG = "long"


class ExitReason(str, Enum):
    SIGNAL = "signal"
    END_OF_DATA = "end_of_data"


def _iso(ts: Any) -> Any:
    return ts.isoformat() if isinstance(ts, datetime) else ts


@dataclass(frozen=True)
class Bar:
    """OHLCV candle."""
    timestamp: datetime
    open: float
    high: float
    low: float
    close: float
    volume: float = 0.0


@dataclass(frozen=True)
class IndicatorResult:
    """Single-line indicator: current value, full history, zone label."""
    current: float
    values: Tuple[float, ...]
    signal: RsiZone
    period: int

    def as_dict(self) -> dict:
        return {
            "current": self.current,
            "signal": self.signal.value,
            "period": self.period,
            "values": list(self.values),
        }


@dataclass(frozen=True)
class EMAResult:
    current: float
    values: Tuple[float, ...]
    period: int


@dataclass(frozen=True)
class MACDResult:
    """MACD line, signal line and histogram with trend and crossover labels."""
    macd: float
    signal: float
    histogram: float
    trend: Trend
    crossover: Crossover
    macd_line: Tuple[float, ...]
    signal_line: Tuple[float, ...]
    histogram_values: Tuple[float, ...]

    def as_dict(self) -> dict:
        return {
            "macd": self.macd,
            "signal": self.signal,
            "histogram": self.histogram,
            "trend": self.trend.value,
            "crossover": self.crossover.value,
            "macdLine": list(self.macd_line),
            "signalLine": list(self.signal_line),
            "histogramValues": list(self.histogram_values),
        }


@dataclass(frozen=True)
class BollingerResult:
    """Rolling mean +/- k standard deviations."""
    upper: float
    middle: float
    lower: float
    signal: BandZone
    price: float
    upper_band: Tuple[float, ...]
    middle_band: Tuple[float, ...]
    lower_band: Tuple[float, ...]

    def as_dict(self) -> dict:
        return {
            "upper": self.upper,
            "middle": self.middle,
            "lower": self.lower,
            "signal": self.signal.value,
            "upperBand": list(self.upper_band),
            "middleBand": list(self.middle_band),
            "lowerBand": list(self.lower_band),
        }


@dataclass(frozen=True)
class CompositeSignal:
    """Fused directional call. confidence is in [0, 100], unrounded."""
    action: SignalAction
    confidence: float
    bullish_signals: int
    bearish_signals: int
    rsi: float
    rsi_signal: RsiZone
    macd: float
    macd_trend: Trend
    macd_crossover: Crossover
    bollinger_signal: BandZone

    def as_dict(self) -> dict:
        return {
            "signal": self.action.value,
            "confidence": round(self.confidence, 1),
            "indicators": {
                "rsi": round(self.rsi, 2),
                "rsiSignal": self.rsi_signal.value,
                "macd": round(self.macd, 4),
                "macdSignal": self.macd_trend.value,
                "macdCrossover": self.macd_crossover.value,
                "bollingerBands": self.bollinger_signal.value,
            },
            "analysis": {
                "bullishSignals": self.bullish_signals,
                "bearishSignals": self.bearish_signals,
            },
        }


@dataclass(frozen=True)
class AnalysisResult:
    rsi: IndicatorResult
    macd: MACDResult
    bollinger_bands: BollingerResult
    signal: CompositeSignal
    current_price: float

    def as_dict(self) -> dict:
        return {
            "rsi": self.rsi.as_dict(),
            "macd": self.macd.as_dict(),
            "bollingerBands": self.bollinger_bands.as_dict(),
            "signal": self.signal.as_dict(),
            "currentPrice": self.current_price,
        }


@dataclass
class Position:
    """Open simulated long position. Lives only inside one backtest run."""
    entry_price: float
    shares: int
    entry_timestamp: Optional[datetime]


@dataclass(frozen=True)
class Trade:
    """Closed trade."""
    entry_price: float
    exit_price: float
    shares: int
    profit: float
    profit_percent: float
    entry_timestamp: Optional[datetime]
    exit_timestamp: Optional[datetime]
    exit_reason: ExitReason

    def as_dict(self) -> dict:
        return {
            "entryPrice": self.entry_price,
            "exitPrice": self.exit_price,
            "shares": self.shares,
            "profit": self.profit,
            "profitPercent": round(self.profit_percent, 2),
            "entryDate": _iso(self.entry_timestamp),
            "exitDate": _iso(self.exit_timestamp),
            "exitReason": self.exit_reason.value,
        }


@dataclass(frozen=True)
class RiskReport:
    account_balance: float
    risk_percentage: float
    risk_amount: float
    entry_price: float
    stop_loss: float
    price_risk: float
    position_size: float
    potential_loss: float

    @property
    def recommendation(self) -> str:
        return (
            f"Risk {self.risk_amount:.2f} ({self.risk_percentage:g}% of account) "
            f"with position size of {self.position_size:.4f} units"
        )

    def as_dict(self) -> dict:
        return {
            "accountBalance": self.account_balance,
            "riskPercentage": self.risk_percentage,
            "riskAmount": round(self.risk_amount, 2),
            "entryPrice": self.entry_price,
            "stopLoss": self.stop_loss,
            "priceRisk": round(self.price_risk, 2),
            "positionSize": round(self.position_size, 4),
            "potentialLoss": round(self.potential_loss, 2),
            "recommendation": self.recommendation,
        }


@dataclass(frozen=True)
class BacktestReport:
    """Aggregates over every trade; `trades` holds only the most recent ones."""
    strategy: str
    initial_capital: float
    final_capital: float
    total_profit: float
    profit_percent: float
    total_trades: int
    winning_trades: int
    losing_trades: int
    win_rate: float
    trades: Tuple[Trade, ...] = ()
    equity_curve: Tuple[float, ...] = ()
    metrics: Optional[PerformanceMetrics] = None

    def as_dict(self) -> dict:
        out = {
            "strategy": self.strategy,
            "initialCapital": self.initial_capital,
            "finalCapital": round(self.final_capital, 2),
            "totalProfit": round(self.total_profit, 2),
            "profitPercent": round(self.profit_percent, 2),
            "totalTrades": self.total_trades,
            "winningTrades": self.winning_trades,
            "losingTrades": self.losing_trades,
            "winRate": round(self.win_rate, 2),
            "trades": [t.as_dict() for t in self.trades],
            "equityCurve": list(self.equity_curve),
        }
        if self.metrics is not None:
            out["metrics"] = self.metrics.as_dict()
        return out
