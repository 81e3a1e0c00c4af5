"""Core: config, types, errors, logging."""

from ta_engine.core.config import load_config, Config
from ta_engine.core.errors import AnalysisError, InsufficientData, InvalidInput, DegenerateComputation
from ta_engine.core.types import (
    Bar,
    Trade,
    Position,
    PositionState,
    ExitReason,
    SignalAction,
    RsiZone,
    BandZone,
    Trend,
    Crossover,
    IndicatorResult,
    EMAResult,
    MACDResult,
    BollingerResult,
    CompositeSignal,
    AnalysisResult,
    RiskReport,
    BacktestReport,
)
from ta_engine.core.logger import setup_logging

__all__ = [
    "load_config",
    "Config",
    "AnalysisError",
    "InsufficientData",
    "InvalidInput",
    "DegenerateComputation",
    "Bar",
    "Trade",
    "Position",
    "PositionState",
    "ExitReason",
    "SignalAction",
    "RsiZone",
    "BandZone",
    "Trend",
    "Crossover",
    "IndicatorResult",
    "EMAResult",
    "MACDResult",
    "BollingerResult",
    "CompositeSignal",
    "AnalysisResult",
    "RiskReport",
    "BacktestReport",
    "setup_logging",
]
