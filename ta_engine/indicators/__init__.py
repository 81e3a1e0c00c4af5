"""Indicators: EMA, RSI (kernel), MACD and Bollinger Bands (derived)."""

from ta_engine.indicators.kernel import ema, rsi
from ta_engine.indicators.macd import macd, detect_crossover
from ta_engine.indicators.bollinger import bollinger_bands

__all__ = ["ema", "rsi", "macd", "detect_crossover", "bollinger_bands"]
