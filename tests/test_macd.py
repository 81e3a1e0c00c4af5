"""Unit tests for indicators.macd."""

import pytest
from ta_engine.core.errors import InsufficientData, InvalidInput
from ta_engine.core.types import Crossover, Trend
from ta_engine.indicators import detect_crossover, ema, macd


def _crossovers_by_prefix(line, signal):
    return [detect_crossover(line[:n], signal[:n]) for n in range(2, len(line) + 1)]


def test_detect_crossover_from_below():
    line = [-2.0, -1.0, 1.0, 2.0]
    signal = [0.0, 0.0, 0.0, 0.0]
    found = _crossovers_by_prefix(line, signal)
    # only the step from -1 to 1 crosses
    assert found == [Crossover.NONE, Crossover.BULLISH, Crossover.NONE]


def test_detect_crossover_from_above():
    found = _crossovers_by_prefix([3.0, 1.0, -1.0, -0.5], [0.0, 0.0, 0.0, 0.0])
    assert found == [Crossover.NONE, Crossover.BEARISH, Crossover.NONE]


def test_detect_crossover_touch_is_not_a_cross():
    assert detect_crossover([0.0, 1.0], [0.0, 0.0]) == Crossover.NONE
    assert detect_crossover([-1.0, 0.0], [0.0, 0.0]) == Crossover.NONE


def test_detect_crossover_tail_aligned():
    # line1 is longer; only the last two points of each are compared
    assert detect_crossover([5.0, 5.0, -1.0, 1.0], [0.0, 0.0]) == Crossover.BULLISH


def test_detect_crossover_needs_two_points():
    assert detect_crossover([1.0], [0.0]) == Crossover.NONE
    assert detect_crossover([], []) == Crossover.NONE


def test_macd_alignment():
    prices = [100 + (i % 7) * 0.5 + i * 0.1 for i in range(60)]
    m = macd(prices)
    fast = ema(prices, 12).values
    slow = ema(prices, 26).values
    assert len(m.macd_line) == len(slow) == 60 - 26 + 1
    assert m.macd_line[0] == pytest.approx(fast[14] - slow[0])
    assert m.macd_line[-1] == pytest.approx(fast[-1] - slow[-1])
    assert len(m.signal_line) == len(m.macd_line) - 9 + 1
    assert len(m.histogram_values) == len(m.signal_line)
    for h, line, sig in zip(m.histogram_values, m.macd_line[-len(m.signal_line):], m.signal_line):
        assert h == pytest.approx(line - sig)
    assert m.trend == (Trend.BULLISH if m.histogram > 0 else Trend.BEARISH)


def test_macd_minimum_length():
    prices = [100 + (i % 5) for i in range(34)]
    m = macd(prices)
    assert len(m.signal_line) == 1
    assert m.crossover == Crossover.NONE
    with pytest.raises(InsufficientData):
        macd(prices[:33])
    with pytest.raises(InsufficientData):
        macd(prices[:20])


def test_macd_invalid_periods():
    with pytest.raises(InvalidInput):
        macd([1.0] * 60, fast_period=26, slow_period=12)


def test_macd_bullish_crossover_after_reversal():
    # gentle decline, steeper decline (MACD falls below its signal), then a sharp rally
    prices = [200.0 - i for i in range(40)]
    prices += [prices[-1] - 3 * (i + 1) for i in range(10)]
    prices += [prices[-1] + 5 * (i + 1) for i in range(30)]
    rally_start = 50

    found = [macd(prices[: n + 1]).crossover for n in range(rally_start, len(prices))]
    assert found.count(Crossover.BULLISH) == 1
    assert Crossover.BEARISH not in found
    assert macd(prices).trend == Trend.BULLISH
