"""Unit tests for analytics.metrics."""

import pytest
from ta_engine.analytics.metrics import (
    max_drawdown,
    win_rate,
    profit_factor,
    expectancy,
    compute_metrics,
)


def test_win_rate():
    assert win_rate([1, -1, 1, 1]) == 75.0
    assert win_rate([1, 0, -1, 0]) == 25.0
    assert win_rate([]) == 0.0


def test_profit_factor():
    assert profit_factor([10, -5, 10, -5]) == 2.0
    assert profit_factor([10, 10]) is None
    assert profit_factor([-5, -5]) == 0.0
    assert profit_factor([]) == 0.0


def test_expectancy():
    assert expectancy([10, -5, 5]) == pytest.approx(10 / 3)
    assert expectancy([]) == 0.0


def test_max_drawdown():
    # equity 1 -> 1.2 -> 1.0 -> 1.1  =>  peak 1.2, dd (1.0-1.2)/1.2 = -16.67%
    cum = [1.0, 1.2, 1.0, 1.1]
    assert max_drawdown(cum) == pytest.approx(-16.666, rel=0.01)
    assert max_drawdown([]) == 0.0
    assert max_drawdown([10000.0, 10100.0, 10200.0]) == 0.0


def test_compute_metrics():
    pnls = [10.0, -5.0, 15.0, -3.0]
    m = compute_metrics(pnls)
    assert m.expectancy == pytest.approx(4.25)
    assert m.win_rate == 50.0
    assert m.avg_win == pytest.approx(12.5)
    assert m.avg_loss == pytest.approx(-4.0)
    assert m.best_trade == 15.0
    assert m.worst_trade == -5.0


def test_compute_metrics_no_trades():
    m = compute_metrics([], [10000.0, 10000.0])
    assert m.win_rate == 0.0
    assert m.max_drawdown_pct == 0.0
    assert m.as_dict()["profitFactor"] == 0.0
