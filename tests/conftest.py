"""Shared fixtures: synthetic price paths and bar builders."""

import math
from datetime import datetime, timedelta, timezone

import numpy as np
import pytest

from ta_engine.core.types import Bar


def _make_bars(closes):
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [
        Bar(timestamp=start + timedelta(hours=i), open=c, high=c, low=c, close=float(c), volume=1.0)
        for i, c in enumerate(closes)
    ]


@pytest.fixture
def make_bars():
    return _make_bars


@pytest.fixture
def sine_prices():
    # 40-bar cycle swings RSI(14) below 30 and above 70 every cycle
    return [100 + 10 * math.sin(2 * math.pi * i / 40) for i in range(600)]


@pytest.fixture
def random_walk():
    rng = np.random.default_rng(42)
    steps = rng.normal(0.0, 0.02, size=400)
    return (100 * np.exp(np.cumsum(steps))).tolist()
