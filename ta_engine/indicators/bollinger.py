"""Bollinger Bands: rolling mean +/- std_dev * population standard deviation."""

from __future__ import annotations
import math
from typing import Sequence

import numpy as np
from numpy.lib.stride_tricks import sliding_window_view

from ta_engine.core.errors import InsufficientData, InvalidInput
from ta_engine.core.types import BandZone, BollingerResult
from ta_engine.indicators.kernel import as_prices, check_period


def bollinger_bands(prices: Sequence[float], period: int = 20, std_dev: float = 2.0) -> BollingerResult:
    period = check_period(period)
    if not math.isfinite(std_dev) or std_dev <= 0:
        raise InvalidInput(f"std_dev must be a positive number, got {std_dev!r}")
    arr = as_prices(prices)
    if len(arr) < period:
        raise InsufficientData("Bollinger Bands", period, len(arr))

    windows = sliding_window_view(arr, period)
    middle = windows.mean(axis=1)
    std = windows.std(axis=1, ddof=0)
    upper = middle + std_dev * std
    lower = middle - std_dev * std

    price = float(arr[-1])
    if price > upper[-1]:
        zone = BandZone.OVERBOUGHT
    elif price < lower[-1]:
        zone = BandZone.OVERSOLD
    else:
        zone = BandZone.NORMAL

    return BollingerResult(
        upper=float(upper[-1]),
        middle=float(middle[-1]),
        lower=float(lower[-1]),
        signal=zone,
        price=price,
        upper_band=tuple(upper.tolist()),
        middle_band=tuple(middle.tolist()),
        lower_band=tuple(lower.tolist()),
    )
