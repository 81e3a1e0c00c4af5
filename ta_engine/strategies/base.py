"""Abstract strategy: maps a closing-price window to BUY / SELL / HOLD."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Sequence

from ta_engine.core.types import SignalAction


class BaseStrategy(ABC):
    """Strategy decides on the last price of the window it is given. No lookahead."""

    name: str = ""

    @abstractmethod
    def get_signal(self, prices: Sequence[float]) -> SignalAction:
        """Return the action for the last price in `prices` (oldest first)."""
        pass
