"""Risk management: fixed-fractional position sizing."""

from ta_engine.risk.manager import risk_management

__all__ = ["risk_management"]
