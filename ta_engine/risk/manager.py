"""
Fixed-fractional position sizing.
Position size = risk_amount / |entry - stop| (so the loss at the stop is risk_amount).
"""

from __future__ import annotations
import logging
import math

from ta_engine.core.errors import InvalidInput
from ta_engine.core.types import RiskReport

logger = logging.getLogger("ta_engine.risk")


def _positive(name: str, value: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInput(f"{name} must be a number, got {value!r}") from e
    if not math.isfinite(value) or value <= 0:
        raise InvalidInput(f"{name} must be a positive finite number, got {value!r}")
    return value


def risk_management(
    account_balance: float,
    risk_percentage: float,
    entry_price: float,
    stop_loss: float,
) -> RiskReport:
    """Size a position so that hitting the stop loses risk_percentage of the balance."""
    account_balance = _positive("account_balance", account_balance)
    risk_percentage = _positive("risk_percentage", risk_percentage)
    entry_price = _positive("entry_price", entry_price)
    stop_loss = _positive("stop_loss", stop_loss)
    if risk_percentage > 100:
        raise InvalidInput(f"risk_percentage must be at most 100, got {risk_percentage}")

    risk_amount = account_balance * (risk_percentage / 100)
    price_risk = abs(entry_price - stop_loss)
    if price_risk == 0:
        raise InvalidInput("zero stop distance: entry_price equals stop_loss")

    position_size = risk_amount / price_risk
    potential_loss = position_size * price_risk
    logger.debug("Risk %.2f over stop distance %.4f -> size %.4f", risk_amount, price_risk, position_size)
    return RiskReport(
        account_balance=account_balance,
        risk_percentage=risk_percentage,
        risk_amount=risk_amount,
        entry_price=entry_price,
        stop_loss=stop_loss,
        price_risk=price_risk,
        position_size=position_size,
        potential_loss=potential_loss,
    )
