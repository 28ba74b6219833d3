"""
The Trade Data Model.

This module defines the Pydantic model for a single round-trip trade: buy at
one price, sell at another. It also provides the "buy low, sell high" helper,
which pairs today's price with the price six months from today.

The models and helpers are:
- `Trade`: An immutable buy/sell pair with its profit.
- `buy_low_sell_high`: Builds the trade from the fixed price sources.
- `ensure_profitable`: Raises `UnprofitableTradeError` for a losing trade.
"""

import logging

from pydantic import BaseModel, ConfigDict, Field

from .prices import get_bitcoin_price_six_months_from_today, get_bitcoin_price_today

logger = logging.getLogger(__name__)


class UnprofitableTradeError(ValueError):
    """Raised when a trade does not sell higher than it bought."""

    def __init__(self, trade: "Trade"):
        self.trade = trade
        super().__init__(
            f"Trade is not profitable: bought at {trade.buy_price}, sold at {trade.sell_price}."
        )


# --- Pydantic Model for a Trade ---

class Trade(BaseModel):
    """Represents buying at one price and selling at another."""
    model_config = ConfigDict(frozen=True)

    buy_price: float = Field(gt=0, description="The price paid when buying.")
    sell_price: float = Field(gt=0, description="The price received when selling.")

    @property
    def profit(self) -> float:
        """The sell price minus the buy price."""
        return self.sell_price - self.buy_price

    @property
    def is_profitable(self) -> bool:
        """Whether the trade sold strictly higher than it bought."""
        # Breaking even is not selling high.
        return self.sell_price > self.buy_price


def buy_low_sell_high() -> Trade:
    """Buys at today's price and sells at the price six months from today."""
    trade = Trade(
        buy_price=get_bitcoin_price_today(),
        sell_price=get_bitcoin_price_six_months_from_today(),
    )
    logger.info(
        "Bought at %s, sold at %s, profit %s", trade.buy_price, trade.sell_price, trade.profit
    )
    return trade


def ensure_profitable(trade: Trade) -> Trade:
    """
    Checks that a trade sold higher than it bought.

    Args:
        trade: The trade to check.

    Returns:
        The same trade, unchanged.

    Raises:
        UnprofitableTradeError: If the sell price is not strictly greater
            than the buy price.
    """
    if not trade.is_profitable:
        logger.warning("Unprofitable trade: %s", trade)
        raise UnprofitableTradeError(trade)
    return trade
