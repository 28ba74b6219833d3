# tests/test_trade.py

"""
Unit Tests for the Trade Data Model.

Covers the profit calculation, the strict "sell higher than you bought"
check, validation of prices, and the buy-low-sell-high helper built from the
fixed price sources.
"""

import pytest
from pydantic import ValidationError

from hodl.trade import Trade, UnprofitableTradeError, buy_low_sell_high, ensure_profitable

# --- Test Fixtures ---

@pytest.fixture
def losing_trade() -> Trade:
    """A trade that bought high and sold low."""
    return Trade(buy_price=58548, sell_price=21024)

# --- Test Cases ---

def test_buy_low_sell_high_is_profitable():
    trade = buy_low_sell_high()
    assert trade.buy_price == 21024
    assert trade.sell_price == 58548
    assert trade.profit == 37524
    assert trade.is_profitable

def test_losing_trade(losing_trade: Trade):
    assert losing_trade.profit == -37524
    assert not losing_trade.is_profitable

def test_break_even_is_not_profitable():
    """Selling at the same price is not selling high."""
    trade = Trade(buy_price=100, sell_price=100)
    assert trade.profit == 0
    assert not trade.is_profitable

def test_ensure_profitable_returns_trade():
    trade = buy_low_sell_high()
    assert ensure_profitable(trade) is trade

def test_ensure_profitable_raises_for_losing_trade(losing_trade: Trade):
    with pytest.raises(UnprofitableTradeError, match="bought at 58548") as exc_info:
        ensure_profitable(losing_trade)
    assert exc_info.value.trade is losing_trade
    assert isinstance(exc_info.value, ValueError)

@pytest.mark.parametrize("buy_price, sell_price", [(0, 10), (10, -1)])
def test_non_positive_prices_are_rejected(buy_price, sell_price):
    with pytest.raises(ValidationError):
        Trade(buy_price=buy_price, sell_price=sell_price)

def test_trade_is_immutable():
    trade = buy_low_sell_high()
    with pytest.raises(ValidationError):
        trade.sell_price = 1
