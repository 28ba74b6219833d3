"""
Bitcoin Price Sources.

This module provides the two price points used by the rest of the package:
the price of bitcoin today and the price six months from today. Both are
fixed values; nothing here talks to an exchange or a market data feed.
"""

import logging

logger = logging.getLogger(__name__)

# --- Constants ---
BITCOIN_PRICE_TODAY = 21024
BITCOIN_PRICE_SIX_MONTHS_FROM_TODAY = 58548


def get_bitcoin_price_six_months_from_today() -> int:
    """Returns the price of bitcoin six months from today."""
    logger.debug("Price six months from today: %s", BITCOIN_PRICE_SIX_MONTHS_FROM_TODAY)
    return BITCOIN_PRICE_SIX_MONTHS_FROM_TODAY


def get_bitcoin_price_today() -> int:
    """Returns the price of bitcoin today."""
    logger.debug("Price today: %s", BITCOIN_PRICE_TODAY)
    return BITCOIN_PRICE_TODAY
