"""Profit and loss helpers."""

from decimal import Decimal


def calculate_pnl(price_buy: Decimal, price_sell: Decimal) -> Decimal:
    """Percentage gain of selling at ``price_sell`` what was bought at ``price_buy``."""
    return (Decimal(price_sell) - Decimal(price_buy)) / Decimal(price_buy) * 100
