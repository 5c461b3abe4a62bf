"""
Trader Module
=============
Trading event types shared with the notification layer.
"""

from src.trader.models import (
    NO_SCORE,
    EntryType,
    PositionType,
    Signal,
    TradeOpen,
    TradingType,
    WalletType,
)
from src.trader.pnl import calculate_pnl

__all__ = [
    "NO_SCORE",
    "EntryType",
    "PositionType",
    "Signal",
    "TradeOpen",
    "TradingType",
    "WalletType",
    "calculate_pnl",
]
