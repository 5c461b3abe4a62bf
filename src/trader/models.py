"""
Trader Models
=============

Trading events consumed by the notification layer. Numeric fields are
computed upstream and arrive here already resolved.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class PositionType(str, Enum):
    """Direction of a position."""
    LONG = "LONG"
    SHORT = "SHORT"


class EntryType(str, Enum):
    """Whether a signal opens or closes a position."""
    ENTER = "ENTER"
    EXIT = "EXIT"


class TradingType(str, Enum):
    """Real trades hit the exchange, virtual trades are only simulated."""
    REAL = "real"
    VIRTUAL = "virtual"


class WalletType(str, Enum):
    """Wallet a trade was funded from."""
    SPOT = "spot"
    MARGIN = "margin"


# Literal score published by strategies that do not rate their signals
NO_SCORE = "NA"


@dataclass(frozen=True)
class Signal:
    """Trading recommendation received from a strategy."""
    symbol: str
    position_type: PositionType
    entry_type: EntryType
    strategy_id: str
    strategy_name: str
    timestamp: datetime
    price: Optional[Decimal] = None
    score: Optional[Union[Decimal, str]] = None


@dataclass(frozen=True)
class TradeOpen:
    """
    Executed trade lifecycle.

    For LONG trades the buy happens first; for SHORT trades the sell
    happens first, so ``time_sell`` precedes ``time_buy``.
    """
    id: str
    symbol: str
    position_type: PositionType
    strategy_id: str
    strategy_name: str
    trading_type: TradingType = TradingType.VIRTUAL
    wallet: Optional[WalletType] = None
    quantity: Optional[Decimal] = None
    cost: Optional[Decimal] = None
    borrow: Optional[Decimal] = None
    price_buy: Optional[Decimal] = None
    price_sell: Optional[Decimal] = None
    time_buy: Optional[datetime] = None
    time_sell: Optional[datetime] = None
