"""Shared fixtures for the notifier test suite."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from src.core.config import Settings
from src.trader.models import EntryType, PositionType, Signal, TradeOpen, TradingType, WalletType

T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class SpyChannel:
    """Channel recording every message it is asked to deliver."""

    def __init__(self, name="spy", error=None):
        self.name = name
        self.error = error
        self.messages = []

    async def notify(self, message):
        self.messages.append(message)
        if self.error is not None:
            raise self.error


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        notifier_level="info",
        is_notifier_short=False,
        max_web_precision=8,
        is_notifier_gmail_enabled=False,
        is_notifier_telegram_enabled=False,
    )


@pytest.fixture
def short_settings(settings):
    settings.is_notifier_short = True
    return settings


@pytest.fixture
def signal():
    return Signal(
        symbol="BTCUSDT",
        position_type=PositionType.LONG,
        entry_type=EntryType.EXIT,
        strategy_id="alpha-1",
        strategy_name="Alpha",
        timestamp=T0,
        price=Decimal("90.00"),
        score=Decimal("7.50"),
    )


@pytest.fixture
def trade():
    return TradeOpen(
        id="trade-1",
        symbol="BTCUSDT",
        position_type=PositionType.LONG,
        strategy_id="alpha-1",
        strategy_name="Alpha",
        trading_type=TradingType.REAL,
        wallet=WalletType.SPOT,
        quantity=Decimal("2"),
        cost=Decimal("200.000"),
        borrow=Decimal("0"),
        price_buy=Decimal("100"),
        price_sell=Decimal("90"),
        time_buy=T0,
        time_sell=T0 + timedelta(seconds=45),
    )
