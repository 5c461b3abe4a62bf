"""
Setup Verification Script
=========================
Run this to verify the notifier is configured correctly.
Nothing is sent: channels are built and a sample message is rendered.
"""

import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))


def verify_setup():
    """Verify all components are properly configured."""
    print("=" * 60)
    print("TRADE NOTIFIER - SETUP VERIFICATION")
    print("=" * 60)

    errors = []
    warnings = []

    # 1. Load configuration
    print("\n[1/4] Loading configuration...")
    try:
        from src.core.config import get_settings
        from src.core.logging_config import setup_logging
        settings = get_settings()
        setup_logging(settings)
        print("  ✓ Configuration loaded")
    except Exception as e:
        print(f"  ✗ Configuration error: {e}")
        return 1

    # 2. Validate configuration
    print("\n[2/4] Validating configuration...")
    config_warnings = settings.validate_notifier_config()
    for w in config_warnings:
        warnings.append(w)
        print(f"  ⚠ {w}")
    if not config_warnings:
        print("  ✓ Configuration valid")
    print(f"  Minimum level: {settings.notifier_level.name}")
    print(f"  Short format: {settings.is_notifier_short}")
    print(f"  Precision: {settings.max_web_precision}")

    # 3. Build channels
    print("\n[3/4] Building notification channels...")
    try:
        from src.notifications import initialize_notifiers
        registry = initialize_notifiers(settings)
        if registry.channel_names:
            print(f"  ✓ Channels: {', '.join(registry.channel_names)}")
        else:
            print("  ⚠ No channel enabled")
    except Exception as e:
        errors.append(f"Channel setup failed: {e}")
        print(f"  ✗ Channel error: {e}")

    # 4. Render a sample message
    print("\n[4/4] Rendering sample message...")
    try:
        from src.notifications import Severity, SourceType, render
        from src.trader import EntryType, PositionType, Signal, TradeOpen

        now = datetime.now(timezone.utc)
        signal = Signal(
            symbol="BTCUSDT",
            position_type=PositionType.LONG,
            entry_type=EntryType.EXIT,
            strategy_id="sample",
            strategy_name="Sample Strategy",
            timestamp=now,
            price=Decimal("43210.5"),
            score="NA",
        )
        trade = TradeOpen(
            id="sample-trade",
            symbol="BTCUSDT",
            position_type=PositionType.LONG,
            strategy_id="sample",
            strategy_name="Sample Strategy",
            quantity=Decimal("0.01"),
            cost=Decimal("420"),
            price_buy=Decimal("42000"),
            price_sell=Decimal("43210.5"),
            time_buy=now - timedelta(minutes=42),
            time_sell=now,
        )
        message = render(
            Severity.SUCCESS, SourceType.SIGNAL, signal, trade, settings=settings
        )
        print("  ✓ Sample message:")
        for line in message.content.splitlines():
            print(f"    {line}")
    except Exception as e:
        errors.append(f"Rendering failed: {e}")
        print(f"  ✗ Rendering error: {e}")

    # Summary
    print("\n" + "=" * 60)
    print("VERIFICATION SUMMARY")
    print("=" * 60)

    if errors:
        print(f"\n❌ ERRORS ({len(errors)}):")
        for e in errors:
            print(f"   - {e}")

    if warnings:
        print(f"\n⚠ WARNINGS ({len(warnings)}):")
        for w in warnings:
            print(f"   - {w}")

    if not errors:
        print("\n✅ All components verified successfully!")
    else:
        print("\n❌ Some components failed verification. Please fix errors above.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(verify_setup())
