"""
Message Formatter
=================

Renders trading events into notification messages.
Every message is produced as a one-line subject, a plain text body,
a terse raw body and an HTML body. Rendering is pure: it performs no I/O
and depends only on the event and the formatter options.
"""

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, List, Optional

from src.core.config import Settings, get_settings
from src.core.severity import Severity
from src.notifications.models import NotificationEvent, RenderedMessage, SourceType
from src.trader.models import NO_SCORE, PositionType, Signal, TradeOpen
from src.trader.pnl import calculate_pnl


class MessageFormatter:
    """
    Format notification messages as plain text and HTML.

    Two body layouts are available: a compact single line (``short_format``)
    suited to chat clients, and a detailed line-per-field layout.
    """

    SUCCESS_COLOUR = "#008000"
    FAILURE_COLOUR = "#ff0000"
    HTML_LINE_BREAK = "<br/>"

    PNL_PRECISION = 3
    DURATION_UNITS = (("sec", 1), ("min", 60), ("hr", 60))

    def __init__(self, short_format: bool = False, precision: int = 8):
        self.short_format = short_format
        self.precision = precision

    @classmethod
    def from_settings(cls, settings: Settings) -> "MessageFormatter":
        """Build a formatter from the rendering options in ``settings``."""
        return cls(
            short_format=settings.is_notifier_short,
            precision=settings.max_web_precision
        )

    # =========================================================================
    # Scalar Formatting
    # =========================================================================

    def format_value(self, value: Any, precision: Optional[int] = None) -> str:
        """
        Format a scalar field for display.

        Numbers are rounded half-up to a fixed precision, then trailing zeros
        in the fractional part are dropped along with a dangling decimal
        point. Dates use ISO-8601 in UTC. Missing values render as "".
        """
        if value is None:
            return ""

        if isinstance(value, Enum):
            return str(value.value)

        if isinstance(value, (Decimal, int, float)) and not isinstance(value, bool):
            places = self.precision if precision is None else precision
            exponent = Decimal(1).scaleb(-places)
            rounded = Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)
            text = f"{rounded:f}"
            if "." in text:
                text = text.rstrip("0").rstrip(".")
            return text

        if isinstance(value, datetime):
            if value.tzinfo is None:
                value = value.replace(tzinfo=timezone.utc)
            stamp = value.astimezone(timezone.utc).isoformat(timespec="milliseconds")
            return stamp.replace("+00:00", "Z")

        return str(value)

    def format_duration(self, trade: TradeOpen) -> Optional[str]:
        """
        Format how long a trade was held, e.g. ``"45.0 sec"`` or ``"1.5 hr"``.

        Returns None when either execution time is unknown.
        """
        if trade.time_buy is None or trade.time_sell is None:
            return None

        duration = (trade.time_sell - trade.time_buy).total_seconds()
        if trade.position_type == PositionType.SHORT:
            duration = -duration

        unit = self.DURATION_UNITS[0][0]
        for name, factor in self.DURATION_UNITS:
            duration /= factor
            unit = name
            if duration <= 60:
                break

        return f"{duration:.1f} {unit}"

    # =========================================================================
    # Headline
    # =========================================================================

    @staticmethod
    def format_action(
        signal: Optional[Signal] = None,
        trade: Optional[TradeOpen] = None
    ) -> str:
        """Describe what the message is about, e.g. ``"ENTER BTCUSDT LONG trade."``."""
        if trade:
            parts = [signal.entry_type.value] if signal else []
            parts += [trade.symbol, trade.position_type.value, "trade."]
            return " ".join(parts)

        if signal:
            return (
                f"{signal.entry_type.value} {signal.symbol} "
                f"{signal.position_type.value} signal."
            )

        return "Notification."

    @classmethod
    def format_html_headline(cls, severity: Severity, action: str) -> str:
        """Bold action for informational messages, coloured severity badge otherwise."""
        if severity == Severity.INFO:
            return f"<b>{action}</b>"

        colour = cls.SUCCESS_COLOUR if severity == Severity.SUCCESS else cls.FAILURE_COLOUR
        return f"<font color={colour}><b>{severity.name}</b></font> {action} "

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, event: NotificationEvent) -> RenderedMessage:
        """
        Render a notification event.

        Args:
            event: Event to render

        Returns:
            Rendered message ready for every channel
        """
        action = self.format_action(event.signal, event.trade)
        subject = f"{event.severity.name} {action}".strip()
        headline_html = self.format_html_headline(event.severity, action)

        if self.short_format:
            return self._render_short(event, action, subject, headline_html)
        return self._render_verbose(event, subject, headline_html)

    def _render_short(
        self,
        event: NotificationEvent,
        action: str,
        subject: str,
        headline_html: str
    ) -> RenderedMessage:
        fragments: List[str] = []
        headline = event.severity.name
        trade = event.trade

        if event.reason:
            # The full stop is restored when the fragments are joined
            reason = event.reason[:-1] if event.reason.endswith(".") else event.reason
            fragments.append(reason)

        if trade:
            if (
                event.severity == Severity.SUCCESS
                and trade.price_buy
                and trade.price_sell
            ):
                percent = calculate_pnl(trade.price_buy, trade.price_sell)
                fragments.append(self.format_value(percent, self.PNL_PRECISION) + "%")
                headline = "LOSS!" if percent < 0 else "PROFIT!"

            if trade.cost:
                fragments.append(self.format_value(trade.cost))

            if event.severity == Severity.SUCCESS:
                duration = self.format_duration(trade)
                if duration:
                    fragments.append(duration)

        if event.source and event.source != SourceType.SIGNAL:
            fragments.append(self.format_value(event.source))

        if fragments:
            fragments.append("")

        content = f"{headline} {'. '.join(fragments)}{action}".strip()

        if trade:
            content += f" {trade.strategy_name}."
        elif event.signal:
            content += f" {event.signal.strategy_name}."

        return RenderedMessage(
            severity=event.severity,
            subject=subject,
            content=content,
            content_raw=content,
            content_html=headline_html + self.HTML_LINE_BREAK.join(fragments),
        )

    def _render_verbose(
        self,
        event: NotificationEvent,
        subject: str,
        headline_html: str
    ) -> RenderedMessage:
        lines: List[str] = []
        signal = event.signal
        trade = event.trade

        if event.source:
            lines.append("source: " + self.format_value(event.source))

        if signal:
            lines.append("strategy: " + signal.strategy_name)
            lines.append("signal price: " + self.format_value(signal.price))
            score = "N/A" if signal.score == NO_SCORE else self.format_value(signal.score)
            lines.append("score: " + score)
            lines.append("signal received: " + self.format_value(signal.timestamp))
        elif trade:
            # Only happens when rebalancing an existing LONG trade
            lines.append("strategy: " + trade.strategy_name)

        if trade:
            lines.append("quantity: " + self.format_value(trade.quantity))
            lines.append("cost: " + self.format_value(trade.cost))
            lines.append("borrow: " + self.format_value(trade.borrow))
            lines.append("wallet: " + self.format_value(trade.wallet))
            lines.append("type: " + self.format_value(trade.trading_type))

            lines.append("trade buy price: " + self.format_value(trade.price_buy))
            lines.append("buy executed: " + self.format_value(trade.time_buy))
            lines.append("trade sell price: " + self.format_value(trade.price_sell))
            lines.append("sell executed: " + self.format_value(trade.time_sell))
            lines.append("gross profit: " + self.format_value(self._gross_profit(trade)))

        if event.reason:
            lines.append("")
            lines.append(event.reason)

        return RenderedMessage(
            severity=event.severity,
            subject=subject,
            content="\n".join([subject] + lines),
            content_raw=subject,
            content_html=self.HTML_LINE_BREAK.join([headline_html] + lines),
        )

    @staticmethod
    def _gross_profit(trade: TradeOpen) -> Optional[Decimal]:
        if trade.quantity is None or trade.price_buy is None or trade.price_sell is None:
            return None
        return trade.quantity * trade.price_sell - trade.quantity * trade.price_buy


def render(
    severity: Severity,
    source: Optional[SourceType] = None,
    signal: Optional[Signal] = None,
    trade: Optional[TradeOpen] = None,
    reason: Optional[str] = None,
    settings: Optional[Settings] = None
) -> RenderedMessage:
    """
    Render a notification using the configured layout and precision.

    Args:
        severity: Importance of the notification
        source: Where the event originated
        signal: Signal the notification is about
        trade: Trade the notification is about
        reason: Free text appended to the message
        settings: Application settings (uses global settings if not provided)

    Returns:
        Rendered message
    """
    formatter = MessageFormatter.from_settings(settings or get_settings())
    return formatter.render(
        NotificationEvent(
            severity=severity,
            source=source,
            signal=signal,
            trade=trade,
            reason=reason,
        )
    )
