"""
Notifications Module
====================

Renders trading events into messages and broadcasts them to every
enabled notification channel (Gmail, Telegram).

Usage:
    from src.notifications import initialize_notifiers, render
    from src.core.severity import Severity

    notifier = initialize_notifiers()

    await notifier.notify(
        render(Severity.SUCCESS, source=SourceType.SIGNAL, signal=signal, trade=trade)
    )
"""

from src.notifications.models import (
    NotificationEvent,
    RenderedMessage,
    Severity,
    SourceType,
)
from src.notifications.message_formatter import MessageFormatter, render
from src.notifications.registry import Notifier, NotifierRegistry, initialize_notifiers

__all__ = [
    "NotificationEvent",
    "RenderedMessage",
    "Severity",
    "SourceType",
    "MessageFormatter",
    "render",
    "Notifier",
    "NotifierRegistry",
    "initialize_notifiers",
]
