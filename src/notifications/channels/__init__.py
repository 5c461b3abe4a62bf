"""
Notification Channels
=====================
Transports that deliver rendered messages. Each exposes an async
``notify(message)`` and raises a ``NotificationError`` on failure.
"""

from src.notifications.channels.gmail import GmailNotifier
from src.notifications.channels.telegram import TelegramNotifier

__all__ = ["GmailNotifier", "TelegramNotifier"]
