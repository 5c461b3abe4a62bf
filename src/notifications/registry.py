"""
Notifier Registry
=================

Holds the enabled notification channels and broadcasts rendered
messages to all of them at once.
"""

import asyncio
from typing import Iterable, List, Optional, Protocol, Tuple

from src.core.config import Settings, get_settings
from src.core.logging_config import LogMessages, get_logger
from src.notifications.channels.gmail import GmailNotifier
from src.notifications.channels.telegram import TelegramNotifier
from src.notifications.models import RenderedMessage

logger = get_logger("notifier_registry")


class Notifier(Protocol):
    """A transport able to deliver a rendered message."""

    name: str

    async def notify(self, message: RenderedMessage) -> None:  # pragma: no cover (interface)
        ...


class NotifierRegistry:
    """
    Fan-out over every configured notification channel.

    The channel set is fixed at construction. The minimum severity is read
    from the settings on every call so that changes take effect immediately.

    Usage:
        from src.notifications import initialize_notifiers, render

        notifier = initialize_notifiers()
        await notifier.notify(render(Severity.SUCCESS, trade=trade))
    """

    def __init__(self, channels: Iterable[Notifier], settings: Optional[Settings] = None):
        """
        Initialize the registry.

        Args:
            channels: Notification channels, in delivery-log order
            settings: Application settings (uses global settings if not provided)
        """
        self.settings = settings or get_settings()
        self._channels: Tuple[Notifier, ...] = tuple(channels)

    @property
    def channels(self) -> Tuple[Notifier, ...]:
        """Registered channels."""
        return self._channels

    @property
    def channel_names(self) -> List[str]:
        """Names of the registered channels."""
        return [channel.name for channel in self._channels]

    async def notify_all(self, message: RenderedMessage) -> None:
        """
        Send a message on all the channels.

        Messages below the configured minimum severity are dropped without
        contacting any channel. Otherwise every channel is notified
        concurrently; if any of them fails, the earliest failure is logged and
        re-raised once all channels are done.

        Args:
            message: Rendered message, shared by every channel
        """
        minimum = self.settings.notifier_level
        if message.severity < minimum:
            logger.debug(
                LogMessages.NOTIFICATION_FILTERED,
                severity=message.severity.name,
                minimum=minimum.name
            )
            return

        # Failures are recorded in the order they happen
        failures: List[Tuple[Notifier, Exception]] = []

        async def deliver(channel: Notifier) -> None:
            try:
                await channel.notify(message)
            except Exception as e:
                failures.append((channel, e))

        await asyncio.gather(*(deliver(channel) for channel in self._channels))

        if failures:
            channel, error = failures[0]
            logger.error(
                LogMessages.NOTIFICATION_FAILED,
                channel=channel.name,
                subject=message.subject,
                error=str(error),
                error_type=type(error).__name__,
                failed_channels=[failed.name for failed, _ in failures]
            )
            raise error

        logger.debug(
            LogMessages.NOTIFICATION_SENT,
            channels=self.channel_names,
            subject=message.subject
        )

    # The registry is itself usable wherever a single notifier is expected
    notify = notify_all


def initialize_notifiers(settings: Optional[Settings] = None) -> NotifierRegistry:
    """
    Build the registry from the channel flags in ``settings``.

    Channels are added in a fixed order: Gmail, then Telegram.

    Args:
        settings: Application settings (uses global settings if not provided)

    Returns:
        Registry over the enabled channels
    """
    settings = settings or get_settings()
    channels: List[Notifier] = []

    if settings.is_notifier_gmail_enabled:
        channels.append(GmailNotifier(settings))
    if settings.is_notifier_telegram_enabled:
        channels.append(TelegramNotifier(settings))

    registry = NotifierRegistry(channels, settings)
    if channels:
        logger.info(LogMessages.NOTIFIERS_INITIALIZED, channels=registry.channel_names)
    else:
        logger.info(LogMessages.NOTIFIERS_DISABLED)
    return registry
