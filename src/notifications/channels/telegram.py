"""
Telegram Notifier
=================

Async Telegram notification sender using python-telegram-bot library.
"""

from typing import Optional

from telegram import Bot
from telegram.error import TelegramError

from src.core.config import Settings
from src.core.exceptions import ChannelNotConfiguredError, TelegramNotificationError
from src.core.logging_config import get_logger
from src.notifications.models import RenderedMessage

logger = get_logger("telegram_notifier")


class TelegramNotifier:
    """
    Async Telegram notification sender.

    Sends the plain text body of each message to the configured chat.
    Delivery errors are raised, not swallowed.
    """

    name = "telegram"

    def __init__(self, settings: Settings, bot: Optional[Bot] = None):
        """
        Initialize Telegram notifier.

        Args:
            settings: Application settings containing Telegram configuration
            bot: Pre-built bot client (built from the API key if not provided)

        Raises:
            ChannelNotConfiguredError: If the API key or receiver id is missing
        """
        missing = [
            key for key in ("notifier_telegram_api_key", "notifier_telegram_receiver_id")
            if not getattr(settings, key)
        ]
        if missing:
            raise ChannelNotConfiguredError(self.name, missing)

        self.chat_id = settings.notifier_telegram_receiver_id
        self._bot = bot or Bot(token=settings.notifier_telegram_api_key)

        logger.info(
            "Telegram notifier initialized",
            chat_id=self.chat_id[:4] + "***" if self.chat_id else "not set"
        )

    async def notify(self, message: RenderedMessage) -> None:
        """
        Send a message to the configured Telegram chat.

        Args:
            message: Rendered message

        Raises:
            TelegramNotificationError: If Telegram rejects the message
        """
        try:
            await self._bot.send_message(
                chat_id=self.chat_id,
                text=message.content,
                disable_web_page_preview=True
            )
        except TelegramError as e:
            raise TelegramNotificationError(message.subject, str(e)) from e

        logger.debug("Telegram message sent successfully", subject=message.subject)
