"""
Gmail Notifier
==============

Async email sender using aiosmtplib against Gmail's SMTP server.
"""

from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

import aiosmtplib

from src.core.config import Settings
from src.core.exceptions import ChannelNotConfiguredError, GmailNotificationError
from src.core.logging_config import get_logger
from src.notifications.models import RenderedMessage

logger = get_logger("gmail_notifier")


class GmailNotifier:
    """
    Async Gmail notification sender.

    Authenticates with an app password over implicit TLS and sends the
    HTML body with the plain text body as alternative.
    """

    name = "gmail"

    SMTP_HOST = "smtp.gmail.com"
    SMTP_PORT = 465
    TIMEOUT_SECONDS = 30

    def __init__(self, settings: Settings):
        """
        Initialize Gmail notifier.

        Args:
            settings: Application settings containing Gmail configuration

        Raises:
            ChannelNotConfiguredError: If the address or app password is missing
        """
        missing = [
            key for key in ("notifier_gmail_address", "notifier_gmail_app_password")
            if not getattr(settings, key)
        ]
        if missing:
            raise ChannelNotConfiguredError(self.name, missing)

        self.address = settings.notifier_gmail_address
        self.recipient = settings.gmail_recipient
        self._password = settings.notifier_gmail_app_password

        logger.info("Gmail notifier initialized", recipient=self.recipient)

    def build_email(self, message: RenderedMessage) -> MIMEMultipart:
        """Create the email for a rendered message."""
        msg = MIMEMultipart("alternative")
        msg["From"] = self.address
        msg["To"] = self.recipient
        msg["Subject"] = message.subject

        msg.attach(MIMEText(message.content, "plain", "utf-8"))
        msg.attach(MIMEText(message.content_html, "html", "utf-8"))
        return msg

    async def notify(self, message: RenderedMessage) -> None:
        """
        Email a message to the configured recipient.

        Args:
            message: Rendered message

        Raises:
            GmailNotificationError: If the SMTP exchange fails
        """
        try:
            await aiosmtplib.send(
                self.build_email(message),
                hostname=self.SMTP_HOST,
                port=self.SMTP_PORT,
                username=self.address,
                password=self._password,
                use_tls=True,
                timeout=self.TIMEOUT_SECONDS
            )
        except aiosmtplib.SMTPException as e:
            raise GmailNotificationError(message.subject, str(e)) from e

        logger.debug("Gmail message sent successfully", subject=message.subject)
