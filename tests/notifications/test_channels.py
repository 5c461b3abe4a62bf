"""Tests for the Gmail and Telegram transports."""

from unittest.mock import AsyncMock

import aiosmtplib
import pytest
from telegram.error import TelegramError

from src.core.exceptions import (
    ChannelNotConfiguredError,
    GmailNotificationError,
    TelegramNotificationError,
)
from src.core.severity import Severity
from src.notifications.channels.gmail import GmailNotifier
from src.notifications.channels.telegram import TelegramNotifier
from src.notifications.message_formatter import render


@pytest.fixture
def telegram_settings(settings):
    settings.is_notifier_telegram_enabled = True
    settings.notifier_telegram_api_key = "123456:TEST-TOKEN"
    settings.notifier_telegram_receiver_id = "424242"
    return settings


@pytest.fixture
def gmail_settings(settings):
    settings.is_notifier_gmail_enabled = True
    settings.notifier_gmail_address = "bot@example.com"
    settings.notifier_gmail_app_password = "app-password"
    return settings


@pytest.fixture
def message(settings, signal):
    return render(Severity.WARN, signal=signal, reason="Check me", settings=settings)


class TestTelegramNotifier:
    def test_requires_credentials(self, settings):
        settings.notifier_telegram_api_key = "123456:TEST-TOKEN"
        with pytest.raises(ChannelNotConfiguredError) as excinfo:
            TelegramNotifier(settings)
        assert excinfo.value.details["missing"] == ["notifier_telegram_receiver_id"]

    @pytest.mark.asyncio
    async def test_sends_plain_body(self, telegram_settings, message):
        bot = AsyncMock()
        notifier = TelegramNotifier(telegram_settings, bot=bot)

        await notifier.notify(message)

        bot.send_message.assert_awaited_once_with(
            chat_id="424242",
            text=message.content,
            disable_web_page_preview=True
        )

    @pytest.mark.asyncio
    async def test_errors_propagate(self, telegram_settings, message):
        bot = AsyncMock()
        failure = TelegramError("Chat not found")
        bot.send_message.side_effect = failure
        notifier = TelegramNotifier(telegram_settings, bot=bot)

        with pytest.raises(TelegramNotificationError) as excinfo:
            await notifier.notify(message)

        assert excinfo.value.__cause__ is failure
        assert excinfo.value.details["error_details"] == "Chat not found"


    def test_builds_bot_when_none_given(self, telegram_settings):
        notifier = TelegramNotifier(telegram_settings)
        assert notifier._bot.token == "123456:TEST-TOKEN"

    def test_error_details_are_optional(self):
        assert TelegramNotificationError("x").details == {"error_details": None}
        assert GmailNotificationError("x").details == {"error_details": None}


class TestGmailNotifier:
    def test_requires_credentials(self, settings):
        settings.notifier_gmail_address = "bot@example.com"
        with pytest.raises(ChannelNotConfiguredError):
            GmailNotifier(settings)

    def test_recipient_defaults_to_sender(self, gmail_settings):
        assert GmailNotifier(gmail_settings).recipient == "bot@example.com"
        gmail_settings.notifier_gmail_recipient = "me@example.com"
        assert GmailNotifier(gmail_settings).recipient == "me@example.com"

    def test_email_carries_both_bodies(self, gmail_settings, message):
        email = GmailNotifier(gmail_settings).build_email(message)

        assert email["Subject"] == message.subject
        assert email["To"] == "bot@example.com"
        plain, html = email.get_payload()
        assert plain.get_content_type() == "text/plain"
        assert html.get_content_type() == "text/html"

    @pytest.mark.asyncio
    async def test_sends_over_tls(self, gmail_settings, message, monkeypatch):
        send = AsyncMock()
        monkeypatch.setattr(aiosmtplib, "send", send)

        await GmailNotifier(gmail_settings).notify(message)

        send.assert_awaited_once()
        kwargs = send.call_args.kwargs
        assert kwargs["hostname"] == "smtp.gmail.com"
        assert kwargs["port"] == 465
        assert kwargs["use_tls"] is True
        assert kwargs["username"] == "bot@example.com"

    @pytest.mark.asyncio
    async def test_errors_propagate(self, gmail_settings, message, monkeypatch):
        monkeypatch.setattr(
            aiosmtplib, "send", AsyncMock(side_effect=aiosmtplib.SMTPException("auth failed"))
        )

        with pytest.raises(GmailNotificationError):
            await GmailNotifier(gmail_settings).notify(message)
