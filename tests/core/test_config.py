"""Tests for settings loading and severity resolution."""

import pytest
from pydantic import ValidationError

from src.core.config import Environment, Settings
from src.core.exceptions import ChannelNotConfiguredError, NotifierError
from src.core.severity import Severity


class TestSeverity:
    def test_total_order(self):
        assert Severity.DEBUG < Severity.INFO < Severity.SUCCESS < Severity.WARN < Severity.ERROR

    def test_parse_is_case_insensitive(self):
        assert Severity.parse("warn") is Severity.WARN
        assert Severity.parse(" Success ") is Severity.SUCCESS

    def test_parse_rejects_unknown_names(self):
        with pytest.raises(ValueError):
            Severity.parse("loud")

    def test_renders_name(self):
        assert str(Severity.ERROR) == "ERROR"


class TestSettings:
    def test_defaults(self):
        settings = Settings(_env_file=None)
        assert settings.notifier_level is Severity.INFO
        assert settings.is_notifier_short is False
        assert settings.max_web_precision == 8

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("NOTIFIER_LEVEL", "success")
        assert Settings(_env_file=None).notifier_level is Severity.SUCCESS

    def test_invalid_level_fails_fast(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, notifier_level="verbose")

    def test_invalid_level_on_assignment(self):
        settings = Settings(_env_file=None)
        with pytest.raises(ValidationError):
            settings.notifier_level = "verbose"

    def test_precision_bounds(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_web_precision=-1)

    def test_notifier_warnings(self):
        settings = Settings(
            _env_file=None,
            app_env=Environment.PRODUCTION,
            is_notifier_telegram_enabled=True,
            notifier_level="debug",
        )
        warnings = settings.validate_notifier_config()
        assert "Telegram notifications enabled but API key not configured" in warnings
        assert "DEBUG notifications are delivered in production" in warnings

    def test_no_warnings_when_disabled(self):
        assert Settings(_env_file=None).validate_notifier_config() == []


def test_channel_error_details():
    error = ChannelNotConfiguredError("gmail", ["notifier_gmail_address"])
    assert isinstance(error, NotifierError)
    assert "gmail notifier enabled but not configured" in str(error)
