"""
Core Module
===========
Core utilities, configuration, and shared components.
"""

from src.core.severity import Severity
from src.core.config import Settings, get_settings
from src.core.logging_config import (
    get_logger,
    setup_logging,
    LogMessages,
)
from src.core.exceptions import (
    NotifierError,
    ConfigurationError,
    ChannelNotConfiguredError,
    NotificationError,
    TelegramNotificationError,
    GmailNotificationError,
)

__all__ = [
    # Severity
    "Severity",
    # Configuration
    "Settings",
    "get_settings",
    # Logging
    "get_logger",
    "setup_logging",
    "LogMessages",
    # Exceptions
    "NotifierError",
    "ConfigurationError",
    "ChannelNotConfiguredError",
    "NotificationError",
    "TelegramNotificationError",
    "GmailNotificationError",
]
