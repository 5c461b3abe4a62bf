"""
Custom Exceptions
=================
Centralized exception definitions for the trade notifier.
Using specific exceptions helps with error handling and debugging.
"""

from typing import Any, Optional


class NotifierError(Exception):
    """Base exception for all trade notifier errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================

class ConfigurationError(NotifierError):
    """Raised when there's a configuration problem."""
    pass


class ChannelNotConfiguredError(ConfigurationError):
    """Raised when an enabled channel is missing its credentials."""

    def __init__(self, channel: str, missing: list[str]):
        super().__init__(
            f"{channel} notifier enabled but not configured",
            {"channel": channel, "missing": missing}
        )


# =============================================================================
# Notification Errors
# =============================================================================

class NotificationError(NotifierError):
    """Base class for notification delivery errors."""
    pass


class TelegramNotificationError(NotificationError):
    """Raised when Telegram notification fails."""

    def __init__(self, message: str, error_details: Optional[str] = None):
        super().__init__(
            f"Telegram notification failed: {message}",
            {"error_details": error_details}
        )


class GmailNotificationError(NotificationError):
    """Raised when Gmail notification fails."""

    def __init__(self, message: str, error_details: Optional[str] = None):
        super().__init__(
            f"Gmail notification failed: {message}",
            {"error_details": error_details}
        )
