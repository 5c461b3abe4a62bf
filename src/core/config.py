"""
Configuration Management
========================
Centralized settings management using Pydantic Settings.
All configuration is loaded from environment variables with validation.
"""

from functools import lru_cache
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from enum import Enum

from src.core.severity import Severity


class Environment(str, Enum):
    """Application environment."""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings are validated on startup. Invalid configuration
    will prevent the application from starting.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------
    app_name: str = "TradeNotifier"
    app_env: Environment = Environment.DEVELOPMENT
    debug: bool = False
    log_level: str = "INFO"

    # -------------------------------------------------------------------------
    # Message Rendering
    # -------------------------------------------------------------------------
    notifier_level: Severity = Field(
        default=Severity.INFO,
        description="Minimum severity delivered to the notification channels"
    )
    is_notifier_short: bool = Field(
        default=False,
        description="Render compact one-line messages instead of detailed ones"
    )
    max_web_precision: int = Field(
        default=8,
        ge=0,
        le=18,
        description="Decimal places used when rendering prices and quantities"
    )

    # -------------------------------------------------------------------------
    # Gmail Notifications
    # -------------------------------------------------------------------------
    is_notifier_gmail_enabled: bool = False
    notifier_gmail_address: str = ""
    notifier_gmail_app_password: str = ""
    notifier_gmail_recipient: str = Field(
        default="",
        description="Destination address (defaults to the sending address)"
    )

    # -------------------------------------------------------------------------
    # Telegram Notifications
    # -------------------------------------------------------------------------
    is_notifier_telegram_enabled: bool = False
    notifier_telegram_api_key: str = ""
    notifier_telegram_receiver_id: str = ""

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------
    @property
    def gmail_recipient(self) -> str:
        """Get the email recipient, falling back to the sender address."""
        return self.notifier_gmail_recipient or self.notifier_gmail_address

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == Environment.PRODUCTION

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v

    @field_validator("notifier_level", mode="before")
    @classmethod
    def validate_notifier_level(cls, v):
        """Resolve the minimum notification level from its name."""
        if isinstance(v, Severity):
            return v
        return Severity.parse(str(v))

    def validate_notifier_config(self) -> List[str]:
        """
        Validate notification configuration and return list of warnings.
        Call this after loading settings to check for potential issues.
        """
        warnings = []

        if self.is_notifier_gmail_enabled and not (
            self.notifier_gmail_address and self.notifier_gmail_app_password
        ):
            warnings.append("Gmail notifications enabled but credentials not configured")

        if self.is_notifier_telegram_enabled and not self.notifier_telegram_api_key:
            warnings.append("Telegram notifications enabled but API key not configured")

        if self.is_notifier_telegram_enabled and not self.notifier_telegram_receiver_id:
            warnings.append("Telegram notifications enabled but receiver id not configured")

        if self.is_production and not (
            self.is_notifier_gmail_enabled or self.is_notifier_telegram_enabled
        ):
            warnings.append("All notification channels are disabled in production")

        if self.is_production and self.notifier_level == Severity.DEBUG:
            warnings.append("DEBUG notifications are delivered in production")

        return warnings


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are only loaded once.
    """
    return Settings()
