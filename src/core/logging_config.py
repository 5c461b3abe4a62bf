"""
Logging Configuration
=====================
Structured logging setup using structlog for consistent, parseable logs.
Notification logs carry the channel, severity and subject they relate to.
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import structlog
from structlog.types import EventDict, Processor

from src.core.config import Settings, get_settings


def add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Add ISO timestamp to every log entry."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def censor_sensitive_data(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Remove or mask sensitive data from logs."""
    sensitive_keys = ["password", "token", "secret", "api_key", "authorization"]

    for key in list(event_dict.keys()):
        key_lower = key.lower()
        if any(sensitive in key_lower for sensitive in sensitive_keys):
            event_dict[key] = "***REDACTED***"

    return event_dict


def app_context_processor(settings: Settings) -> Processor:
    """Build a processor adding application context to every log entry."""

    def add_app_context(
        logger: logging.Logger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict["app"] = settings.app_name
        event_dict["env"] = settings.app_env.value
        return event_dict

    return add_app_context


def setup_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    log_file: Optional[Path] = None,
    json_format: bool = False
) -> structlog.BoundLogger:
    """
    Configure structured logging for the application.

    Args:
        settings: Application settings (uses global settings if not provided)
        log_level: Override log level from settings
        log_file: Optional file path for logging
        json_format: Use JSON formatting (recommended for production)

    Returns:
        Configured structlog logger
    """
    settings = settings or get_settings()
    level = log_level or settings.log_level

    # Define shared processors
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        add_timestamp,
        app_context_processor(settings),
        censor_sensitive_data,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_format or settings.is_production:
        # JSON format for production - easy to parse with log aggregators
        renderer = structlog.processors.JSONRenderer()
    else:
        # Pretty console output for development
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback
        )

    # Configure structlog
    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)

    # File handler (optional)
    handlers = [console_handler]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.handlers = handlers
    root_logger.setLevel(getattr(logging, level.upper()))

    # Reduce noise from the transport libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("telegram").setLevel(logging.WARNING)
    logging.getLogger("aiosmtplib").setLevel(logging.WARNING)

    return structlog.get_logger()


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """
    Get a logger instance with optional name binding.

    Args:
        name: Optional module/component name to bind to logger

    Returns:
        Bound structlog logger
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(component=name)
    return logger


class LogMessages:
    """
    Standard log message templates for consistency.
    Use these to ensure consistent logging across the application.
    """

    NOTIFIERS_INITIALIZED = "Notifiers initialized"
    NOTIFIERS_DISABLED = "All notification channels disabled"
    NOTIFICATION_FILTERED = "Notification below minimum level"
    NOTIFICATION_SENT = "Notification sent"
    NOTIFICATION_FAILED = "Notification failed"
