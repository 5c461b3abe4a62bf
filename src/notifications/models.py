"""
Notification Models
===================

Inputs and outputs of the message formatter.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.severity import Severity
from src.trader.models import Signal, TradeOpen


class SourceType(str, Enum):
    """Where the event originated."""
    SIGNAL = "signal"
    WEB = "web"
    AUTO = "auto"


@dataclass(frozen=True)
class NotificationEvent:
    """
    Something worth telling the user about.

    Without a signal or a trade the event is a bare notice.
    """
    severity: Severity
    source: Optional[SourceType] = None
    signal: Optional[Signal] = None
    trade: Optional[TradeOpen] = None
    reason: Optional[str] = None


@dataclass(frozen=True)
class RenderedMessage:
    """A notification rendered for delivery, shared by every channel."""
    severity: Severity
    subject: str
    content: str
    content_raw: str
    content_html: str


__all__ = ["Severity", "SourceType", "NotificationEvent", "RenderedMessage"]
