"""
Notification Severity
=====================
Ordered classification of a notification's importance.
"""

from enum import IntEnum


class Severity(IntEnum):
    """
    Severity of a notification message.

    Members are totally ordered by their value, which is what the
    delivery gate compares. Messages always render the member name.
    """
    DEBUG = 10
    INFO = 20
    SUCCESS = 30
    WARN = 40
    ERROR = 50

    @classmethod
    def parse(cls, name: str) -> "Severity":
        """
        Resolve a severity from its (case-insensitive) name.

        Raises:
            ValueError: If the name is not a known severity
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = [member.name for member in cls]
            raise ValueError(
                f"Invalid notification level {name!r}. Must be one of: {valid}"
            ) from None

    def __str__(self) -> str:
        return self.name
