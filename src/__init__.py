"""
Trade Notifier
==============

Notification fan-out and message formatting for an automated trader.

Modules:
    - core: Configuration, logging, and shared utilities
    - trader: Signal and trade types
    - notifications: Message rendering and channel fan-out
"""

__version__ = "1.0.0"
__author__ = "Trade Notifier"
