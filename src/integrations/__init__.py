"""
Integrations layer.
This package contains all code used to communicate with external systems such as:
- The Telegram Bot API (waitlist signup notifications)

Key rule:
- Request handlers MUST NOT call external APIs directly.
- Handlers call the notifier client, which is built once in src/api/main.py.
"""

from .telegram import NotifierError, TelegramNotifier

__all__ = ["NotifierError", "TelegramNotifier"]
