from .telegram_notifier import NotifierError, TelegramNotifier

__all__ = ["NotifierError", "TelegramNotifier"]
