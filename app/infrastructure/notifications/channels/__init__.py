"""Notification channel implementations."""

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.channels.email import EmailChannel
from infrastructure.notifications.channels.telegram import TelegramChannel

__all__ = [
    "NotificationChannel",
    "EmailChannel",
    "TelegramChannel",
]
