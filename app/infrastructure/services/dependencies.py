"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated
from fastapi import Depends
from infrastructure.configuration import Settings
from infrastructure.events import EventDispatcher
from infrastructure.notifications.service import NotificationService
from infrastructure.telegram.client import TelegramClient
from infrastructure.telegram.webhook import TelegramWebhookHandler
from infrastructure.services.providers import (
    get_settings,
    get_event_dispatcher,
    get_notification_service,
    get_telegram_client,
    get_telegram_webhook_handler,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Event dispatcher dependency
EventDispatcherDep = Annotated[EventDispatcher, Depends(get_event_dispatcher)]

# Notification service dependency
# Usage: notification_service.send(notification, recipient)
NotificationServiceDep = Annotated[
    NotificationService, Depends(get_notification_service)
]

# Telegram Bot API client dependency
TelegramClientDep = Annotated[TelegramClient, Depends(get_telegram_client)]

# Telegram webhook update handler dependency
TelegramWebhookHandlerDep = Annotated[
    TelegramWebhookHandler, Depends(get_telegram_webhook_handler)
]

__all__ = [
    "SettingsDep",
    "EventDispatcherDep",
    "NotificationServiceDep",
    "TelegramClientDep",
    "TelegramWebhookHandlerDep",
]
