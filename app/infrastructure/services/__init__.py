"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    EventDispatcherDep,
    NotificationServiceDep,
    TelegramClientDep,
    TelegramWebhookHandlerDep,
)
from infrastructure.services.providers import (
    get_settings,
    get_event_dispatcher,
    get_telegram_client,
    get_template_renderer,
    get_mailer,
    get_channel_registry,
    get_notification_service,
    get_telegram_webhook_handler,
)

__all__ = [
    "SettingsDep",
    "EventDispatcherDep",
    "NotificationServiceDep",
    "TelegramClientDep",
    "TelegramWebhookHandlerDep",
    "get_settings",
    "get_event_dispatcher",
    "get_telegram_client",
    "get_template_renderer",
    "get_mailer",
    "get_channel_registry",
    "get_notification_service",
    "get_telegram_webhook_handler",
]
