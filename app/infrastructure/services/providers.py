"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
This module is the composition root: channels, the registry and the
notification service are built here once, from settings.
"""

from functools import lru_cache

import requests

from infrastructure.configuration import Settings
from infrastructure.events import WILDCARD, EventDispatcher, LoggingHandler
from infrastructure.notifications.channels import EmailChannel, TelegramChannel
from infrastructure.notifications.mail import Mailer, SmtpMailer
from infrastructure.notifications.registry import ChannelRegistry
from infrastructure.notifications.service import NotificationService
from infrastructure.notifications.templates import TemplateRenderer
from infrastructure.telegram.client import TelegramClient
from infrastructure.telegram.webhook import TelegramWebhookHandler


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process,
    even if called from multiple packages.

    Infrastructure packages should use this directly to ensure singleton consistency:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Application code should use the DI type alias for testability:
        from infrastructure.services import SettingsDep
        @router.get("/config")
        def get_config(settings: SettingsDep):
            return settings.model_dump()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_event_dispatcher() -> EventDispatcher:
    """
    Get application-scoped event dispatcher singleton.

    Every dispatched event is also written to the structured logs.

    Returns:
        EventDispatcher: Cached dispatcher with the logging listener attached.
    """
    dispatcher = EventDispatcher()
    dispatcher.add_listener(WILDCARD, LoggingHandler())
    return dispatcher


@lru_cache
def get_telegram_client() -> TelegramClient:
    """
    Get application-scoped Telegram Bot API client singleton.

    Returns:
        TelegramClient: Client sharing one pooled requests session.
    """
    settings = get_settings()
    return TelegramClient.from_settings(settings.telegram, requests.Session())


@lru_cache
def get_template_renderer() -> TemplateRenderer:
    """Provider for the notification template renderer."""
    settings = get_settings()
    return TemplateRenderer(template_dir=settings.notifications.NOTIFICATION_TEMPLATE_DIR)


@lru_cache
def get_mailer() -> Mailer:
    """Provider for the SMTP mail transport."""
    return SmtpMailer.from_settings(get_settings().email)


@lru_cache
def get_channel_registry() -> ChannelRegistry:
    """
    Get application-scoped channel registry singleton.

    A channel is registered when its integration is enabled in settings;
    registration order is email, then Telegram.

    Returns:
        ChannelRegistry: Cached registry of the enabled channels.
    """
    settings = get_settings()
    channels = []

    if settings.email.EMAIL_ENABLED:
        channels.append(
            EmailChannel(
                mailer=get_mailer(),
                from_address=settings.email.EMAIL_FROM,
                from_name=settings.email.EMAIL_FROM_NAME,
                template_renderer=get_template_renderer(),
            )
        )

    if settings.telegram.TELEGRAM_ENABLED:
        channels.append(TelegramChannel(client=get_telegram_client()))

    return ChannelRegistry(channels)


@lru_cache
def get_notification_service() -> NotificationService:
    """
    Get application-scoped notification service singleton.

    Returns:
        NotificationService: Service wired to the channel registry, the event
        dispatcher and the configured default channels.

    Usage:
        service = get_notification_service()
        results = service.send(notification, recipient)
    """
    settings = get_settings()
    return NotificationService(
        registry=get_channel_registry(),
        dispatcher=get_event_dispatcher(),
        default_channels=settings.notifications.NOTIFICATION_DEFAULT_CHANNELS,
    )


@lru_cache
def get_telegram_webhook_handler() -> TelegramWebhookHandler:
    """Provider for the Telegram webhook update handler."""
    settings = get_settings()
    return TelegramWebhookHandler(
        client=get_telegram_client(),
        dispatcher=get_event_dispatcher(),
        webhook_secret=settings.telegram.TELEGRAM_WEBHOOK_SECRET,
    )
