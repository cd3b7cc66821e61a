"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
notification service using Pydantic BaseSettings with domain-based
organization.

Exports:
    Settings: Main settings class (aggregator)
    EmailSettings, TelegramSettings, NotificationSettings: section classes

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    bot_token = settings.telegram.TELEGRAM_BOT_TOKEN
    default_channels = settings.notifications.NOTIFICATION_DEFAULT_CHANNELS

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import EmailSettings, TelegramSettings
from infrastructure.configuration.infrastructure import NotificationSettings

__all__ = ["Settings", "EmailSettings", "TelegramSettings", "NotificationSettings"]
