"""Notification dispatch.

Delivers a channel-agnostic notification to a recipient through one or more
channels (email, Telegram), with lifecycle events around every send.

Usage:
    from infrastructure.notifications import (
        Notification,
        NotificationPriority,
        Recipient,
    )
    from infrastructure.services import get_notification_service

    notification = Notification(
        title="Deploy finished",
        content="Version 1.4.2 is live.",
        channels=["telegram", "email"],
        priority=NotificationPriority.HIGH,
    )

    results = get_notification_service().send(
        notification, Recipient(email="ops@example.com")
    )
    failed = [r for r in results if r.is_failed]
"""

# Models
from infrastructure.notifications.models import (
    Notification,
    NotificationPriority,
    NotificationResult,
    Recipient,
    ResultStatus,
)

# Exceptions
from infrastructure.notifications.exceptions import (
    ChannelNotConfiguredError,
    MailTransportError,
    NotificationError,
    TemplateRenderError,
)

# Events
from infrastructure.notifications.events import (
    NotificationFailedEvent,
    NotificationPreSendEvent,
    NotificationSentEvent,
    TelegramCallbackEvent,
    TelegramMessageEvent,
)

# Channel interface
from infrastructure.notifications.channels.base import NotificationChannel

# Channel implementations
from infrastructure.notifications.channels.email import EmailChannel
from infrastructure.notifications.channels.telegram import TelegramChannel

# Orchestration
from infrastructure.notifications.registry import ChannelRegistry
from infrastructure.notifications.service import NotificationService
from infrastructure.notifications.templates import TemplateRenderer

# Export all public interfaces
__all__ = [
    # Models
    "Notification",
    "NotificationPriority",
    "NotificationResult",
    "Recipient",
    "ResultStatus",
    # Exceptions
    "ChannelNotConfiguredError",
    "MailTransportError",
    "NotificationError",
    "TemplateRenderError",
    # Events
    "NotificationFailedEvent",
    "NotificationPreSendEvent",
    "NotificationSentEvent",
    "TelegramCallbackEvent",
    "TelegramMessageEvent",
    # Channel interface
    "NotificationChannel",
    # Channel implementations
    "EmailChannel",
    "TelegramChannel",
    # Orchestration
    "ChannelRegistry",
    "NotificationService",
    "TemplateRenderer",
]
