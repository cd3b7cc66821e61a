"""Notification channel abstract base class.

All channel implementations (Email, Telegram) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from structlog.stdlib import BoundLogger

from infrastructure.logging import get_module_logger
from infrastructure.notifications.models import (
    Notification,
    NotificationResult,
    Recipient,
)

DEFAULT_RETRY_PRIORITY = 50


class NotificationChannel(ABC):
    """Abstract base class for notification channels.

    Each channel handles delivery through a specific platform:
    - EmailChannel: SMTP email
    - TelegramChannel: Telegram Bot API messages

    ``send`` is a template method: it checks configuration, logs the
    attempt and runs the platform specific ``_do_send`` inside an error
    boundary, so callers always get a NotificationResult back.

    Example Implementation:
        class PagerChannel(NotificationChannel):

            @property
            def name(self) -> str:
                return "pager"

            def is_configured(self) -> bool:
                return bool(self._api_key)

            def _do_send(self, notification, recipient) -> NotificationResult:
                self._client.page(recipient.user_id, notification.title)
                return NotificationResult.success(self.name, "Paged")
    """

    def __init__(self, logger: Optional[BoundLogger] = None):
        self.logger = logger if logger is not None else get_module_logger()

    @property
    @abstractmethod
    def name(self) -> str:
        """Channel identifier (email, telegram).

        Returns:
            Channel name string for routing and logging
        """

    @property
    def retry_priority(self) -> int:
        """Ordering hint for external retry tooling; higher retries first."""
        return DEFAULT_RETRY_PRIORITY

    def supports(self, channel_name: str) -> bool:
        """Check whether this channel answers to a channel name."""
        return channel_name == self.name

    @abstractmethod
    def is_configured(self) -> bool:
        """Check whether the channel has what it needs to deliver.

        Must only inspect static configuration; no network calls.
        """

    def send(
        self, notification: Notification, recipient: Recipient
    ) -> NotificationResult:
        """Send a notification to one recipient.

        Never raises: an unconfigured channel or any exception raised while
        delivering is reported as a FAILED result.

        Args:
            notification: Notification to send
            recipient: Recipient to deliver to

        Returns:
            NotificationResult for this channel attempt
        """
        if not self.is_configured():
            self.logger.warning("channel_not_configured", channel=self.name)
            return NotificationResult.failed(
                channel=self.name,
                message=f"Channel {self.name} is not configured",
            )

        self.logger.info(
            "sending_notification",
            channel=self.name,
            title=notification.title,
            priority=notification.priority.value,
        )

        try:
            return self._do_send(notification, recipient)
        except Exception as e:
            self.logger.error(
                "notification_send_failed",
                channel=self.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            return NotificationResult.failed(
                channel=self.name,
                message=str(e),
                metadata={"exception": type(e).__name__},
            )

    @abstractmethod
    def _do_send(
        self, notification: Notification, recipient: Recipient
    ) -> NotificationResult:
        """Deliver through the platform. May raise; ``send`` catches it."""
