"""Notification service for dependency injection.

Orchestrates a send across the channels a notification names: every channel
attempt is surrounded by lifecycle events and produces one result.
"""

from typing import List, Optional, Sequence

from structlog.stdlib import BoundLogger

from infrastructure.events import EventDispatcher
from infrastructure.logging import get_module_logger
from infrastructure.notifications.events import (
    NotificationFailedEvent,
    NotificationPreSendEvent,
    NotificationSentEvent,
)
from infrastructure.notifications.models import (
    Notification,
    NotificationResult,
    Recipient,
)
from infrastructure.notifications.registry import ChannelRegistry

DEFAULT_CHANNELS = ("email",)


class NotificationService:
    """Class-based notification service.

    For each channel name of a notification (or the default channels when
    it lists none), in order:

    1. dispatch NotificationPreSendEvent; a cancelled event skips the channel
    2. skip channels the registry does not have configured
    3. send through the channel and keep the result
    4. dispatch NotificationSentEvent or NotificationFailedEvent

    Channels are attempted one after the other and a failure never stops
    the remaining ones.

    Usage:
        # Via dependency injection
        from infrastructure.services import NotificationServiceDep

        @router.post("/notify")
        def notify(notification_service: NotificationServiceDep):
            results = notification_service.send(notification, recipient)
            return {"sent": sum(1 for r in results if r.is_success)}

        # Direct instantiation
        service = NotificationService(
            registry=ChannelRegistry([email_channel]),
            dispatcher=EventDispatcher(),
        )
        results = service.send(notification, recipient)
    """

    def __init__(
        self,
        registry: ChannelRegistry,
        dispatcher: EventDispatcher,
        default_channels: Optional[Sequence[str]] = None,
        logger: Optional[BoundLogger] = None,
    ):
        self.registry = registry
        self.dispatcher = dispatcher
        self.default_channels = list(
            default_channels if default_channels is not None else DEFAULT_CHANNELS
        )
        self.logger = logger if logger is not None else get_module_logger()

    def send(
        self, notification: Notification, recipient: Recipient
    ) -> List[NotificationResult]:
        """Send a notification to a recipient through its channels.

        Args:
            notification: Notification to send
            recipient: Recipient to deliver to

        Returns:
            One NotificationResult per channel actually attempted. Cancelled
            and unavailable channels contribute nothing.
        """
        channel_names = notification.channels or self.default_channels
        results: List[NotificationResult] = []

        for channel_name in channel_names:
            log = self.logger.bind(channel=channel_name, title=notification.title)

            pre_send = self.dispatcher.dispatch(
                NotificationPreSendEvent(
                    notification=notification,
                    recipient=recipient,
                    channel=channel_name,
                )
            )
            if pre_send.is_cancelled:
                log.info("notification_cancelled_by_listener")
                continue

            if not self.registry.has_channel(channel_name):
                log.warning("channel_not_available")
                continue

            channel = self.registry.get_channel(channel_name)
            result = channel.send(notification, recipient)
            results.append(result)

            if result.is_success:
                self.dispatcher.dispatch(
                    NotificationSentEvent(
                        notification=notification,
                        recipient=recipient,
                        result=result,
                    )
                )
                log.info("notification_sent")
            else:
                self.dispatcher.dispatch(
                    NotificationFailedEvent(
                        notification=notification,
                        recipient=recipient,
                        result=result,
                    )
                )
                log.error("notification_failed", message=result.message)

        return results
