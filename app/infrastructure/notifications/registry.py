"""Channel registry.

An ordered, read-only collection of channel instances built once at the
composition root. Lookups scan in registration order and the first channel
whose ``supports`` accepts the name wins.
"""

from typing import Iterable, List

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.exceptions import ChannelNotConfiguredError


class ChannelRegistry:
    """Registry for notification channels.

    Usage:
        registry = ChannelRegistry([email_channel, telegram_channel])

        if registry.has_channel("telegram"):
            result = registry.get_channel("telegram").send(notification, recipient)
    """

    def __init__(self, channels: Iterable[NotificationChannel]):
        self._channels: List[NotificationChannel] = list(channels)

    def get_channel(self, channel_name: str) -> NotificationChannel:
        """Get the first channel supporting a name.

        Raises:
            ChannelNotConfiguredError: If no channel supports the name.
        """
        for channel in self._channels:
            if channel.supports(channel_name):
                return channel
        raise ChannelNotConfiguredError(channel_name)

    def has_channel(self, channel_name: str) -> bool:
        """Check if a channel supporting the name exists and is configured."""
        return any(
            channel.supports(channel_name) and channel.is_configured()
            for channel in self._channels
        )

    def all_channels(self) -> List[NotificationChannel]:
        """Snapshot of the registered channels in registration order."""
        return list(self._channels)

    def __len__(self) -> int:
        return len(self._channels)
