"""Notification system exceptions."""


class NotificationError(Exception):
    """Base class for notification errors."""


class ChannelNotConfiguredError(NotificationError):
    """Raised by the channel registry when no channel supports a name.

    Despite the name this is a lookup miss: the registry found no channel
    answering to the requested name.
    """

    def __init__(self, channel_name: str):
        super().__init__(f'Channel "{channel_name}" not found or not configured')
        self.channel_name = channel_name


class MailTransportError(NotificationError):
    """Raised by a mail transport when a message could not be handed off."""


class TemplateRenderError(NotificationError):
    """Raised when a notification template fails to render."""

    def __init__(self, message: str, template_name: str | None = None):
        super().__init__(message)
        self.template_name = template_name
