"""Notification dispatch infrastructure settings."""

from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import InfrastructureSettings, parse_string_list


class NotificationSettings(InfrastructureSettings):
    """Dispatch defaults applied by the notification service.

    Environment Variables:
        NOTIFICATION_DEFAULT_CHANNELS: Channels used when a notification lists
            none, as a JSON list or a comma-separated string (default: email)
        NOTIFICATION_TEMPLATE_DIR: Directory searched for email templates
            before the built-in ones

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        defaults = settings.notifications.NOTIFICATION_DEFAULT_CHANNELS
        ```
    """

    NOTIFICATION_DEFAULT_CHANNELS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: ["email"]
    )
    NOTIFICATION_TEMPLATE_DIR: Optional[str] = None

    @field_validator("NOTIFICATION_DEFAULT_CHANNELS", mode="before")
    @classmethod
    def _parse_default_channels(cls, v: Any) -> List[str]:
        """Accept default channels as a JSON list, a comma-separated string or a list."""
        return parse_string_list(v)
