"""Notification system core models.

Channel-agnostic value objects for dispatch: what to send (Notification),
to whom (Recipient) and what happened (NotificationResult). Features build
them, channels consume them. All of them are frozen once constructed.

Uses Pydantic BaseModel for:
- RFC 5322 compliant email validation (EmailStr)
- Runtime input validation
- Immutability (frozen models)
"""

from typing import Any, Dict, List, Optional
from enum import Enum

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class NotificationPriority(Enum):
    """Notification priority levels."""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"
    URGENT = "urgent"


class ResultStatus(Enum):
    """Outcome of one channel attempt."""

    SUCCESS = "success"
    FAILED = "failed"
    QUEUED = "queued"


class Recipient(BaseModel):
    """Notification recipient with per-channel identifiers.

    Every identifier is optional; a channel whose identifier is missing
    reports a failed result instead of the model rejecting the recipient.

    Attributes:
        email: Email address (validated with EmailStr when present)
        telegram_chat_id: Telegram chat ID
        discord_webhook: Discord webhook URL
        slack_webhook: Slack webhook URL
        user_id: Application user ID (in-app notifications)
        locale: Preferred locale (default: "en")

    Example:
        recipient = Recipient(email="user@example.com", telegram_chat_id="12345")
        recipient.channel_identifier("telegram")  # "12345"
    """

    model_config = ConfigDict(frozen=True)

    email: Optional[EmailStr] = None
    telegram_chat_id: Optional[str] = None
    discord_webhook: Optional[str] = None
    slack_webhook: Optional[str] = None
    user_id: Optional[int] = None
    locale: str = "en"

    def channel_identifier(self, channel_name: str) -> Optional[str]:
        """Return the identifier this recipient has for a channel.

        Args:
            channel_name: Channel name (email, telegram, discord, slack, in_app)

        Returns:
            The identifier, or None when missing or the channel is unknown.
        """
        if channel_name == "email":
            return self.email
        if channel_name == "telegram":
            return self.telegram_chat_id
        if channel_name == "discord":
            return self.discord_webhook
        if channel_name == "slack":
            return self.slack_webhook
        if channel_name == "in_app":
            return str(self.user_id) if self.user_id is not None else None
        return None


class Notification(BaseModel):
    """Channel-agnostic notification message.

    Attributes:
        title: Subject line (email), bold heading (Telegram)
        content: Message body; HTML is accepted for email
        template: Optional template name used to render the email body
        context: Variables made available to the template
        channels: Ordered channel names; empty means the service defaults
        priority: NotificationPriority level (default: NORMAL)
        metadata: Channel hints such as {"url": "..."}
        is_async: Queuing hint (alias "async"); the dispatch core ignores it

    Example:
        notification = Notification(
            title="Deploy finished",
            content="Version 1.4.2 is live.",
            channels=["telegram", "email"],
            priority=NotificationPriority.HIGH,
            metadata={"url": "https://example.com/releases/1.4.2"},
        )
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str
    content: str
    template: Optional[str] = None
    context: Dict[str, Any] = Field(default_factory=dict)
    channels: List[str] = Field(default_factory=list)
    priority: NotificationPriority = NotificationPriority.NORMAL
    metadata: Dict[str, Any] = Field(default_factory=dict)
    is_async: bool = Field(default=False, alias="async")


class NotificationResult(BaseModel):
    """Result of one channel's delivery attempt.

    Attributes:
        channel: Channel name used (e.g., "email", "telegram")
        status: ResultStatus of the attempt
        message: Human-readable result message
        metadata: Provider details (message IDs, exception class, per-chat results)

    Example:
        result = NotificationResult.success("telegram", "Telegram message sent to 2 chat(s)")
        if result.is_failed:
            ...
    """

    model_config = ConfigDict(frozen=True)

    channel: str
    status: ResultStatus
    message: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        """Check if delivery was successful."""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_failed(self) -> bool:
        """Check if delivery failed."""
        return self.status == ResultStatus.FAILED

    @property
    def is_queued(self) -> bool:
        """Check if delivery was handed to a queue."""
        return self.status == ResultStatus.QUEUED

    @classmethod
    def success(
        cls,
        channel: str,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "NotificationResult":
        """Create a SUCCESS result."""
        return cls(
            channel=channel,
            status=ResultStatus.SUCCESS,
            message=message,
            metadata=metadata or {},
        )

    @classmethod
    def failed(
        cls,
        channel: str,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "NotificationResult":
        """Create a FAILED result."""
        return cls(
            channel=channel,
            status=ResultStatus.FAILED,
            message=message,
            metadata=metadata or {},
        )

    @classmethod
    def queued(
        cls,
        channel: str,
        message: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "NotificationResult":
        """Create a QUEUED result."""
        return cls(
            channel=channel,
            status=ResultStatus.QUEUED,
            message=message,
            metadata=metadata or {},
        )
