"""Lifecycle events emitted around notification sends and Telegram updates."""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional

from infrastructure.events.models import Event
from infrastructure.notifications.models import (
    Notification,
    NotificationResult,
    Recipient,
)


@dataclass(kw_only=True, eq=False)
class NotificationPreSendEvent(Event):
    """Dispatched before a channel send; a listener may cancel it.

    Example:
        @dispatcher.listen(NotificationPreSendEvent)
        def mute_telegram_at_night(event):
            if event.channel == "telegram" and is_quiet_hours():
                event.cancel()
    """

    event_type: ClassVar[str] = "notification.pre_send"

    notification: Notification
    recipient: Recipient
    channel: str
    cancelled: bool = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def is_cancelled(self) -> bool:
        return self.cancelled

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            channel=self.channel,
            title=self.notification.title,
            cancelled=self.cancelled,
        )
        return data


@dataclass(kw_only=True, eq=False)
class NotificationSentEvent(Event):
    """Dispatched after a channel reported success."""

    event_type: ClassVar[str] = "notification.sent"

    notification: Notification
    recipient: Recipient
    result: NotificationResult

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            channel=self.result.channel,
            title=self.notification.title,
            message=self.result.message,
        )
        return data


@dataclass(kw_only=True, eq=False)
class NotificationFailedEvent(Event):
    """Dispatched after a channel reported anything other than success."""

    event_type: ClassVar[str] = "notification.failed"

    notification: Notification
    recipient: Recipient
    result: NotificationResult

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            channel=self.result.channel,
            title=self.notification.title,
            message=self.result.message,
            status=self.result.status.value,
        )
        return data


@dataclass(kw_only=True, eq=False)
class TelegramCallbackEvent(Event):
    """Dispatched when a user presses an inline keyboard button.

    Listeners that act on the callback set ``handled`` and may provide
    ``response_text`` for the popup shown to the user.

    Example:
        @dispatcher.listen(TelegramCallbackEvent)
        def approve(event):
            parsed = event.parse_callback_data()
            if parsed["action"] == "approve":
                approve_request(parsed["id"])
                event.handled = True
                event.response_text = "Approved"
    """

    event_type: ClassVar[str] = "telegram.callback"

    callback_query_id: str
    callback_data: str
    chat_id: str
    message_id: int
    user_id: str
    username: Optional[str] = None
    handled: bool = False
    response_text: Optional[str] = None
    show_alert: bool = False
    payload: Dict[str, Any] = field(default_factory=dict)

    def parse_callback_data(self) -> Dict[str, Any]:
        """Split ``action:id:extra`` callback data.

        Returns:
            Dict with "action", "id" (int, or None when absent or not
            numeric) and "extra" (the remainder, colons preserved).
        """
        parts = self.callback_data.split(":", 2)
        raw_id = parts[1] if len(parts) > 1 else None
        return {
            "action": parts[0],
            "id": int(raw_id) if raw_id is not None and raw_id.isdigit() else None,
            "extra": parts[2] if len(parts) > 2 else None,
        }

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            callback_data=self.callback_data,
            chat_id=self.chat_id,
            user_id=self.user_id,
            handled=self.handled,
        )
        return data


@dataclass(kw_only=True, eq=False)
class TelegramMessageEvent(Event):
    """Dispatched when a text message reaches the bot."""

    event_type: ClassVar[str] = "telegram.message"

    chat_id: str
    message_id: int
    user_id: str
    text: str
    username: Optional[str] = None
    first_name: Optional[str] = None
    reply_to_message_id: Optional[int] = None
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def sender_name(self) -> str:
        return self.username or self.first_name or "User"

    @property
    def is_reply(self) -> bool:
        return self.reply_to_message_id is not None

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data.update(
            chat_id=self.chat_id,
            user_id=self.user_id,
            is_reply=self.is_reply,
        )
        return data
