"""Telegram channel implementation using the Bot API client."""

from typing import Any, Dict, List, Optional

from structlog.stdlib import BoundLogger

from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import (
    Notification,
    NotificationPriority,
    NotificationResult,
    Recipient,
)
from infrastructure.telegram.client import TelegramClient

PRIORITY_EMOJI = {
    NotificationPriority.URGENT: "🚨",
    NotificationPriority.HIGH: "⚠️",
    NotificationPriority.NORMAL: "ℹ️",
    NotificationPriority.LOW: "📝",
}


def format_message(notification: Notification) -> str:
    """Render a notification as Telegram Markdown.

    Layout: priority emoji, bold title, blank line, body and, when the
    notification metadata carries a ``url``, a trailing "See more" link.
    """
    emoji = PRIORITY_EMOJI.get(notification.priority, "")
    text = f"{emoji} " if emoji else ""
    text += f"*{notification.title}*\n\n{notification.content}"

    url = notification.metadata.get("url")
    if url:
        text += f"\n\n🔗 [See more]({url})"

    return text


class TelegramChannel(NotificationChannel):
    """Telegram notification channel.

    A recipient with a ``telegram_chat_id`` gets the message in that chat
    only; otherwise it fans out to every chat ID configured on the client.
    The attempt succeeds only when every chat accepted the message.
    """

    def __init__(self, client: TelegramClient, logger: Optional[BoundLogger] = None):
        super().__init__(logger)
        self.client = client

    @property
    def name(self) -> str:
        return "telegram"

    @property
    def retry_priority(self) -> int:
        return 80

    def is_configured(self) -> bool:
        return self.client.is_configured()

    def resolve_chat_ids(self, recipient: Recipient) -> List[str]:
        if recipient.telegram_chat_id:
            return [recipient.telegram_chat_id]
        return self.client.chat_ids

    def _do_send(
        self, notification: Notification, recipient: Recipient
    ) -> NotificationResult:
        chat_ids = self.resolve_chat_ids(recipient)
        if not chat_ids:
            return NotificationResult.failed(
                channel=self.name,
                message="No Telegram chat ID provided for recipient",
            )

        text = format_message(notification)
        results: List[Dict[str, Any]] = []
        for chat_id in chat_ids:
            response = self.client.send_message(chat_id, text)
            if response.ok:
                results.append(
                    {"chat_id": chat_id, "ok": True, "message_id": response.message_id}
                )
            else:
                results.append({"chat_id": chat_id, "ok": False, "error": response.error})

        return self._aggregate(results)

    def _aggregate(self, results: List[Dict[str, Any]]) -> NotificationResult:
        sent = [r for r in results if r["ok"]]
        failed = [r for r in results if not r["ok"]]
        total = len(results)

        if not failed:
            self.logger.info("telegram_notification_sent", chat_count=total)
            return NotificationResult.success(
                channel=self.name,
                message=f"Telegram message sent to {total} chat(s)",
                metadata={
                    "message_ids": [r["message_id"] for r in sent],
                    "chat_ids": [r["chat_id"] for r in sent],
                    "results": results,
                },
            )

        first_error = failed[0]["error"]
        self.logger.error(
            "telegram_notification_failed",
            sent=len(sent),
            total=total,
            first_error=first_error,
        )

        if not sent:
            message = first_error
        else:
            message = f"Telegram: {len(sent)}/{total} sent, first error: {first_error}"

        return NotificationResult.failed(
            channel=self.name,
            message=message,
            metadata={"results": results},
        )
