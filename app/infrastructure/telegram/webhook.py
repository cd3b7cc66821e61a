"""Telegram webhook update handling.

Turns Bot API updates into events:

- callback_query (inline keyboard button click) -> TelegramCallbackEvent,
  then the click is answered with the listener's response text
- message with text -> TelegramMessageEvent

Other update types (edited_message, channel_post, ...) are acknowledged and
ignored.
"""

import hmac
from dataclasses import dataclass
from typing import Any, Dict, Optional

from structlog.stdlib import BoundLogger

from infrastructure.events import EventDispatcher
from infrastructure.logging import get_module_logger
from infrastructure.notifications.events import (
    TelegramCallbackEvent,
    TelegramMessageEvent,
)
from infrastructure.telegram.client import TelegramClient

SECRET_HEADER = "X-Telegram-Bot-Api-Secret-Token"
UNHANDLED_CALLBACK_TEXT = "Action not implemented"


@dataclass(frozen=True)
class WebhookResponse:
    """HTTP status and JSON body the webhook endpoint should return."""

    status_code: int
    body: Dict[str, Any]


OK = WebhookResponse(200, {"ok": True})


class TelegramWebhookHandler:
    """Validate and route Telegram webhook updates.

    Usage:
        handler = TelegramWebhookHandler(client, dispatcher, webhook_secret="s3cret")

        if not handler.verify_secret(request.headers.get(SECRET_HEADER)):
            ...
        response = handler.handle_update(update)
    """

    def __init__(
        self,
        client: TelegramClient,
        dispatcher: EventDispatcher,
        webhook_secret: Optional[str] = None,
        logger: Optional[BoundLogger] = None,
    ):
        self.client = client
        self.dispatcher = dispatcher
        self.webhook_secret = webhook_secret
        self.logger = logger if logger is not None else get_module_logger()

    def verify_secret(self, provided: Optional[str]) -> bool:
        """Check the secret token header; always passes without a configured secret."""
        if self.webhook_secret is None:
            return True
        if provided is None:
            return False
        return hmac.compare_digest(provided.encode(), self.webhook_secret.encode())

    def handle_update(self, update: Any) -> WebhookResponse:
        """Route one decoded update.

        Args:
            update: Decoded JSON body of the webhook call

        Returns:
            WebhookResponse for the endpoint to send back
        """
        if not isinstance(update, dict):
            self.logger.warning("telegram_webhook_invalid_payload")
            return WebhookResponse(400, {"error": "Invalid payload"})

        self.logger.debug("telegram_webhook_received", update_id=update.get("update_id"))

        callback_query = update.get("callback_query")
        if callback_query is not None:
            return self._handle_callback_query(callback_query, update)

        message = update.get("message")
        if isinstance(message, dict) and message.get("text") is not None:
            return self._handle_message(message, update)

        return OK

    def _handle_callback_query(
        self, callback_query: Any, update: Dict[str, Any]
    ) -> WebhookResponse:
        if not isinstance(callback_query, dict):
            callback_query = {}

        callback_query_id = str(callback_query.get("id") or "")
        callback_data = str(callback_query.get("data") or "")
        sender = callback_query.get("from") or {}
        message = callback_query.get("message") or {}
        chat_id = str((message.get("chat") or {}).get("id") or "")
        message_id = _as_int(message.get("message_id"))

        if not callback_query_id or not callback_data:
            self.logger.warning("telegram_callback_missing_fields")
            return WebhookResponse(400, {"error": "Missing required fields"})

        self.logger.info(
            "telegram_callback_received",
            callback_data=callback_data,
            sender=sender.get("username") or sender.get("id") or "unknown",
            chat_id=chat_id,
            message_id=message_id,
        )

        event = self.dispatcher.dispatch(
            TelegramCallbackEvent(
                callback_query_id=callback_query_id,
                callback_data=callback_data,
                chat_id=chat_id,
                message_id=message_id,
                user_id=str(sender.get("id") or ""),
                username=sender.get("username"),
                payload=update,
            )
        )

        response_text = event.response_text or ""
        if not event.handled:
            response_text = UNHANDLED_CALLBACK_TEXT

        self.client.answer_callback_query(
            callback_query_id, response_text, event.show_alert
        )
        return OK

    def _handle_message(
        self, message: Dict[str, Any], update: Dict[str, Any]
    ) -> WebhookResponse:
        chat_id = str((message.get("chat") or {}).get("id") or "")
        sender = message.get("from") or {}
        user_id = str(sender.get("id") or "")
        text = str(message.get("text") or "")

        reply_to = message.get("reply_to_message")
        reply_to_message_id = (
            _as_int(reply_to.get("message_id")) if isinstance(reply_to, dict) else None
        )

        if not chat_id or not user_id or not text:
            return OK

        self.logger.info(
            "telegram_message_received",
            sender=sender.get("username") or user_id,
            chat_id=chat_id,
            text_preview=text[:50],
            is_reply=reply_to_message_id is not None,
        )

        self.dispatcher.dispatch(
            TelegramMessageEvent(
                chat_id=chat_id,
                message_id=_as_int(message.get("message_id")),
                user_id=user_id,
                text=text,
                username=sender.get("username"),
                first_name=sender.get("first_name"),
                reply_to_message_id=reply_to_message_id,
                payload=update,
            )
        )
        return OK


def _as_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0
