"""Telegram Bot API client.

Thin wrapper over the Bot API HTTPS endpoints used by the notification
channel and the webhook adapter:

- sendMessage / sendPhoto / sendSticker
- answerCallbackQuery (button clicks)
- editMessageReplyMarkup / editMessageCaption / deleteMessage

Every call returns a TelegramApiResult; network faults and API errors are
logged and reported in the result, never raised.

Usage:
    from infrastructure.telegram import TelegramButton, TelegramClient

    client = TelegramClient.from_settings(settings.telegram, requests.Session())

    result = client.send_message(
        "12345",
        "*Deploy finished*",
        buttons=[TelegramButton.callback("Rollback", "rollback:42")],
    )
    if result.ok:
        message_id = result.message_id
"""

import os
import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import requests
from structlog.stdlib import BoundLogger

from infrastructure.configuration import TelegramSettings
from infrastructure.logging import get_module_logger
from infrastructure.telegram.buttons import TelegramButton, build_inline_keyboard

API_BASE = "https://api.telegram.org/bot{token}/{method}"
CAPTION_LIMIT = 1024
CALLBACK_ANSWER_LIMIT = 200
UNKNOWN_API_ERROR = "Unknown Telegram API error"
NOT_CONFIGURED_ERROR = "Telegram is not configured"

_WINDOWS_ABSOLUTE_PATH = re.compile(r"^[A-Za-z]:[\\/]")


@dataclass(frozen=True)
class TelegramApiResult:
    """Outcome of one Bot API call."""

    ok: bool
    message_id: Optional[int] = None
    result: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.ok:
            return {"ok": True, "message_id": self.message_id, "result": self.result}
        return {"ok": False, "error": self.error}


def is_local_file_path(path: str) -> bool:
    """Check whether a photo argument names an absolute local path."""
    return path.startswith("/") or bool(_WINDOWS_ABSOLUTE_PATH.match(path))


class TelegramClient:
    """Telegram Bot API client.

    The client is configured when it holds an HTTP session, is enabled and
    has a bot token. An unconfigured client answers every call with
    ``TelegramApiResult(ok=False, error="Telegram is not configured")``
    without touching the network.
    """

    def __init__(
        self,
        bot_token: str,
        session: Optional[requests.Session],
        enabled: bool = True,
        chat_ids: Optional[Sequence[str]] = None,
        disable_preview: bool = False,
        timeout: float = 10.0,
        logger: Optional[BoundLogger] = None,
    ):
        self._bot_token = bot_token
        self._session = session
        self.enabled = enabled
        self._chat_ids = [str(chat_id) for chat_id in chat_ids or []]
        self.disable_preview = disable_preview
        self.timeout = timeout
        self.logger = logger if logger is not None else get_module_logger()

    @classmethod
    def from_settings(
        cls,
        settings: TelegramSettings,
        session: Optional[requests.Session],
        logger: Optional[BoundLogger] = None,
    ) -> "TelegramClient":
        return cls(
            bot_token=settings.TELEGRAM_BOT_TOKEN,
            session=session,
            enabled=settings.TELEGRAM_ENABLED,
            chat_ids=settings.TELEGRAM_CHAT_IDS,
            disable_preview=settings.TELEGRAM_DISABLE_PREVIEW,
            timeout=settings.TELEGRAM_TIMEOUT,
            logger=logger,
        )

    def is_configured(self) -> bool:
        return self._session is not None and self.enabled and bool(self._bot_token)

    @property
    def chat_ids(self) -> List[str]:
        """Configured default chat IDs."""
        return list(self._chat_ids)

    def close(self) -> None:
        """Release pooled connections held by the HTTP session."""
        if self._session is not None:
            self._session.close()

    def send_message(
        self,
        chat_id: str,
        text: str,
        buttons: Optional[Sequence[TelegramButton]] = None,
        button_layout: Optional[Sequence[Sequence[int]]] = None,
    ) -> TelegramApiResult:
        """Send a Markdown text message, optionally with an inline keyboard."""
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": "Markdown",
            "disable_web_page_preview": self.disable_preview,
        }
        if buttons:
            payload["reply_markup"] = build_inline_keyboard(buttons, button_layout)

        return self._call_api("sendMessage", payload)

    def send_photo(
        self,
        chat_id: str,
        photo: str,
        caption: str = "",
        buttons: Optional[Sequence[TelegramButton]] = None,
        button_layout: Optional[Sequence[Sequence[int]]] = None,
    ) -> TelegramApiResult:
        """Send a photo with an optional caption and inline keyboard.

        Args:
            chat_id: Target chat
            photo: Photo URL, Telegram file_id or absolute local path. Local
                files are uploaded as multipart/form-data.
            caption: Markdown caption, truncated to 1024 characters
            buttons: Optional inline keyboard buttons
            button_layout: Optional rows of button indices
        """
        fields: Dict[str, Any] = {"chat_id": chat_id, "parse_mode": "Markdown"}
        if caption:
            fields["caption"] = caption[:CAPTION_LIMIT]
        if buttons:
            fields["reply_markup"] = build_inline_keyboard(buttons, button_layout)

        if is_local_file_path(photo):
            return self._send_photo_file(photo, fields)

        return self._call_api("sendPhoto", {**fields, "photo": photo})

    def _send_photo_file(self, path: str, fields: Dict[str, Any]) -> TelegramApiResult:
        if not os.path.isfile(path):
            return TelegramApiResult(ok=False, error=f"File not found: {path}")

        if not self.is_configured():
            return TelegramApiResult(ok=False, error=NOT_CONFIGURED_ERROR)

        try:
            with open(path, "rb") as photo_file:
                files = {"photo": (os.path.basename(path), photo_file)}
                return self._call_api("sendPhoto", fields, files=files)
        except OSError as e:
            self.logger.error("telegram_photo_read_failed", path=path, error=str(e))
            return TelegramApiResult(ok=False, error=str(e))

    def answer_callback_query(
        self, callback_query_id: str, text: str = "", show_alert: bool = False
    ) -> TelegramApiResult:
        """Acknowledge a button click with a toast, or an alert popup."""
        return self._call_api(
            "answerCallbackQuery",
            {
                "callback_query_id": callback_query_id,
                "text": text[:CALLBACK_ANSWER_LIMIT],
                "show_alert": show_alert,
            },
        )

    def edit_message_reply_markup(
        self,
        chat_id: str,
        message_id: int,
        buttons: Optional[Sequence[TelegramButton]] = None,
        button_layout: Optional[Sequence[Sequence[int]]] = None,
    ) -> TelegramApiResult:
        """Replace a message's inline keyboard; no buttons removes it."""
        return self._call_api(
            "editMessageReplyMarkup",
            {
                "chat_id": chat_id,
                "message_id": message_id,
                "reply_markup": build_inline_keyboard(buttons or [], button_layout),
            },
        )

    def edit_message_caption(
        self,
        chat_id: str,
        message_id: int,
        caption: str,
        buttons: Optional[Sequence[TelegramButton]] = None,
        button_layout: Optional[Sequence[Sequence[int]]] = None,
    ) -> TelegramApiResult:
        payload: Dict[str, Any] = {
            "chat_id": chat_id,
            "message_id": message_id,
            "caption": caption[:CAPTION_LIMIT],
            "parse_mode": "Markdown",
        }
        if buttons:
            payload["reply_markup"] = build_inline_keyboard(buttons, button_layout)

        return self._call_api("editMessageCaption", payload)

    def delete_message(self, chat_id: str, message_id: int) -> TelegramApiResult:
        """Delete a message.

        Telegram only lets bots delete messages under some conditions, e.g.
        messages older than 48 hours cannot be deleted in supergroups.
        """
        return self._call_api(
            "deleteMessage", {"chat_id": chat_id, "message_id": message_id}
        )

    def send_sticker(self, chat_id: str, sticker: str) -> TelegramApiResult:
        return self._call_api("sendSticker", {"chat_id": chat_id, "sticker": sticker})

    def _call_api(
        self,
        method: str,
        payload: Dict[str, Any],
        files: Optional[Dict[str, Any]] = None,
    ) -> TelegramApiResult:
        """POST to a Bot API method, as JSON or as multipart when files are given."""
        if not self.is_configured():
            return TelegramApiResult(ok=False, error=NOT_CONFIGURED_ERROR)

        url = API_BASE.format(token=self._bot_token, method=method)
        log = self.logger.bind(method=method)

        try:
            if files:
                response = self._session.post(
                    url, data=payload, files=files, timeout=self.timeout
                )
            else:
                response = self._session.post(url, json=payload, timeout=self.timeout)
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            log.error("telegram_api_exception", error=str(e), error_type=type(e).__name__)
            return TelegramApiResult(ok=False, error=str(e))

        if not isinstance(body, dict):
            body = {}

        if response.status_code == 200 and body.get("ok"):
            result = body.get("result")
            if not isinstance(result, dict):
                result = {}
            log.debug("telegram_api_success", message_id=result.get("message_id"))
            return TelegramApiResult(
                ok=True, message_id=result.get("message_id"), result=result
            )

        error = body.get("description") or UNKNOWN_API_ERROR
        log.error("telegram_api_error", status_code=response.status_code, error=error)
        return TelegramApiResult(ok=False, error=error)
