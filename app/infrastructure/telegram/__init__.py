"""Telegram Bot API integration: client, inline keyboards and Markdown helpers."""

from infrastructure.telegram.buttons import TelegramButton, build_inline_keyboard
from infrastructure.telegram.client import TelegramApiResult, TelegramClient
from infrastructure.telegram.markdown import escape_markdown, html_to_markdown

__all__ = [
    "TelegramApiResult",
    "TelegramButton",
    "TelegramClient",
    "build_inline_keyboard",
    "escape_markdown",
    "html_to_markdown",
]
