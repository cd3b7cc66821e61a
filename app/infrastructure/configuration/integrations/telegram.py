"""Telegram Bot API integration settings."""

from typing import Annotated, Any, List, Optional

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import IntegrationSettings, parse_string_list


class TelegramSettings(IntegrationSettings):
    """Telegram Bot API configuration.

    Environment Variables:
        TELEGRAM_ENABLED: Enable the Telegram channel
        TELEGRAM_BOT_TOKEN: Bot token issued by @BotFather
        TELEGRAM_CHAT_IDS: Chat IDs that receive fan-out notifications,
            as a JSON list or a comma-separated string
        TELEGRAM_DISABLE_PREVIEW: Disable link previews in sent messages
        TELEGRAM_WEBHOOK_SECRET: Shared secret expected in the
            X-Telegram-Bot-Api-Secret-Token header of webhook calls
        TELEGRAM_TIMEOUT: HTTP timeout in seconds (default: 10)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        if settings.telegram.TELEGRAM_ENABLED:
            chat_ids = settings.telegram.TELEGRAM_CHAT_IDS
        ```
    """

    TELEGRAM_ENABLED: bool = False
    TELEGRAM_BOT_TOKEN: str = ""
    TELEGRAM_CHAT_IDS: Annotated[List[str], NoDecode] = Field(default_factory=list)
    TELEGRAM_DISABLE_PREVIEW: bool = False
    TELEGRAM_WEBHOOK_SECRET: Optional[str] = None
    TELEGRAM_TIMEOUT: float = Field(default=10.0, gt=0)

    @field_validator("TELEGRAM_CHAT_IDS", mode="before")
    @classmethod
    def _parse_chat_ids(cls, v: Any) -> List[str]:
        """Accept chat IDs as a JSON list, a comma-separated string or a list."""
        return parse_string_list(v)

    @field_validator("TELEGRAM_WEBHOOK_SECRET", mode="before")
    @classmethod
    def _empty_secret_is_none(cls, v: Any) -> Any:
        """Treat an empty webhook secret as not configured."""
        if isinstance(v, str) and not v.strip():
            return None
        return v
