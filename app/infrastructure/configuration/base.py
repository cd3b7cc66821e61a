"""Shared base classes and utilities for settings modules."""

import json
from typing import Any, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class IntegrationSettings(BaseSettings):
    """Base class for external integration settings.

    All integration settings (mail transport, Telegram Bot API) inherit from
    this class to ensure consistent configuration behavior (env file loading,
    case sensitivity).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


class InfrastructureSettings(BaseSettings):
    """Base class for infrastructure-level settings.

    Infrastructure settings control core dispatch behavior like default
    channels, default priority and template lookup.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


def parse_string_list(value: Any) -> List[str]:
    """Parse a list setting from a JSON list, a comma-separated string or a sequence.

    Args:
        value: Raw value from the environment or from keyword arguments.

    Returns:
        List of non-empty, stripped strings.

    Raises:
        ValueError: If the value is a malformed JSON list or of an unsupported type.
    """
    if value is None:
        return []
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return []
        if s.startswith("["):
            try:
                value = json.loads(s)
            except (json.JSONDecodeError, ValueError) as e:
                raise ValueError(f"Invalid JSON list: {e} (value: {s[:80]})") from e
        else:
            return [part.strip() for part in s.split(",") if part.strip()]
    if isinstance(value, (list, tuple, set)):
        return [str(item).strip() for item in value if str(item).strip()]
    raise ValueError("Expected a JSON list, a comma-separated string or a sequence")
