"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.email import EmailSettings
from infrastructure.configuration.integrations.telegram import TelegramSettings

__all__ = [
    "EmailSettings",
    "TelegramSettings",
]
