import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.notifications`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402

from infrastructure.services import providers  # noqa: E402


PROVIDERS = (
    providers.get_settings,
    providers.get_event_dispatcher,
    providers.get_telegram_client,
    providers.get_template_renderer,
    providers.get_mailer,
    providers.get_channel_registry,
    providers.get_notification_service,
    providers.get_telegram_webhook_handler,
)


@pytest.fixture
def clear_provider_caches():
    """Clear cached provider singletons before and after a test."""
    for provider in PROVIDERS:
        provider.cache_clear()
    yield
    for provider in PROVIDERS:
        provider.cache_clear()


@pytest.fixture
def notification_env(monkeypatch):
    """Set a complete, enabled notification environment.

    Returns:
        Dict of the environment variables that were set
    """
    env = {
        "EMAIL_ENABLED": "true",
        "EMAIL_FROM": "alerts@example.com",
        "EMAIL_FROM_NAME": "Alerts",
        "SMTP_HOST": "smtp.example.com",
        "TELEGRAM_ENABLED": "true",
        "TELEGRAM_BOT_TOKEN": "123456:test-token",
        "TELEGRAM_CHAT_IDS": "10,11",
        "NOTIFICATION_DEFAULT_CHANNELS": "email,telegram",
    }
    for key, value in env.items():
        monkeypatch.setenv(key, value)
    return env
