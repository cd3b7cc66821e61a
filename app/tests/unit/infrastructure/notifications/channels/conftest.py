"""Fixtures for notification channel tests."""

from unittest.mock import MagicMock
import pytest

from infrastructure.telegram.client import TelegramApiResult


@pytest.fixture
def mock_mailer():
    """Mock mail transport accepting every message.

    Returns:
        MagicMock with a send() method
    """
    mailer = MagicMock()
    mailer.send = MagicMock(return_value=None)
    return mailer


@pytest.fixture
def mock_template_renderer():
    """Mock template renderer returning a fixed HTML body."""
    renderer = MagicMock()
    renderer.is_available.return_value = True
    renderer.render.return_value = "<h1>Rendered</h1>"
    return renderer


@pytest.fixture
def mock_telegram_client():
    """Mock TelegramClient configured with two default chats.

    send_message succeeds with message ids 100, 101, ... in call order.
    """
    client = MagicMock()
    client.is_configured.return_value = True
    client.chat_ids = ["10", "11"]

    counter = {"next": 100}

    def _send_message(chat_id, text, *args, **kwargs):
        message_id = counter["next"]
        counter["next"] += 1
        return TelegramApiResult(ok=True, message_id=message_id, result={"message_id": message_id})

    client.send_message.side_effect = _send_message
    return client
