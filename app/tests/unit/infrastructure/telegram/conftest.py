"""Fixtures for Telegram integration tests."""

from unittest.mock import MagicMock

import pytest

from infrastructure.telegram.client import TelegramClient


@pytest.fixture
def api_response():
    """Factory for mocked Bot API HTTP responses.

    Example:
        response = api_response({"ok": True, "result": {"message_id": 1}})
        error = api_response({"ok": False, "description": "Bad Request"}, 400)
    """

    def _factory(body=None, status_code: int = 200):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = (
            body if body is not None else {"ok": True, "result": {"message_id": 1}}
        )
        return response

    return _factory


@pytest.fixture
def mock_session(api_response):
    """Mock requests.Session whose post() returns a successful response."""
    session = MagicMock()
    session.post.return_value = api_response()
    return session


@pytest.fixture
def telegram_client(mock_session):
    """Configured TelegramClient using the mock session."""
    return TelegramClient(
        bot_token="123456:test-token",
        session=mock_session,
        enabled=True,
        chat_ids=["10", 11],
        timeout=5,
        logger=MagicMock(),
    )
