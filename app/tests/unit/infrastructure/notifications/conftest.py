"""Test fixtures for notification infrastructure tests."""

import pytest
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

from infrastructure.events import EventDispatcher
from infrastructure.notifications.channels.base import NotificationChannel
from infrastructure.notifications.models import (
    Notification,
    NotificationPriority,
    NotificationResult,
    Recipient,
)


@pytest.fixture
def recipient_factory():
    """Factory for creating Recipient instances.

    Returns:
        Factory function that creates Recipient objects with customizable fields

    Example:
        recipient = recipient_factory(email="test@example.com")
        telegram_only = recipient_factory(email=None, telegram_chat_id="12345")
    """

    def _factory(
        email: Optional[str] = "test@example.com",
        telegram_chat_id: Optional[str] = None,
        user_id: Optional[int] = None,
        locale: str = "en",
    ) -> Recipient:
        return Recipient(
            email=email,
            telegram_chat_id=telegram_chat_id,
            user_id=user_id,
            locale=locale,
        )

    return _factory


@pytest.fixture
def notification_factory():
    """Factory for creating Notification instances.

    Returns:
        Factory function that creates Notification objects with customizable fields

    Example:
        notification = notification_factory(title="Test", content="Body")
        urgent = notification_factory(
            channels=["telegram"],
            priority=NotificationPriority.URGENT,
        )
    """

    def _factory(
        title: str = "Test Notification",
        content: str = "Test message body",
        channels: Optional[List[str]] = None,
        priority: NotificationPriority = NotificationPriority.NORMAL,
        template: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> Notification:
        return Notification(
            title=title,
            content=content,
            channels=channels or [],
            priority=priority,
            template=template,
            context=context or {},
            metadata=metadata or {},
        )

    return _factory


class StubChannel(NotificationChannel):
    """In-memory channel returning a preset result."""

    def __init__(
        self,
        channel_name: str,
        configured: bool = True,
        result: Optional[NotificationResult] = None,
        error: Optional[Exception] = None,
        aliases: tuple = (),
    ):
        super().__init__(MagicMock())
        self._name = channel_name
        self._configured = configured
        self._result = result
        self._error = error
        self._aliases = aliases
        self.calls: List[tuple] = []

    @property
    def name(self) -> str:
        return self._name

    def supports(self, channel_name: str) -> bool:
        return channel_name == self._name or channel_name in self._aliases

    def is_configured(self) -> bool:
        return self._configured

    def _do_send(self, notification, recipient) -> NotificationResult:
        self.calls.append((notification, recipient))
        if self._error is not None:
            raise self._error
        if self._result is not None:
            return self._result
        return NotificationResult.success(self._name, f"sent via {self._name}")


@pytest.fixture
def stub_channel_factory():
    """Factory for StubChannel instances.

    Example:
        email = stub_channel_factory("email")
        broken = stub_channel_factory("telegram", error=RuntimeError("boom"))
    """

    def _factory(channel_name: str = "email", **kwargs) -> StubChannel:
        return StubChannel(channel_name, **kwargs)

    return _factory


@pytest.fixture
def event_dispatcher():
    """EventDispatcher with a mocked logger."""
    return EventDispatcher(logger=MagicMock())


@pytest.fixture
def mock_logger():
    """Mock structlog logger whose bind() returns itself."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger
