"""Fixtures for infrastructure event system tests."""

from dataclasses import dataclass
from typing import ClassVar
from unittest.mock import MagicMock

import pytest

from infrastructure.events.dispatcher import EventDispatcher
from infrastructure.events.models import Event


@dataclass(kw_only=True, eq=False)
class SampleEvent(Event):
    """Minimal event used to exercise the dispatcher."""

    event_type: ClassVar[str] = "test.event"

    value: int = 0


@dataclass(kw_only=True, eq=False)
class OtherEvent(Event):
    event_type: ClassVar[str] = "test.other"


@pytest.fixture
def sample_event_cls():
    """Event subclass with event_type "test.event" and a mutable ``value``."""
    return SampleEvent


@pytest.fixture
def other_event_cls():
    """Event subclass with event_type "test.other"."""
    return OtherEvent


@pytest.fixture
def event_factory():
    """Factory for creating test events."""

    def _factory(value: int = 0) -> SampleEvent:
        return SampleEvent(value=value)

    return _factory


@pytest.fixture
def mock_logger():
    return MagicMock()


@pytest.fixture
def dispatcher(mock_logger):
    """Fresh dispatcher with a mock logger."""
    return EventDispatcher(logger=mock_logger)


@pytest.fixture
def mock_event_handler():
    """Mock event handler function."""
    handler = MagicMock()
    handler.__name__ = "mock_event_handler"
    return handler
