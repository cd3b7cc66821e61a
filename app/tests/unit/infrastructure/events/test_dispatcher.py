"""Unit tests for infrastructure event dispatcher."""

from unittest.mock import MagicMock

import pytest

from infrastructure.events.dispatcher import WILDCARD

pytestmark = pytest.mark.unit


class TestListenerRegistration:
    """Test listener registration."""

    def test_add_listener_by_class(
        self, dispatcher, mock_event_handler, sample_event_cls
    ):
        returned = dispatcher.add_listener(sample_event_cls, mock_event_handler)

        assert returned is mock_event_handler
        assert dispatcher.get_listeners("test.event") == [mock_event_handler]
        assert dispatcher.get_registered_events() == ["test.event"]

    def test_listen_decorator(self, dispatcher, sample_event_cls):
        @dispatcher.listen("test.event")
        def on_event(event):
            return event

        assert dispatcher.get_listeners(sample_event_cls) == [on_event]

    def test_remove_listener(self, dispatcher, mock_event_handler, sample_event_cls):
        dispatcher.add_listener(sample_event_cls, mock_event_handler)

        assert dispatcher.remove_listener(sample_event_cls, mock_event_handler) is True
        assert dispatcher.get_listeners(sample_event_cls) == []
        assert dispatcher.get_registered_events() == []

    def test_remove_unknown_listener(
        self, dispatcher, mock_event_handler, sample_event_cls
    ):
        assert dispatcher.remove_listener(sample_event_cls, mock_event_handler) is False

    def test_get_listeners_returns_snapshot(
        self, dispatcher, mock_event_handler, sample_event_cls
    ):
        dispatcher.add_listener(sample_event_cls, mock_event_handler)

        dispatcher.get_listeners(sample_event_cls).clear()

        assert dispatcher.get_listeners(sample_event_cls) == [mock_event_handler]

    def test_clear(self, dispatcher, mock_event_handler, sample_event_cls):
        dispatcher.add_listener(sample_event_cls, mock_event_handler)
        dispatcher.add_listener(WILDCARD, mock_event_handler)

        dispatcher.clear()

        assert dispatcher.get_registered_events() == []


class TestDispatch:
    """Test synchronous dispatch."""

    def test_dispatch_returns_same_event(self, dispatcher, event_factory):
        event = event_factory()

        assert dispatcher.dispatch(event) is event

    def test_dispatch_without_listeners(self, dispatcher, event_factory):
        event = event_factory(value=1)

        assert dispatcher.dispatch(event).value == 1

    def test_listeners_run_in_registration_order(
        self, dispatcher, event_factory, sample_event_cls
    ):
        calls = []
        dispatcher.add_listener(sample_event_cls, lambda e: calls.append("first"))
        dispatcher.add_listener(sample_event_cls, lambda e: calls.append("second"))

        dispatcher.dispatch(event_factory())

        assert calls == ["first", "second"]

    def test_listener_mutations_are_visible(
        self, dispatcher, event_factory, sample_event_cls
    ):
        def increment(event):
            event.value += 1

        dispatcher.add_listener(sample_event_cls, increment)
        dispatcher.add_listener(sample_event_cls, increment)

        assert dispatcher.dispatch(event_factory()).value == 2

    def test_only_matching_listeners_run(
        self, dispatcher, event_factory, other_event_cls
    ):
        other = MagicMock()
        dispatcher.add_listener(other_event_cls, other)

        dispatcher.dispatch(event_factory())

        other.assert_not_called()

    def test_wildcard_listeners_run_after_specific(
        self, dispatcher, event_factory, sample_event_cls, other_event_cls
    ):
        calls = []
        dispatcher.add_listener(WILDCARD, lambda e: calls.append("wildcard"))
        dispatcher.add_listener(sample_event_cls, lambda e: calls.append("specific"))

        dispatcher.dispatch(event_factory())
        dispatcher.dispatch(other_event_cls())

        assert calls == ["specific", "wildcard", "wildcard"]

    def test_failing_listener_is_isolated(
        self, dispatcher, event_factory, mock_logger, sample_event_cls
    ):
        after = MagicMock()

        def broken(event):
            raise RuntimeError("boom")

        dispatcher.add_listener(sample_event_cls, broken)
        dispatcher.add_listener(sample_event_cls, after)

        event = event_factory()
        assert dispatcher.dispatch(event) is event

        after.assert_called_once_with(event)
        mock_logger.error.assert_called_once()
        args, kwargs = mock_logger.error.call_args
        assert args[0] == "event_listener_failed"
        assert kwargs["listener"] == "broken"
        assert kwargs["error"] == "boom"
        assert kwargs["error_type"] == "RuntimeError"
