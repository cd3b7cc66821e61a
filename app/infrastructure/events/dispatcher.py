"""Synchronous event dispatcher.

Listeners are plain callables registered per event type and invoked in
registration order when an event of that type is dispatched. A listener
that raises is logged and skipped; the remaining listeners still run and
the exception never reaches the code that dispatched the event.
"""

from threading import Lock
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar, Union

from structlog.stdlib import BoundLogger

from infrastructure.events.models import Event
from infrastructure.logging import get_module_logger

E = TypeVar("E", bound=Event)
Listener = Callable[[Any], Any]
EventKey = Union[str, Type[Event]]

# Listeners registered under this key receive every event
WILDCARD = "*"


def _event_type_of(key: EventKey) -> str:
    if isinstance(key, type) and issubclass(key, Event):
        return key.event_type
    return str(key)


class EventDispatcher:
    """In-process event dispatcher with explicit listener registration.

    Usage:
        dispatcher = EventDispatcher()

        @dispatcher.listen(NotificationPreSendEvent)
        def block_telegram(event):
            if event.channel == "telegram":
                event.cancel()

        dispatcher.dispatch(NotificationPreSendEvent(...))
    """

    def __init__(self, logger: Optional[BoundLogger] = None):
        self._listeners: Dict[str, List[Listener]] = {}
        self._lock = Lock()
        self._logger = logger if logger is not None else get_module_logger()

    def add_listener(self, event_type: EventKey, listener: Listener) -> Listener:
        """Register a listener for an event type.

        Args:
            event_type: Event type string, an Event subclass, or "*" for all events.
            listener: Callable receiving the event.

        Returns:
            The listener, unchanged.
        """
        key = _event_type_of(event_type)
        with self._lock:
            self._listeners.setdefault(key, []).append(listener)
            total = len(self._listeners[key])
        self._logger.debug(
            "registered_event_listener",
            listener=getattr(listener, "__name__", repr(listener)),
            event_type=key,
            total_listeners=total,
        )
        return listener

    def listen(self, event_type: EventKey) -> Callable[[Listener], Listener]:
        """Decorator form of add_listener."""

        def decorator(listener: Listener) -> Listener:
            return self.add_listener(event_type, listener)

        return decorator

    def remove_listener(self, event_type: EventKey, listener: Listener) -> bool:
        """Unregister a listener.

        Returns:
            True if the listener was registered, False otherwise.
        """
        key = _event_type_of(event_type)
        with self._lock:
            listeners = self._listeners.get(key, [])
            if listener not in listeners:
                return False
            listeners.remove(listener)
            if not listeners:
                del self._listeners[key]
        return True

    def dispatch(self, event: E) -> E:
        """Dispatch an event synchronously to its listeners.

        Specific listeners run first, then wildcard listeners, each group in
        registration order.

        Args:
            event: The event to dispatch.

        Returns:
            The same event, possibly mutated by listeners.
        """
        listeners = self.get_listeners(event.event_type)
        if event.event_type != WILDCARD:
            listeners += self.get_listeners(WILDCARD)

        self._logger.debug(
            "dispatching_event",
            event_type=event.event_type,
            listener_count=len(listeners),
            correlation_id=str(event.correlation_id),
        )

        for listener in listeners:
            try:
                listener(event)
            except Exception as e:
                self._logger.error(
                    "event_listener_failed",
                    listener=getattr(listener, "__name__", repr(listener)),
                    event_type=event.event_type,
                    error=str(e),
                    error_type=type(e).__name__,
                    correlation_id=str(event.correlation_id),
                )

        return event

    def get_listeners(self, event_type: EventKey) -> List[Listener]:
        """Get a snapshot of the listeners registered for an event type."""
        with self._lock:
            return list(self._listeners.get(_event_type_of(event_type), []))

    def get_registered_events(self) -> List[str]:
        """Get the event types that have at least one listener."""
        with self._lock:
            return list(self._listeners.keys())

    def clear(self) -> None:
        """Remove every registered listener."""
        with self._lock:
            self._listeners.clear()
        self._logger.debug("cleared_all_event_listeners")
