"""Infrastructure event system - synchronous in-process dispatcher.

Usage:

    from infrastructure.events import Event, EventDispatcher

    dispatcher = EventDispatcher()

    @dispatcher.listen("notification.sent")
    def on_sent(event: Event) -> None:
        ...

    dispatcher.dispatch(event)
"""

from infrastructure.events.dispatcher import WILDCARD, EventDispatcher
from infrastructure.events.handlers import LoggingHandler
from infrastructure.events.models import Event

__all__ = [
    "Event",
    "EventDispatcher",
    "LoggingHandler",
    "WILDCARD",
]
