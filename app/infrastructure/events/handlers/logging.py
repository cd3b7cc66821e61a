"""Logging listener for the event system.

Writes dispatched events to structured logs.
"""

from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.events.models import Event

logger = structlog.get_logger()


class LoggingHandler:
    """Handles structured logging for events."""

    def __init__(self, log: Optional[BoundLogger] = None):
        """Initialize logging handler with base logger."""
        self.log = (log or logger).bind(component="logging_handler")

    def __call__(self, event: Event) -> None:
        self.handle(event)

    def handle(self, event: Event) -> None:
        """Handle event by logging its serialized form.

        Args:
            event: The event to log.
        """
        payload = event.to_dict()
        log = self.log.bind(
            event_type=payload.pop("event_type"),
            correlation_id=payload.pop("correlation_id"),
        )
        try:
            log.info("event_occurred", **payload)
        except Exception as e:
            log.error("failed_to_log_event", error=str(e))
