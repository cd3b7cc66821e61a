"""Infrastructure event listeners."""

from infrastructure.events.handlers.logging import LoggingHandler

__all__ = ["LoggingHandler"]
