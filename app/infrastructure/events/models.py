"""Event models for infrastructure event system.

Provides the generic Event base class every dispatched event derives from.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, ClassVar, Dict
from uuid import UUID, uuid4


@dataclass(kw_only=True, eq=False)
class Event:
    """Base class for all events in the system.

    Subclasses set ``event_type`` as a class attribute; listeners are
    registered against that string. Subclasses are declared with
    ``eq=False`` so they keep identity equality and the envelope hash below.
    """

    event_type: ClassVar[str] = "event"

    timestamp: datetime = field(default_factory=datetime.now)
    """When the event was created."""

    correlation_id: UUID = field(default_factory=uuid4)
    """Unique ID to track related log entries."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the event envelope to a dictionary.

        Returns:
            Dictionary with the event type, ISO format timestamp and the
            correlation ID as a string.
        """
        return {
            "event_type": self.event_type,
            "timestamp": self.timestamp.isoformat(),
            "correlation_id": str(self.correlation_id),
        }

    def __hash__(self) -> int:
        """Hash based on correlation_id and timestamp."""
        return hash((self.correlation_id, self.timestamp))
