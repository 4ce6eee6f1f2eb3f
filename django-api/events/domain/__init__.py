from events.domain.models import Event
from events.domain.value_objects import EventId, EventName

__all__ = [
    "Event",
    "EventId",
    "EventName",
]
