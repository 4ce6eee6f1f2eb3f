"""Django ORM implementation of the EventStore."""

from datetime import date

from accounts.domain import UserId
from events import models
from events.domain import Event, EventId
from events.stores.interfaces import EventStore

_COLUMNS = {"name": "event_name", "date": "event_date"}


def _to_domain(row: models.Event) -> Event:
    return Event(
        id=EventId(value=row.id),
        name=row.event_name,
        date=row.event_date,
        created_at=row.created_at,
        photographer_ids=tuple(
            UserId(value=user.pk) for user in row.photographers.all()
        ),
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        rows = models.Event.objects.prefetch_related("photographers")
        return [_to_domain(row) for row in rows]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_domain(row) if row else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def create_event(self, name: str, event_date: date | None) -> Event:
        row = models.Event.objects.create(event_name=name, event_date=event_date)
        return _to_domain(row)

    def update_event(
        self, event_id: EventId, changes: dict[str, object]
    ) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        if row is None:
            return None
        for field, value in changes.items():
            setattr(row, _COLUMNS[field], value)
        row.save()
        return _to_domain(row)

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0

    def add_photographer(self, event_id: EventId, user_id: UserId) -> None:
        row = models.Event.objects.get(pk=event_id.value)
        row.photographers.add(user_id.value)
