"""Pytest configuration and shared fixtures."""

import dataclasses
import io
import itertools
import logging
from datetime import date, datetime, timezone
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from accounts.domain import Principal, Role, User, UserId
from accounts.services.token_service import TokenService
from accounts.stores.interfaces import UserStore
from events.domain import Event, EventId
from events.stores.interfaces import EventStore
from photos.domain import IncomingPhoto, Photo, PhotoDraft, PhotoId
from photos.stores.interfaces import FileStore, PhotoStore

TEST_JWT_SECRET = "test-jwt-secret-0123456789abcdef0123456789"


# In-memory stores for service tests


class InMemoryUserStore(UserStore):
    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}

    def get_user(self, user_id):
        return self.users.get(user_id)

    def get_user_by_email(self, email):
        return next((u for u in self.users.values() if u.email == email), None)

    def create_user(self, email, name, role, password_hash):
        user = User(
            id=UserId(value=uuid4()),
            email=email,
            name=name,
            role=role,
            password_hash=password_hash,
            registration_date=datetime.now(timezone.utc),
        )
        self.users[user.id] = user
        return user


class InMemoryEventStore(EventStore):
    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}

    def list_events(self):
        return sorted(self.events.values(), key=lambda e: e.created_at, reverse=True)

    def get_event(self, event_id):
        return self.events.get(event_id)

    def event_exists(self, event_id):
        return event_id in self.events

    def create_event(self, name, event_date):
        event = Event(
            id=EventId(value=uuid4()),
            name=name,
            date=event_date,
            created_at=datetime.now(timezone.utc),
        )
        self.events[event.id] = event
        return event

    def update_event(self, event_id, changes):
        event = self.events.get(event_id)
        if event is None:
            return None
        event = dataclasses.replace(event, **changes)
        self.events[event_id] = event
        return event

    def delete_event(self, event_id):
        return self.events.pop(event_id, None) is not None

    def add_photographer(self, event_id, user_id):
        event = self.events[event_id]
        if user_id not in event.photographer_ids:
            self.events[event_id] = dataclasses.replace(
                event, photographer_ids=event.photographer_ids + (user_id,)
            )


class InMemoryPhotoStore(PhotoStore):
    def __init__(self) -> None:
        self.photos: dict[PhotoId, Photo] = {}

    def list_for_event(self, event_id):
        return [p for p in self.photos.values() if p.event_id == event_id]

    def list_for_uploader(self, event_id, user_id):
        return [
            p for p in self.photos.values() if p.event_id == event_id and p.user_id == user_id
        ]

    def original_names_for(self, event_id, user_id):
        return {p.original_name for p in self.list_for_uploader(event_id, user_id)}

    def insert_many(self, drafts):
        saved = []
        for draft in drafts:
            photo = Photo(
                id=PhotoId(value=uuid4()),
                event_id=draft.event_id,
                user_id=draft.user_id,
                url=draft.url,
                original_name=draft.original_name,
                uploaded_at=datetime.now(timezone.utc),
            )
            self.photos[photo.id] = photo
            saved.append(photo)
        return saved

    def get_many(self, photo_ids, event_id=None):
        return [
            self.photos[pid]
            for pid in photo_ids
            if pid in self.photos and (event_id is None or self.photos[pid].event_id == event_id)
        ]

    def delete_many(self, photo_ids):
        return sum(1 for pid in set(photo_ids) if self.photos.pop(pid, None) is not None)


class InMemoryFileStore(FileStore):
    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.broken: set[str] = set()
        self._counter = itertools.count(1)

    def save(self, stream, extension):
        locator = f"uploads/{next(self._counter)}{extension}"
        self.files[locator] = stream.read()
        return locator

    def delete(self, locator):
        if locator in self.broken:
            raise OSError(f"cannot remove {locator}")
        return self.files.pop(locator, None) is not None


# Factories


def incoming(name: str, content_type: str = "image/jpeg", data: bytes = b"jpeg-bytes") -> IncomingPhoto:
    return IncomingPhoto(
        original_name=name, content_type=content_type, size=len(data), stream=io.BytesIO(data)
    )


def principal(role: Role) -> Principal:
    return Principal(user_id=UserId(value=uuid4()), role=role)


def seed_photo(store: InMemoryPhotoStore, files: InMemoryFileStore, event_id: EventId, owner: Principal, name: str) -> Photo:
    locator = files.save(io.BytesIO(b"data"), ".jpg")
    (photo,) = store.insert_many(
        [PhotoDraft(event_id=event_id, user_id=owner.user_id, url=locator, original_name=name)]
    )
    return photo


# Service-level fixtures


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def photo_store() -> InMemoryPhotoStore:
    return InMemoryPhotoStore()


@pytest.fixture
def file_store() -> InMemoryFileStore:
    return InMemoryFileStore()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=TEST_JWT_SECRET, expiry_seconds=3600)


@pytest.fixture
def event(event_store: InMemoryEventStore) -> Event:
    return event_store.create_event("Wedding A", date(2024, 6, 1))


# HTTP-level fixtures


@pytest.fixture(autouse=True)
def fast_settings(settings, tmp_path):
    settings.PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]
    settings.JWT_SECRET = TEST_JWT_SECRET
    settings.MEDIA_ROOT = tmp_path / "media"
    return settings


@pytest.fixture
def app_logs(caplog, monkeypatch):
    """caplog for the project loggers, which do not propagate to root in settings."""
    for name in ("accounts", "events", "photos", "photoevents_api"):
        monkeypatch.setattr(logging.getLogger(name), "propagate", True)
    caplog.set_level(logging.INFO)
    return caplog


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def make_user(db):
    """Create a persisted user and return (domain user, bearer token)."""
    from django.contrib.auth.hashers import make_password

    from accounts.stores.django_store import DjangoUserStore

    tokens = TokenService(secret=TEST_JWT_SECRET)
    store = DjangoUserStore()

    def _make(role: Role, email: str | None = None, password: str = "secret"):
        user = store.create_user(
            email=email or f"{role.value}-{uuid4().hex[:6]}@example.com",
            name=role.value.title(),
            role=role,
            password_hash=make_password(password) if role is not Role.CLIENT else None,
        )
        return user, tokens.issue(user)

    return _make


def authed(token: str) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return client


@pytest.fixture
def admin_client(make_user) -> APIClient:
    _, token = make_user(Role.ADMIN)
    return authed(token)


@pytest.fixture
def photographer(make_user):
    """Return (user, authed client) for a photographer."""
    user, token = make_user(Role.PHOTOGRAPHER)
    return user, authed(token)
