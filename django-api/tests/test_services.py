"""Unit tests for EventService, AccountService and PhotoService.

These test error handling and domain error mapping.
Run with: pytest tests/test_services.py -v
"""

from datetime import date
from uuid import uuid4

import pytest
from django.contrib.auth.hashers import make_password

from accounts.domain import Role
from accounts.domain.errors import (
    AccessDeniedError,
    InvalidCredentialsError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from accounts.services.account_service import AccountService
from conftest import principal, seed_photo
from events.domain.errors import EventNotFoundError, InvalidEventIdError, InvalidEventNameError
from events.services.event_service import EventService
from photos.domain.errors import InvalidUserIdError
from photos.services.photo_service import PhotoService


class TestEventService:
    """Tests for EventService."""

    def test_get_event_invalid_id_raises_error(self, event_store):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            EventService(event_store).get_event("E1")

    def test_get_event_not_found_raises_error(self, event_store):
        """get_event raises EventNotFoundError when store returns None."""
        with pytest.raises(EventNotFoundError):
            EventService(event_store).get_event(str(uuid4()))

    def test_create_event_starts_without_photographers(self, event_store):
        event = EventService(event_store).create_event("Wedding A", date(2024, 6, 1))
        assert event.name == "Wedding A"
        assert event.date == date(2024, 6, 1)
        assert event.photographer_ids == ()

    def test_create_event_rejects_blank_name(self, event_store):
        with pytest.raises(InvalidEventNameError):
            EventService(event_store).create_event("  ")

    def test_update_changes_only_given_fields(self, event_store, event):
        """update_event leaves the date alone when only a name is given."""
        updated = EventService(event_store).update_event(str(event.id), {"name": "Wedding B"})
        assert updated.name == "Wedding B"
        assert updated.date == event.date

    def test_update_missing_event_raises_error(self, event_store):
        with pytest.raises(EventNotFoundError):
            EventService(event_store).update_event(str(uuid4()), {"name": "X"})

    def test_delete_event(self, event_store, event):
        service = EventService(event_store)
        service.delete_event(str(event.id))
        with pytest.raises(EventNotFoundError):
            service.get_event(str(event.id))

    def test_delete_missing_event_raises_error(self, event_store):
        with pytest.raises(EventNotFoundError):
            EventService(event_store).delete_event(str(uuid4()))

    def test_delete_event_keeps_its_photos(self, event_store, event, photo_store, file_store):
        """Deleting an event does not cascade to photo records."""
        owner = principal(Role.PHOTOGRAPHER)
        seed_photo(photo_store, file_store, event.id, owner, "a.jpg")
        EventService(event_store).delete_event(str(event.id))
        assert len(photo_store.list_for_event(event.id)) == 1


@pytest.fixture
def account_service(user_store, token_service) -> AccountService:
    return AccountService(user_store, token_service)


class TestAccountService:
    """Tests for AccountService."""

    def test_register_creates_photographer(self, account_service):
        user = account_service.register("p1@example.com", "secret", "P1")
        assert user.role is Role.PHOTOGRAPHER
        assert user.password_hash and user.password_hash != "secret"

    def test_register_duplicate_email_raises_error(self, account_service):
        account_service.register("p1@example.com", "secret")
        with pytest.raises(UserAlreadyExistsError):
            account_service.register("p1@example.com", "other")

    def test_login_returns_token_carrying_identity(self, account_service, token_service):
        user = account_service.register("p1@example.com", "secret")
        token = account_service.login("p1@example.com", "secret")
        resolved = token_service.verify(token)
        assert resolved.user_id == user.id
        assert resolved.role is Role.PHOTOGRAPHER

    def test_login_wrong_password_raises_error(self, account_service):
        account_service.register("p1@example.com", "secret")
        with pytest.raises(InvalidCredentialsError):
            account_service.login("p1@example.com", "wrong")

    def test_login_unknown_email_raises_error(self, account_service):
        with pytest.raises(InvalidCredentialsError):
            account_service.login("nobody@example.com", "secret")

    def test_login_client_is_denied(self, account_service, user_store):
        user_store.create_user("c@example.com", None, Role.CLIENT, make_password("secret"))
        with pytest.raises(AccessDeniedError):
            account_service.login("c@example.com", "secret")

    def test_create_admin(self, account_service):
        assert account_service.create_admin("a@example.com", "secret").role is Role.ADMIN

    def test_profile_of_deleted_user_raises_error(self, account_service):
        with pytest.raises(UserNotFoundError):
            account_service.get_profile(principal(Role.PHOTOGRAPHER))


class TestPhotoService:
    """Tests for photo listing."""

    def test_lists_by_event_and_by_photographer(self, photo_store, file_store, event):
        p1, p2 = principal(Role.PHOTOGRAPHER), principal(Role.PHOTOGRAPHER)
        seed_photo(photo_store, file_store, event.id, p1, "a.jpg")
        seed_photo(photo_store, file_store, event.id, p2, "b.jpg")
        service = PhotoService(photo_store)

        assert len(service.list_for_event(str(event.id))) == 2
        mine = service.list_for_photographer(str(event.id), str(p1.user_id))
        assert [p.original_name for p in mine] == ["a.jpg"]

    def test_invalid_ids_raise_errors(self, photo_store):
        service = PhotoService(photo_store)
        with pytest.raises(InvalidEventIdError):
            service.list_for_event("nope")
        with pytest.raises(InvalidUserIdError):
            service.list_for_photographer(str(uuid4()), "nope")
