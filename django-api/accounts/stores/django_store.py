"""Django ORM implementation of the UserStore."""

from accounts import models
from accounts.domain import Role, User, UserId
from accounts.stores.interfaces import UserStore


def _to_domain(row: models.User) -> User:
    return User(
        id=UserId(value=row.id),
        email=row.email,
        name=row.name,
        role=Role(row.role),
        password_hash=row.password,
        registration_date=row.registration_date,
        event_ids=tuple(row.events.values_list("id", flat=True)),
    )


class DjangoUserStore(UserStore):
    """Relational user store using Django ORM."""

    def get_user(self, user_id: UserId) -> User | None:
        row = models.User.objects.filter(pk=user_id.value).first()
        return _to_domain(row) if row else None

    def get_user_by_email(self, email: str) -> User | None:
        row = models.User.objects.filter(email=email).first()
        return _to_domain(row) if row else None

    def create_user(
        self, email: str, name: str | None, role: Role, password_hash: str | None
    ) -> User:
        row = models.User.objects.create(
            email=email,
            name=name,
            role=role.value,
            password=password_hash,
        )
        return _to_domain(row)
