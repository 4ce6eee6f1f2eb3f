from accounts.domain.models import Principal, User
from accounts.domain.value_objects import Role, UserId

__all__ = [
    "Principal",
    "User",
    "Role",
    "UserId",
]
