"""Role checks applied after authentication."""

from rest_framework.permissions import BasePermission

from accounts.domain import Principal, Role


def _principal(request) -> Principal | None:
    user = request.user
    return user if isinstance(user, Principal) else None


class IsAuthenticatedPrincipal(BasePermission):
    """Any caller with a valid token."""

    def has_permission(self, request, view) -> bool:
        return _principal(request) is not None


class IsAdmin(BasePermission):
    """Admins only."""

    message = "Access denied"
    code = "ACCESS_DENIED"

    def has_permission(self, request, view) -> bool:
        principal = _principal(request)
        return principal is not None and principal.is_admin


class IsPhotographerOrAdmin(BasePermission):
    """Photographers and admins."""

    message = "Access denied"
    code = "ACCESS_DENIED"

    def has_permission(self, request, view) -> bool:
        principal = _principal(request)
        return principal is not None and principal.role in (Role.PHOTOGRAPHER, Role.ADMIN)
