"""DRF authentication backed by TokenService.

An absent header yields an anonymous request so public endpoints stay
reachable; protected endpoints then reject it through their permissions.
"""

from django.conf import settings
from rest_framework import exceptions
from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.permissions import SAFE_METHODS

from accounts.domain.errors import TokenError
from accounts.services.token_service import BEARER_SCHEME, TokenService


def get_token_service() -> TokenService:
    return TokenService(
        secret=settings.JWT_SECRET,
        expiry_seconds=settings.JWT_EXPIRY_SECONDS,
        algorithm=settings.JWT_ALGORITHM,
    )


class BearerTokenAuthentication(BaseAuthentication):
    """Resolves ``Authorization: Bearer <token>`` to a Principal."""

    def authenticate(self, request):
        header = get_authorization_header(request).decode("latin-1")
        if not header:
            return None
        try:
            principal = get_token_service().resolve_header(header)
        except TokenError as exc:
            raise exceptions.AuthenticationFailed(detail=exc.message, code=exc.code.value)
        return principal, None

    def authenticate_header(self, request) -> str:
        return BEARER_SCHEME


class PublicReadMixin:
    """Serves safe methods without looking at the Authorization header.

    Public reads stay reachable for a client holding an expired or broken
    token; unsafe methods authenticate as usual.
    """

    def get_authenticators(self):
        if self.request.method in SAFE_METHODS:
            return []
        return super().get_authenticators()
