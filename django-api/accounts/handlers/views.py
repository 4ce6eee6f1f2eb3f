"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
"""

from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from accounts.authentication import get_token_service
from accounts.handlers.serializers import LoginSerializer, RegisterSerializer, UserSerializer
from accounts.permissions import IsAuthenticatedPrincipal
from accounts.services.account_service import AccountService
from accounts.stores.django_store import DjangoUserStore


def get_account_service() -> AccountService:
    return AccountService(DjangoUserStore(), get_token_service())


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        get_account_service().register(**serializer.validated_data)
        return Response({"msg": "User registered successfully"}, status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    authentication_classes = []
    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        token = get_account_service().login(**serializer.validated_data)
        return Response({"token": token})


class CurrentUserView(APIView):
    """Handler for GET /api/user/me"""

    permission_classes = [IsAuthenticatedPrincipal]

    def get(self, request: Request) -> Response:
        user = get_account_service().get_profile(request.user)
        return Response(UserSerializer(user).data)
