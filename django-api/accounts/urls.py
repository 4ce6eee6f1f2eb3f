from django.urls import path

from accounts.handlers import CurrentUserView, LoginView, RegisterView

urlpatterns = [
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("user/me", CurrentUserView.as_view(), name="user-me"),
]
