from accounts.handlers.views import CurrentUserView, LoginView, RegisterView

__all__ = ["CurrentUserView", "LoginView", "RegisterView"]
