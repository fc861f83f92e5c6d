"""Frontend user application services."""

from .change_password_service import ChangePasswordService
from .redirect_guard import PasswordChangeRedirectGuard

__all__ = ["ChangePasswordService", "PasswordChangeRedirectGuard"]
