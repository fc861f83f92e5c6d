"""Frontend user application DTOs."""

from .request import ChangePasswordForm
from .response import ChangePasswordResponse, PasswordChangeStatusResponse

__all__ = [
    "ChangePasswordForm",
    "ChangePasswordResponse",
    "PasswordChangeStatusResponse",
]
