"""
Request DTOs for the frontend user module.

Form data submitted by the host's change password form.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fe_change_pwd.modules.frontend_user.domain.value_objects.change_password import (
    ChangePasswordRequest,
)


class ChangePasswordForm(BaseModel):
    """Submitted new password and its confirmation."""

    model_config = ConfigDict(str_strip_whitespace=False, extra="ignore")

    password1: str = Field("", repr=False, description="New password")
    password2: str = Field("", repr=False, description="New password repeated")

    @field_validator("password1", "password2", mode="before")
    @classmethod
    def empty_when_missing(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_domain(self) -> ChangePasswordRequest:
        return ChangePasswordRequest(password1=self.password1, password2=self.password2)
