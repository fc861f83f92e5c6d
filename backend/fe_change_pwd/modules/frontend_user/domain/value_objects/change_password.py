"""
Change Password Value Object

The new password and its confirmation as submitted by the user.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChangePasswordRequest:
    """Candidate password pair; discarded after validation and update."""

    password1: str = field(default="", repr=False)
    password2: str = field(default="", repr=False)

    @property
    def is_complete(self) -> bool:
        """Both fields are filled out."""
        return self.password1 != "" and self.password2 != ""

    @property
    def passwords_match(self) -> bool:
        return self.password1 == self.password2
