"""
Frontend User Model

SQLModel definition of the host's frontend user table, limited to the
columns password change reads and writes.
"""

from sqlmodel import Field, SQLModel

from fe_change_pwd.modules.frontend_user.domain.entities.user_record import UserRecord


class FrontendUserModel(SQLModel, table=True):
    """Frontend user persistence model."""

    __tablename__ = "fe_users"

    uid: int = Field(primary_key=True)
    username: str = Field(default="", index=True)
    password: str = Field(default="")
    must_change_password: bool = Field(default=False)
    password_expiry_date: int = Field(default=0)
    tstamp: int = Field(default=0)

    @classmethod
    def from_domain(cls, user: UserRecord, username: str = "") -> "FrontendUserModel":
        return cls(
            uid=user.uid,
            username=username,
            password=user.password,
            must_change_password=user.must_change_password,
            password_expiry_date=user.password_expiry_date,
            tstamp=user.updated_at,
        )

    def to_domain(self) -> UserRecord:
        return UserRecord(
            uid=self.uid,
            must_change_password=bool(self.must_change_password),
            password_expiry_date=self.password_expiry_date or 0,
            password=self.password or "",
            updated_at=self.tstamp or 0,
        )
