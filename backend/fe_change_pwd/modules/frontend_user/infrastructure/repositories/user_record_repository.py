"""
User Record Repository Implementation

SQLModel-based implementation of the user record repository interface.
"""

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from fe_change_pwd.core.errors import PersistenceError
from fe_change_pwd.core.logging import get_logger
from fe_change_pwd.modules.frontend_user.domain.entities.user_record import UserRecord
from fe_change_pwd.modules.frontend_user.domain.interfaces.repositories.user_record_repository import (
    IUserRecordRepository,
)
from fe_change_pwd.modules.frontend_user.domain.value_objects.password_update import (
    PasswordUpdate,
)
from fe_change_pwd.modules.frontend_user.infrastructure.models.user_record_model import (
    FrontendUserModel,
)

logger = get_logger(__name__)


class SQLUserRecordRepository(IUserRecordRepository):
    """SQLModel implementation of the user record repository."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, uid: int) -> UserRecord | None:
        """Find user record by uid."""
        stmt = select(FrontendUserModel).where(FrontendUserModel.uid == uid)
        model = self.session.exec(stmt).first()
        return model.to_domain() if model else None

    def apply_password_update(self, uid: int, password_update: PasswordUpdate) -> int:
        """
        Update password columns of one record.

        The statement is flushed, not committed. Committing is left to whoever
        owns the session, e.g. SessionManager.session().

        Returns:
            Number of affected records

        Raises:
            PersistenceError: If the database rejects the update
        """
        stmt = (
            update(FrontendUserModel)
            .where(FrontendUserModel.uid == uid)
            .values(
                password=password_update.password,
                must_change_password=password_update.must_change_password,
                password_expiry_date=password_update.password_expiry_date,
                tstamp=password_update.updated_at,
            )
        )

        try:
            result = self.session.execute(stmt)
            self.session.flush()
        except SQLAlchemyError as e:
            logger.exception("Password update failed", user_id=uid)
            raise PersistenceError(
                f"Password update for user {uid} failed",
                record_id=uid,
                cause=e,
            ) from e

        return result.rowcount
