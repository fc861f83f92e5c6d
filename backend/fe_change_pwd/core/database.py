"""Database engine and session handling for the user record store.

The host owns the database; this module only builds a synchronous SQLModel
engine from DatabaseConfig and hands out request-scoped sessions for hosts
that do not inject their own.
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from fe_change_pwd.core.config import DatabaseConfig
from fe_change_pwd.core.errors import InfrastructureError
from fe_change_pwd.core.logging import get_logger

logger = get_logger(__name__)


def create_db_engine(config: DatabaseConfig) -> Engine:
    """
    Create an engine for the configured URL.

    In-memory SQLite URLs share one connection so that tables created on the
    engine stay visible to every session.
    """
    kwargs = {"echo": config.echo}
    if config.url == "sqlite://" or (
        config.url.startswith("sqlite") and ":memory:" in config.url
    ):
        kwargs.update(
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    engine = create_engine(config.url, **kwargs)
    logger.debug("Database engine created", dialect=engine.dialect.name)
    return engine


def create_tables(engine: Engine) -> None:
    """Create plugin tables; used by tests and standalone setups."""
    # Registers FrontendUserModel on SQLModel.metadata
    from fe_change_pwd.modules.frontend_user.infrastructure.models import (  # noqa: F401
        user_record_model,
    )

    SQLModel.metadata.create_all(engine)


class SessionManager:
    """Creates request-scoped sessions bound to one engine."""

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        """
        Provide a session that commits on clean exit, rolls back on failure
        and is always closed.

        Raises:
            InfrastructureError: If the database raises while the session is open
        """
        session = Session(self.engine)
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Database session failed")
            raise InfrastructureError("Database session failed", cause=e) from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()
