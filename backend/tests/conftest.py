"""
Shared test configuration and fixtures.

Fixtures for settings, adapters and a SQLite backed session for
repository tests.
"""

import os

os.environ.setdefault("FE_CHANGE_PWD_ENVIRONMENT", "testing")

import pytest

from fe_change_pwd.core.config import (
    DatabaseConfig,
    HashingConfig,
    LoggingSettings,
    PasswordComplexityConfig,
    PasswordExpirationConfig,
    RedirectConfig,
    Settings,
)
from fe_change_pwd.core.database import SessionManager, create_db_engine, create_tables
from fe_change_pwd.core.enums import Environment
from fe_change_pwd.core.logging import LogConfig, configure_logging
from fe_change_pwd.modules.frontend_user.infrastructure.adapters import (
    Argon2PasswordHasher,
    CatalogTranslator,
)

from .support import FixedClock


@pytest.fixture
def clock():
    """Clock frozen at NOW."""
    return FixedClock()


@pytest.fixture
def fast_hashing_config():
    """Argon2id parameters cheap enough for tests."""
    return HashingConfig(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def password_hasher(fast_hashing_config):
    return Argon2PasswordHasher(fast_hashing_config)


@pytest.fixture
def translator():
    return CatalogTranslator("en")


@pytest.fixture
def settings(fast_hashing_config):
    """Settings with every complexity check enabled."""
    return Settings(
        password_complexity=PasswordComplexityConfig(
            min_length=8,
            capital_char_check=True,
            lower_case_char_check=True,
            digit_check=True,
            special_char_check=True,
        ),
        password_expiration=PasswordExpirationConfig(enabled=True, validity_in_days=30),
        redirect=RedirectConfig(change_password_page_id=10, excluded_page_ids=[11, 12]),
        hashing=fast_hashing_config,
        database=DatabaseConfig(url="sqlite://"),
        logging=LoggingSettings(environment=Environment.TESTING),
    )


@pytest.fixture
def restore_logging():
    """Put the package loggers back on the testing configuration."""
    yield
    configure_logging(LogConfig(environment=Environment.TESTING))


@pytest.fixture
def engine():
    """In-memory SQLite engine with the fe_users table."""
    engine = create_db_engine(DatabaseConfig(url="sqlite://"))
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    with SessionManager(engine).session() as session:
        yield session
