"""
Frontend user module bootstrap configuration.

Dependency injection setup for the password change services. The host
supplies the settings and a database session; everything else is built
here.
"""

from dependency_injector import containers, providers
from sqlmodel import Session

from fe_change_pwd.core.config import Settings, get_settings
from fe_change_pwd.core.logging import configure_logging, get_logger
from fe_change_pwd.modules.frontend_user.application.services import (
    ChangePasswordService,
    PasswordChangeRedirectGuard,
)
from fe_change_pwd.modules.frontend_user.domain.interfaces.services.clock import IClock
from fe_change_pwd.modules.frontend_user.domain.interfaces.services.translator import (
    ITranslator,
)
from fe_change_pwd.modules.frontend_user.domain.rules import (
    DaysPasswordExpiryPolicy,
    PasswordComplexityValidator,
)
from fe_change_pwd.modules.frontend_user.domain.services import (
    PasswordPolicyEvaluator,
    PasswordUpdater,
)
from fe_change_pwd.modules.frontend_user.domain.value_objects import (
    PasswordComplexityPolicy,
)
from fe_change_pwd.modules.frontend_user.infrastructure.adapters import (
    CatalogTranslator,
    SystemClock,
    create_password_hasher,
)
from fe_change_pwd.modules.frontend_user.infrastructure.repositories import (
    SQLUserRecordRepository,
)

logger = get_logger(__name__)


class FrontendUserContainer(containers.DeclarativeContainer):
    """Frontend user module dependency injection container."""

    # Provided by the host
    settings = providers.Dependency(instance_of=Settings)
    session = providers.Dependency(instance_of=Session)

    # Infrastructure
    clock = providers.Singleton(SystemClock)

    password_hasher = providers.Singleton(
        create_password_hasher,
        config=settings.provided.hashing,
    )

    translator = providers.Singleton(
        CatalogTranslator,
        language=settings.provided.language,
    )

    user_record_repository = providers.Factory(
        SQLUserRecordRepository,
        session=session,
    )

    # Domain
    complexity_policy = providers.Singleton(
        PasswordComplexityPolicy.from_config,
        settings.provided.password_complexity,
    )

    expiry_policy = providers.Singleton(
        DaysPasswordExpiryPolicy.from_config,
        settings.provided.password_expiration,
    )

    policy_evaluator = providers.Factory(
        PasswordPolicyEvaluator,
        clock=clock,
    )

    complexity_validator = providers.Singleton(PasswordComplexityValidator)

    password_updater = providers.Factory(
        PasswordUpdater,
        repository=user_record_repository,
        password_hasher=password_hasher,
        expiry_policy=expiry_policy,
        clock=clock,
    )

    # Application
    change_password_service = providers.Factory(
        ChangePasswordService,
        evaluator=policy_evaluator,
        validator=complexity_validator,
        updater=password_updater,
        translator=translator,
        complexity_policy=complexity_policy,
    )

    redirect_guard = providers.Factory(
        PasswordChangeRedirectGuard,
        evaluator=policy_evaluator,
        config=settings.provided.redirect,
    )


class FrontendUserBootstrap:
    """Bootstrap class for the frontend user module."""

    def __init__(
        self,
        settings: Settings | None = None,
        clock: IClock | None = None,
        translator: ITranslator | None = None,
    ):
        """
        Initialize frontend user bootstrap.

        Args:
            settings: Plugin settings, read from the environment when omitted
            clock: Replacement clock, e.g. for tests
            translator: Host translation service replacing the built-in catalogs
        """
        self.settings = settings or get_settings()
        self.clock = clock
        self.translator = translator

    def bootstrap(self, session: Session | None = None) -> FrontendUserContainer:
        """
        Bootstrap the frontend user module.

        The password hasher is built eagerly so that an unsupported hashing
        configuration fails at startup instead of on the first submission.

        Raises:
            ConfigurationError: If the hashing configuration is not usable
        """
        configure_logging(self.settings.logging.to_log_config())
        logger.info("Bootstrapping frontend user module")

        container = FrontendUserContainer()
        container.settings.override(self.settings)
        if session is not None:
            container.session.override(session)
        if self.clock is not None:
            container.clock.override(providers.Object(self.clock))
        if self.translator is not None:
            container.translator.override(providers.Object(self.translator))

        container.password_hasher()

        logger.info(
            "Frontend user module bootstrapped",
            expiration_enabled=self.settings.password_expiration.enabled,
            redirect_enabled=self.settings.redirect.is_enabled,
        )
        return container
