"""
Change Password Service

Application service behind the host's change password plugin: tells the
host whether the form has to be shown and processes form submissions.
"""

from fe_change_pwd.core.logging import get_logger
from fe_change_pwd.modules.frontend_user.application.dtos.request import ChangePasswordForm
from fe_change_pwd.modules.frontend_user.application.dtos.response import (
    ChangePasswordResponse,
    PasswordChangeStatusResponse,
)
from fe_change_pwd.modules.frontend_user.domain.constants import MessageKeys
from fe_change_pwd.modules.frontend_user.domain.entities.user_record import UserRecord
from fe_change_pwd.modules.frontend_user.domain.enums import PasswordChangeReason
from fe_change_pwd.modules.frontend_user.domain.interfaces.services.translator import (
    ITranslator,
)
from fe_change_pwd.modules.frontend_user.domain.rules.password_complexity import (
    PasswordComplexityValidator,
)
from fe_change_pwd.modules.frontend_user.domain.services.password_policy_evaluator import (
    PasswordPolicyEvaluator,
)
from fe_change_pwd.modules.frontend_user.domain.services.password_updater import (
    PasswordUpdater,
)
from fe_change_pwd.modules.frontend_user.domain.value_objects.complexity_policy import (
    PasswordComplexityPolicy,
)

logger = get_logger(__name__)


class ChangePasswordService:
    """Service for the frontend user password change flow."""

    def __init__(
        self,
        evaluator: PasswordPolicyEvaluator,
        validator: PasswordComplexityValidator,
        updater: PasswordUpdater,
        translator: ITranslator,
        complexity_policy: PasswordComplexityPolicy,
    ) -> None:
        self._evaluator = evaluator
        self._validator = validator
        self._updater = updater
        self._translator = translator
        self._complexity_policy = complexity_policy

    def requires_password_change(self, user: UserRecord) -> bool:
        return self._evaluator.must_change_password(user)

    def password_change_reason(self, user: UserRecord) -> PasswordChangeReason | None:
        return self._evaluator.password_change_reason(user)

    def password_change_status(self, user: UserRecord) -> PasswordChangeStatusResponse:
        """Status shown above the change password form."""
        reason = self.password_change_reason(user)
        if reason is None:
            return PasswordChangeStatusResponse(required=False)

        return PasswordChangeStatusResponse(
            required=True,
            reason=reason,
            message=self._translator.translate(reason.message_key),
        )

    def change_password(
        self, user: UserRecord, form: ChangePasswordForm
    ) -> ChangePasswordResponse:
        """
        Validate the submitted passwords and store the new one.

        Validation failures are returned, not raised.

        Raises:
            PersistenceError: If the new password could not be stored
        """
        result = self._validator.validate(form.to_domain(), self._complexity_policy)

        if not result.is_valid:
            logger.info(
                "Password change rejected",
                user_id=user.uid,
                error_keys=result.keys,
            )
            return ChangePasswordResponse(
                success=False,
                messages=result.render(self._translator),
                validation_result=result,
            )

        self._updater.update_password(user, form.password1)

        return ChangePasswordResponse(
            success=True,
            messages=[self._translator.translate(MessageKeys.PASSWORD_UPDATED)],
            validation_result=result,
        )
