"""
Password Change Redirect Guard

Keeps users who must change their password on the change password page.
"""

from fe_change_pwd.core.config import RedirectConfig
from fe_change_pwd.core.logging import get_logger
from fe_change_pwd.modules.frontend_user.domain.entities.user_record import UserRecord
from fe_change_pwd.modules.frontend_user.domain.services.password_policy_evaluator import (
    PasswordPolicyEvaluator,
)

logger = get_logger(__name__)


class PasswordChangeRedirectGuard:
    """Decides whether a page request has to be redirected."""

    def __init__(self, evaluator: PasswordPolicyEvaluator, config: RedirectConfig) -> None:
        self._evaluator = evaluator
        self._config = config

    def redirect_target(self, user: UserRecord | None, current_page_id: int) -> int | None:
        """
        Page id to redirect to, or None if the request may proceed.

        Anonymous requests, requests for the change password page itself and
        requests for excluded pages are never redirected.
        """
        target = self._config.change_password_page_id
        if user is None or not target:
            return None
        if current_page_id == target or current_page_id in self._config.excluded_page_ids:
            return None
        if not self._evaluator.must_change_password(user):
            return None

        logger.debug(
            "Redirecting to change password page",
            user_id=user.uid,
            page_id=current_page_id,
            target_page_id=target,
        )
        return target
