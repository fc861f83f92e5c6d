"""Tests for PasswordChangeRedirectGuard."""

import pytest

from fe_change_pwd.core.config import RedirectConfig
from fe_change_pwd.modules.frontend_user.application.services import (
    PasswordChangeRedirectGuard,
)
from fe_change_pwd.modules.frontend_user.domain.services import PasswordPolicyEvaluator

from tests.support import NOW, UserRecordFactory


@pytest.fixture
def guard(clock):
    return PasswordChangeRedirectGuard(
        PasswordPolicyEvaluator(clock),
        RedirectConfig(change_password_page_id=10, excluded_page_ids=[11, 12]),
    )


class TestRedirectTarget:
    """Test redirect decisions."""

    def test_forced_user_is_redirected(self, guard):
        user = UserRecordFactory(must_change_password=True)

        assert guard.redirect_target(user, current_page_id=1) == 10

    def test_expired_user_is_redirected(self, guard):
        user = UserRecordFactory(password_expiry_date=NOW - 1)

        assert guard.redirect_target(user, current_page_id=1) == 10

    def test_regular_user_is_not_redirected(self, guard):
        assert guard.redirect_target(UserRecordFactory(), current_page_id=1) is None

    def test_anonymous_request_is_not_redirected(self, guard):
        assert guard.redirect_target(None, current_page_id=1) is None

    @pytest.mark.parametrize("page_id", [10, 11, 12])
    def test_target_and_excluded_pages_are_not_redirected(self, guard, page_id):
        user = UserRecordFactory(must_change_password=True)

        assert guard.redirect_target(user, current_page_id=page_id) is None

    def test_no_target_configured(self, clock):
        guard = PasswordChangeRedirectGuard(PasswordPolicyEvaluator(clock), RedirectConfig())
        user = UserRecordFactory(must_change_password=True)

        assert guard.redirect_target(user, current_page_id=1) is None
