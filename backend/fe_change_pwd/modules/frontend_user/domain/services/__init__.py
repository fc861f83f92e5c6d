"""Frontend user domain services."""

from .password_policy_evaluator import PasswordPolicyEvaluator
from .password_updater import PasswordUpdater

__all__ = ["PasswordPolicyEvaluator", "PasswordUpdater"]
