"""
Localization Adapter

Message catalogs for hosts that do not bring their own translation service.
Messages use printf-style placeholders filled from the ordered arguments.
"""

from collections.abc import Mapping
from typing import Any

from fe_change_pwd.core.logging import get_logger
from fe_change_pwd.modules.frontend_user.domain.interfaces.services.translator import (
    ITranslator,
)

logger = get_logger(__name__)

DEFAULT_LANGUAGE = "en"

DEFAULT_CATALOGS: dict[str, dict[str, str]] = {
    "en": {
        "passwordFieldsEmptyOrNotBothFilledOut": "Please fill out both password fields.",
        "passwordsDoNotMatch": "The passwords do not match.",
        "passwordComplexity.failure.minLength": (
            "The password must be at least %d characters long."
        ),
        "passwordComplexity.failure.capitalCharCheck": (
            "The password must contain at least one capital letter."
        ),
        "passwordComplexity.failure.lowerCaseCharCheck": (
            "The password must contain at least one lower case letter."
        ),
        "passwordComplexity.failure.digitCheck": (
            "The password must contain at least one digit."
        ),
        "passwordComplexity.failure.specialCharCheck": (
            "The password must contain at least one special character."
        ),
        "passwordUpdated": "Your password has been updated.",
        "changePasswordRequired.forced": "You have to change your password before you can continue.",
        "changePasswordRequired.expired": "Your password has expired. Please choose a new one.",
    },
    "de": {
        "passwordFieldsEmptyOrNotBothFilledOut": "Bitte füllen Sie beide Passwortfelder aus.",
        "passwordsDoNotMatch": "Die Passwörter stimmen nicht überein.",
        "passwordComplexity.failure.minLength": (
            "Das Passwort muss mindestens %d Zeichen lang sein."
        ),
        "passwordComplexity.failure.capitalCharCheck": (
            "Das Passwort muss mindestens einen Großbuchstaben enthalten."
        ),
        "passwordComplexity.failure.lowerCaseCharCheck": (
            "Das Passwort muss mindestens einen Kleinbuchstaben enthalten."
        ),
        "passwordComplexity.failure.digitCheck": (
            "Das Passwort muss mindestens eine Ziffer enthalten."
        ),
        "passwordComplexity.failure.specialCharCheck": (
            "Das Passwort muss mindestens ein Sonderzeichen enthalten."
        ),
        "passwordUpdated": "Ihr Passwort wurde geändert.",
        "changePasswordRequired.forced": "Bitte ändern Sie Ihr Passwort, um fortzufahren.",
        "changePasswordRequired.expired": "Ihr Passwort ist abgelaufen. Bitte wählen Sie ein neues.",
    },
}


class CatalogTranslator(ITranslator):
    """
    Translator backed by in-memory message catalogs.

    Lookups fall back to the default language and finally to the key itself,
    so a missing translation never hides a validation message.
    """

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        catalogs: Mapping[str, Mapping[str, str]] | None = None,
    ):
        self.language = language
        self.catalogs = catalogs if catalogs is not None else DEFAULT_CATALOGS

    def translate(self, key: str, arguments: tuple[Any, ...] = ()) -> str:
        message = self._lookup(key)
        if message is None:
            logger.debug("Missing translation", key=key, language=self.language)
            return key
        if not arguments:
            return message

        try:
            return message % tuple(arguments)
        except (TypeError, ValueError):
            logger.warning("Translation arguments do not match message", key=key)
            return message

    def _lookup(self, key: str) -> str | None:
        for language in (self.language, DEFAULT_LANGUAGE):
            message = self.catalogs.get(language, {}).get(key)
            if message is not None:
                return message
        return None
