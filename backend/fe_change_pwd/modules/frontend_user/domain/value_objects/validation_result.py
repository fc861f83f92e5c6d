"""
Validation Result Value Object

Ordered collection of validation messages produced by password validation.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from ..interfaces.services.translator import ITranslator


@dataclass(frozen=True)
class ValidationMessage:
    """A single validation error: localization key, numeric code and arguments."""

    key: str
    code: int
    arguments: tuple[Any, ...] = ()

    def render(self, translator: ITranslator) -> str:
        return translator.translate(self.key, self.arguments)


@dataclass
class ValidationResult:
    """
    Result of validating a password change request.

    Messages keep insertion order. The result is valid when it holds no
    messages; rendering text is left to a translator.
    """

    errors: list[ValidationMessage] = field(default_factory=list)

    def add_error(self, key: str, code: int, arguments: tuple[Any, ...] = ()) -> None:
        self.errors.append(ValidationMessage(key=key, code=code, arguments=tuple(arguments)))

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def keys(self) -> list[str]:
        """Message keys in the order they were reported."""
        return [error.key for error in self.errors]

    def render(self, translator: ITranslator) -> list[str]:
        """Translate every message, preserving order."""
        return [error.render(translator) for error in self.errors]

    def __iter__(self) -> Iterator[ValidationMessage]:
        return iter(self.errors)
