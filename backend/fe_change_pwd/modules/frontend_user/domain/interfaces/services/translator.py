"""Translator Interface

Localization is provided by the host; the plugin only selects keys and
arguments.
"""

from abc import abstractmethod
from typing import Any, Protocol


class ITranslator(Protocol):
    """Turns a message key and its arguments into user-facing text."""

    @abstractmethod
    def translate(self, key: str, arguments: tuple[Any, ...] = ()) -> str:
        """Translate a message key.

        Args:
            key: Localization key, e.g. ``passwordsDoNotMatch``
            arguments: Ordered values substituted into the message

        Returns:
            Translated message
        """
        ...
