"""Message lookup for user-visible text."""

from __future__ import annotations

import re
from typing import Protocol

DEFAULT_MESSAGES: dict[str, str] = {
    "calc.error.divideByZero": "Cannot divide by zero",
    "calc.error.invalidInput": "Invalid input",
    "calc.mode.basic": "Basic",
    "calc.mode.scientific": "Scientific",
    "calc.btn.clear": "C",
}

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


class Translator(Protocol):
    def t(self, key: str, params: dict[str, str | int | float] | None = None) -> str: ...


class CatalogTranslator:
    """
    Resolve message keys from a catalog.

    Unknown keys render as the key itself. ``{name}`` placeholders are
    filled from ``params``; placeholders without a value are left as is.
    """

    def __init__(self, messages: dict[str, str] | None = None, language: str = "en") -> None:
        self.language = language
        self._messages = dict(DEFAULT_MESSAGES if messages is None else messages)

    def t(self, key: str, params: dict[str, str | int | float] | None = None) -> str:
        template = self._messages.get(key, key)
        if not params:
            return template

        def fill(match: re.Match[str]) -> str:
            name = match.group(1)
            return str(params[name]) if name in params else match.group(0)

        return _PLACEHOLDER.sub(fill, template)
