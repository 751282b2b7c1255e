"""Callable translator bound to an explicit locale."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any, Mapping

from .resolver import Resolver

PLACEHOLDER_PATTERN = re.compile(r"%\{([a-zA-Z0-9_]+)\}")


def interpolate(text: str, values: Mapping[str, Any]) -> str:
    """Replace ``%{name}`` placeholders; unknown names are left untouched."""

    if not values or "%{" not in text:
        return text

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in values:
            return match.group(0)
        return str(values[name])

    return PLACEHOLDER_PATTERN.sub(_substitute, text)


@dataclass(frozen=True)
class Translator:
    """Callable helper for retrieving localized strings.

    The locale is part of the value rather than process-wide state, so
    request handlers can bind their own copy with :meth:`with_locale`.
    """

    resolver: Resolver
    locale: str

    def __call__(self, key: str, /, **values: Any) -> str:
        return interpolate(self.resolver.translate(self.locale, key), values)

    def with_locale(self, locale: str) -> Translator:
        return replace(self, locale=locale)


__all__ = ["PLACEHOLDER_PATTERN", "Translator", "interpolate"]
