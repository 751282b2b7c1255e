"""Resolve a key to display text through backend, ancestors and defaults.

Resolution order is fixed:

1. the exact ``(locale, key)`` pair;
2. every ancestor produced by :func:`fallback_chain`, most specific first;
3. each configured fallback locale in the order given, without truncation;
4. the key itself when no locale was requested at all;
5. the ``"<locale>.<key>"`` miss marker.

Configured fallbacks are never interleaved with the ancestor chain.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .backends import MessageList, SupportsTranslations
from .fallback import fallback_chain

_LOGGER = logging.getLogger(__name__)

FallbackLocales = str | Iterable[str] | None


def normalise_fallback(fallback: FallbackLocales) -> tuple[str, ...]:
    """Coerce ``None``, one tag, or an ordered iterable into a tuple."""

    if fallback is None:
        return ()
    if isinstance(fallback, str):
        return (fallback,) if fallback else ()
    return tuple(fallback)


def miss_marker(locale: str, key: str) -> str:
    return f"{locale}.{key}"


class Resolver:
    """Translation resolution over a published backend."""

    def __init__(self, backend: SupportsTranslations, fallback: FallbackLocales = None) -> None:
        self.backend = backend
        self.fallback = normalise_fallback(fallback)

    def lookup(self, locale: str, key: str) -> str | None:
        """Return the best translation, or ``None`` when every step missed."""

        value = self.backend.translate(locale, key)
        if value is not None:
            return value

        for ancestor in fallback_chain(locale):
            value = self.backend.translate(ancestor, key)
            if value is not None:
                _LOGGER.debug("Resolved %r for %r via ancestor %r", key, locale, ancestor)
                return value

        for fallback_locale in self.fallback:
            value = self.backend.translate(fallback_locale, key)
            if value is not None:
                _LOGGER.debug(
                    "Resolved %r for %r via configured fallback %r",
                    key,
                    locale,
                    fallback_locale,
                )
                return value

        return None

    def translate(self, locale: str, key: str) -> str:
        value = self.lookup(locale, key)
        if value is not None:
            return value

        if not locale:
            return key

        _LOGGER.debug("Missing translation for %r in %r", key, locale)
        return miss_marker(locale, key)

    def available_locales(self) -> list[str]:
        return sorted(set(self.backend.available_locales()))

    def messages_for_locale(self, locale: str) -> MessageList | None:
        return self.backend.messages_for_locale(locale)

    def __repr__(self) -> str:
        return f"Resolver(backend={self.backend!r}, fallback={list(self.fallback)!r})"


def resolve(
    backend: SupportsTranslations,
    locale: str,
    key: str,
    fallback: FallbackLocales = None,
) -> str:
    """One-shot helper around :meth:`Resolver.translate`."""

    return Resolver(backend, fallback).translate(locale, key)


__all__ = ["FallbackLocales", "Resolver", "miss_marker", "normalise_fallback", "resolve"]
