"""Translation backends and their layered composition."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping, Protocol

from .catalog import Catalog

MessageList = list[tuple[str, str]]


class SupportsTranslations(Protocol):
    """Structural contract any translation source must satisfy."""

    def available_locales(self) -> list[str]: ...

    def translate(self, locale: str, key: str) -> str | None: ...

    def messages_for_locale(self, locale: str) -> MessageList | None: ...


class Backend(ABC):
    """Queryable, read-only source of translations.

    ``translate`` is an exact ``(locale, key)`` lookup. Locale fallback is
    layered on top by :class:`langstack.core.resolver.Resolver`.
    """

    @abstractmethod
    def available_locales(self) -> list[str]:
        """Return the locales this backend knows about."""

    @abstractmethod
    def translate(self, locale: str, key: str) -> str | None:
        """Return the text stored for the exact pair, if any."""

    @abstractmethod
    def messages_for_locale(self, locale: str) -> MessageList | None:
        """Return every ``(key, text)`` pair for ``locale``.

        ``None`` signals that the locale is unknown, an empty list that it is
        known but holds no entries.
        """

    def extend(self, other: SupportsTranslations) -> CombinedBackend:
        """Layer ``other`` on top of this backend; ``other`` wins per key."""

        return CombinedBackend(self, other)

    def freeze(self) -> Backend:
        return self


class SimpleBackend(Backend):
    """Backend reading from a single in-memory :class:`Catalog`."""

    def __init__(self) -> None:
        self._catalog = Catalog()

    @classmethod
    def from_mapping(cls, translations: Mapping[str, Mapping[str, str]]) -> SimpleBackend:
        backend = cls()
        for locale, messages in translations.items():
            backend.add_translations(locale, messages)
        return backend

    @property
    def frozen(self) -> bool:
        return self._catalog.frozen

    def add_translations(self, locale: str, messages: Mapping[str, str]) -> None:
        """Add more translations for ``locale``, overwriting keys already present."""

        self._catalog.add(locale, messages)

    def freeze(self) -> SimpleBackend:
        self._catalog.freeze()
        return self

    def available_locales(self) -> list[str]:
        return self._catalog.locales()

    def translate(self, locale: str, key: str) -> str | None:
        return self._catalog.get(locale, key)

    def messages_for_locale(self, locale: str) -> MessageList | None:
        messages = self._catalog.messages(locale)
        if messages is None:
            return None
        return list(messages.items())

    def __repr__(self) -> str:
        locales = ", ".join(self.available_locales())
        return f"SimpleBackend(locales=[{locales}], frozen={self.frozen})"


class CombinedBackend(Backend):
    """Two backends stacked so that ``override`` shadows ``base``.

    Both sides are queried at the same locale; no subtag truncation happens
    here. Nesting ``a.extend(b).extend(c)`` resolves ``c`` first.
    """

    def __init__(self, base: SupportsTranslations, override: SupportsTranslations) -> None:
        self.base = base
        self.override = override

    def available_locales(self) -> list[str]:
        # First-seen union; callers needing a canonical order sort themselves.
        locales = list(self.base.available_locales())
        for locale in self.override.available_locales():
            if locale not in locales:
                locales.append(locale)
        return locales

    def translate(self, locale: str, key: str) -> str | None:
        value = self.override.translate(locale, key)
        if value is not None:
            return value
        return self.base.translate(locale, key)

    def messages_for_locale(self, locale: str) -> MessageList | None:
        overrides = self.override.messages_for_locale(locale)
        base = self.base.messages_for_locale(locale)

        if overrides is None:
            return base
        if base is None:
            return overrides

        merged = list(overrides)
        merged.extend(
            (key, text)
            for key, text in base
            if self.override.translate(locale, key) is None
        )
        return merged

    def freeze(self) -> CombinedBackend:
        for side in (self.base, self.override):
            if isinstance(side, Backend):
                side.freeze()
        return self

    def __repr__(self) -> str:
        return f"CombinedBackend({self.base!r}, {self.override!r})"


__all__ = [
    "Backend",
    "CombinedBackend",
    "MessageList",
    "SimpleBackend",
    "SupportsTranslations",
]
