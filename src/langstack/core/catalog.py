"""In-memory translation catalogue keyed by locale and translation key."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping


class BackendFrozenError(RuntimeError):
    """Raised when translations are added after a catalogue was published."""


class Catalog:
    """Two-level ``locale -> key -> text`` store.

    Entries are only ever added. Once :meth:`freeze` has been called the
    catalogue rejects further writes, which lets readers share it across
    threads without locking.
    """

    __slots__ = ("_entries", "_frozen")

    def __init__(self) -> None:
        self._entries: dict[str, dict[str, str]] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        self._frozen = True

    def add(self, locale: str, messages: Mapping[str, str]) -> None:
        """Merge ``messages`` into ``locale``; later values win per key."""

        if self._frozen:
            raise BackendFrozenError(
                f"Cannot add translations for '{locale}' to a frozen catalogue"
            )

        bucket = self._entries.setdefault(locale, {})
        bucket.update(messages)

    def get(self, locale: str, key: str) -> str | None:
        bucket = self._entries.get(locale)
        if bucket is None:
            return None
        return bucket.get(key)

    def locales(self) -> list[str]:
        return sorted(self._entries)

    def messages(self, locale: str) -> Mapping[str, str] | None:
        """Return a read-only view over one locale's entries."""

        bucket = self._entries.get(locale)
        if bucket is None:
            return None
        return MappingProxyType(bucket)

    def __contains__(self, locale: object) -> bool:
        return locale in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.locales())

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._entries.values())


__all__ = ["BackendFrozenError", "Catalog"]
