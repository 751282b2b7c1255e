"""Locale ancestor lookup following RFC 4647 section 3.4 truncation.

``zh-Hant-CN-x-private1-private2`` degrades to ``zh-Hant-CN-x-private1``,
then ``zh-Hant-CN`` (the dangling ``-x`` private-use marker is dropped
together with the subtag after it), ``zh-Hant`` and finally ``zh``.
"""

from __future__ import annotations

from typing import Iterator

PRIVATE_USE_MARKER = "-x"


def lookup_fallback(locale: str) -> str | None:
    """Return the next less specific tag, or ``None`` once no hyphen remains."""

    index = locale.rfind("-")
    if index < 0:
        return None

    parent = locale[:index]
    while parent.endswith(PRIVATE_USE_MARKER):
        parent = parent[: -len(PRIVATE_USE_MARKER)]
    return parent


def fallback_chain(locale: str) -> Iterator[str]:
    """Yield every ancestor of ``locale``, most specific first."""

    current = lookup_fallback(locale)
    while current is not None:
        yield current
        current = lookup_fallback(current)


__all__ = ["PRIVATE_USE_MARKER", "fallback_chain", "lookup_fallback"]
