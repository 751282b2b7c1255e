"""Shapes exchanged with the offline key-extraction tooling.

The extractor scans sources and produces one :class:`ExtractedMessage` per
discovered key. Keys registered by hand are appended after the scanned ones.
Scanning and catalogue file generation live outside this package.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, MutableMapping


@dataclass(frozen=True)
class SourceLocation:
    path: str
    line: int


@dataclass(frozen=True)
class ExtractedMessage:
    """A translation key discovered in source code or registered explicitly."""

    key: str
    index: int
    is_tr: bool = False
    locations: tuple[SourceLocation, ...] = field(default_factory=tuple)


def register_explicit_keys(
    keys: Iterable[str],
    results: MutableMapping[str, ExtractedMessage],
) -> MutableMapping[str, ExtractedMessage]:
    """Add hand-registered keys, keeping any entry already discovered."""

    for key in keys:
        if key in results:
            continue
        results[key] = ExtractedMessage(key=key, index=len(results), is_tr=True)
    return results


def ordered_messages(results: Mapping[str, ExtractedMessage]) -> list[ExtractedMessage]:
    return sorted(results.values(), key=lambda message: message.index)


__all__ = [
    "ExtractedMessage",
    "SourceLocation",
    "ordered_messages",
    "register_explicit_keys",
]
