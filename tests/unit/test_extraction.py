"""Tests for the extraction data shapes."""

from __future__ import annotations

from langstack.core import (
    ExtractedMessage,
    SourceLocation,
    ordered_messages,
    register_explicit_keys,
)


def test_register_explicit_keys_appends_with_stable_index() -> None:
    results = {
        "hello": ExtractedMessage(
            key="hello",
            index=0,
            locations=(SourceLocation(path="src/main.py", line=3),),
        )
    }

    register_explicit_keys(["Welcome back", "hello", "Goodbye"], results)

    assert results["hello"].is_tr is False
    assert results["hello"].locations[0].line == 3
    assert results["Welcome back"] == ExtractedMessage(key="Welcome back", index=1, is_tr=True)
    assert results["Goodbye"].index == 2


def test_ordered_messages_sorts_by_index() -> None:
    results = {
        "b": ExtractedMessage(key="b", index=1),
        "a": ExtractedMessage(key="a", index=2),
        "c": ExtractedMessage(key="c", index=0),
    }

    assert [message.key for message in ordered_messages(results)] == ["c", "b", "a"]
