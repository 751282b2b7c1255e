"""Expose the published translation backend to HTTP consumers."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any

from flask import Blueprint, current_app, jsonify, request

from langstack.app.http import problem_response
from langstack.config import I18nSettings
from langstack.core import Resolver

EXTENSION_KEY = "langstack"

blueprint = Blueprint("translations", __name__, url_prefix="/api/v1/translations")


def get_resolver() -> Resolver:
    return current_app.extensions[EXTENSION_KEY]["resolver"]


def get_settings() -> I18nSettings:
    return current_app.extensions[EXTENSION_KEY]["settings"]


def _locale_messages_response(locale: str):
    messages = get_resolver().messages_for_locale(locale)
    if messages is None:
        return problem_response(
            "unknown_locale",
            status=HTTPStatus.NOT_FOUND,
            message=f"No translations are available for '{locale}'",
            locale=locale,
        ).to_response()

    return jsonify({"locale": locale, "messages": dict(messages)}), HTTPStatus.OK


@blueprint.get("/")
def list_locales():
    """Return the available locales, or one locale's messages for ``?locale=``."""

    locale_hint = request.args.get("locale")
    if locale_hint:
        return _locale_messages_response(locale_hint)

    settings = get_settings()
    payload: dict[str, Any] = {
        "available_locales": get_resolver().available_locales(),
        "default_locale": settings.default_locale,
        "fallback": list(get_resolver().fallback),
    }
    return jsonify(payload), HTTPStatus.OK


@blueprint.get("/<locale>")
def get_locale_messages(locale: str):
    """Return every message known for ``locale`` without applying fallback."""

    return _locale_messages_response(locale)


@blueprint.get("/<locale>/<path:key>")
def translate_key(locale: str, key: str):
    """Resolve ``key`` for ``locale`` through the full fallback order."""

    text = get_resolver().translate(locale, key)
    return jsonify({"locale": locale, "key": key, "text": text}), HTTPStatus.OK
