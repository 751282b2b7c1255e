from __future__ import annotations

import logging

import pytest
from flask.testing import FlaskClient

from langstack.app import create_app
from langstack.config import I18nSettings
from langstack.core import Resolver, SimpleBackend


def test_health_endpoint_reports_locales(client: FlaskClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "locales": ["en", "zh-CN"]}


def test_unknown_route_returns_json_problem(client: FlaskClient) -> None:
    response = client.get("/does-not-exist")

    assert response.status_code == 404
    assert response.get_json()["error"] == "not_found"


def test_catalogue_issues_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    backend = SimpleBackend.from_mapping(
        {"en": {"hello": "Hello"}, "de": {}}
    ).freeze()

    with caplog.at_level(logging.WARNING, logger="langstack.app"):
        create_app(Resolver(backend), I18nSettings(fallback="ja"))

    messages = [record.getMessage() for record in caplog.records]
    assert any("fallback: 'ja'" in message for message in messages)
    assert any("de: missing 1 key(s): hello" in message for message in messages)
