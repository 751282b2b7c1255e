"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from langstack.app import create_app  # noqa: E402
from langstack.config import I18nSettings  # noqa: E402
from langstack.core import Resolver, SimpleBackend  # noqa: E402

BASE_TRANSLATIONS = {
    "en": {
        "hello": "Hello",
        "messages.hello": "Hello, %{name}!",
        "missing.default": "This is missing key fallbacked to en.",
    },
    "zh-CN": {
        "hello": "你好",
        "messages.hello": "你好，%{name}！",
        "fallback_to_cn": "这是一个中文的翻译。",
    },
}


@pytest.fixture()
def backend() -> SimpleBackend:
    """Return a published backend holding the shared sample catalogue."""

    return SimpleBackend.from_mapping(BASE_TRANSLATIONS).freeze()


@pytest.fixture()
def settings() -> I18nSettings:
    return I18nSettings(default_locale="en", fallback=["en"])


@pytest.fixture()
def resolver(backend: SimpleBackend, settings: I18nSettings) -> Resolver:
    return settings.build_resolver(backend)


@pytest.fixture()
def app(resolver: Resolver, settings: I18nSettings) -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app(resolver, settings)
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
