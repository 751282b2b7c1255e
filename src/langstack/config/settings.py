"""Settings loader wrapping the shared schema models."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from .schema import ConfigurationError, I18nSettings

CONFIG_ENV = "LANGSTACK_CONFIG"
FALLBACK_ENV = "LANGSTACK_FALLBACK"
SETTINGS_SECTION = "i18n"

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def _fallback_override(raw: str | None) -> list[str] | None:
    if raw is None:
        return None
    locales = [locale.strip() for locale in raw.split(",") if locale.strip()]
    if not locales:
        logger.warning("Ignoring blank value for %s: %r", FALLBACK_ENV, raw)
        return None
    return locales


def settings_from_mapping(payload: Mapping[str, Any]) -> I18nSettings:
    """Validate a raw mapping, accepting an optional ``i18n`` section."""

    section = payload.get(SETTINGS_SECTION, payload)
    if not isinstance(section, Mapping):
        raise ConfigurationError(f"'{SETTINGS_SECTION}' section must be a mapping")

    try:
        return I18nSettings.model_validate(dict(section))
    except ValidationError as error:
        raise ConfigurationError(f"Settings validation failed: {error}") from error


def load_settings(path: Path | str | None = None) -> I18nSettings:
    """Load settings from YAML, then apply environment overrides.

    ``path`` defaults to ``$LANGSTACK_CONFIG``; with neither set the defaults
    of :class:`I18nSettings` apply.
    """

    raw_path = path if path is not None else os.getenv(CONFIG_ENV)
    payload: dict[str, Any] = {}
    if raw_path:
        config_file = Path(raw_path).expanduser()
        if not config_file.exists():
            raise FileNotFoundError(f"Settings file not found: {config_file}")
        payload = _load_yaml(config_file)

    settings = settings_from_mapping(payload)

    override = _fallback_override(os.getenv(FALLBACK_ENV))
    if override is not None:
        try:
            settings = I18nSettings.model_validate(
                {**settings.model_dump(), "fallback": override}
            )
        except ValidationError as error:
            raise ConfigurationError(f"Invalid {FALLBACK_ENV}: {error}") from error

    return settings


__all__ = [
    "CONFIG_ENV",
    "FALLBACK_ENV",
    "load_settings",
    "settings_from_mapping",
]
