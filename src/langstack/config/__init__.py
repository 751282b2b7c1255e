"""Settings models, loading and catalogue validation."""

from .schema import ConfigurationError, I18nSettings
from .settings import load_settings, settings_from_mapping
from .validator import validate_backend

__all__ = [
    "ConfigurationError",
    "I18nSettings",
    "load_settings",
    "settings_from_mapping",
    "validate_backend",
]
