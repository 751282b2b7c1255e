"""Pydantic models describing the localisation settings."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from langstack.core.backends import SupportsTranslations
from langstack.core.resolver import Resolver


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


def _as_locale_tuple(value: Any, *, field: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value.strip(),) if value.strip() else ()
    if isinstance(value, (list, tuple)):
        if not all(isinstance(item, str) for item in value):
            raise ConfigurationError(f"{field} entries must be locale strings")
        return tuple(item.strip() for item in value)
    raise ConfigurationError(f"{field} must be a locale string or a list of locales")


class I18nSettings(ImmutableModel):
    """Locale defaults consulted when assembling a resolver."""

    default_locale: str = "en"
    fallback: tuple[str, ...] = ()
    available_locales: tuple[str, ...] = ()

    @field_validator("fallback", mode="before")
    @classmethod
    def _coerce_fallback(cls, value: Any) -> tuple[str, ...]:
        return _as_locale_tuple(value, field="fallback")

    @field_validator("available_locales", mode="before")
    @classmethod
    def _coerce_available(cls, value: Any) -> tuple[str, ...]:
        return _as_locale_tuple(value, field="available_locales")

    @model_validator(mode="after")
    def _validate_values(self) -> I18nSettings:
        if not self.default_locale.strip():
            raise ConfigurationError("default_locale must not be blank")
        if any(not locale.strip() for locale in self.fallback):
            raise ConfigurationError("fallback locales must not be blank")
        if len(set(self.fallback)) != len(self.fallback):
            raise ConfigurationError("fallback locales must not repeat")
        return self

    def build_resolver(self, backend: SupportsTranslations) -> Resolver:
        """Return a resolver over ``backend`` using the configured fallbacks."""

        return Resolver(backend, self.fallback)


__all__ = ["ConfigurationError", "I18nSettings", "ImmutableModel"]
