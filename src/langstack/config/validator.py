"""Utilities for validating catalogues against settings and surfacing issues."""

from __future__ import annotations

from langstack.core.backends import SupportsTranslations

from .schema import I18nSettings


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_locales(settings: I18nSettings, known: set[str]) -> list[str]:
    errors: list[str] = []

    if settings.default_locale not in known:
        errors.append(
            _format_scope(
                "default_locale",
                f"'{settings.default_locale}' has no translations",
            )
        )

    for locale in settings.fallback:
        if locale not in known:
            errors.append(
                _format_scope("fallback", f"'{locale}' has no translations")
            )

    missing = [locale for locale in settings.available_locales if locale not in known]
    if missing:
        errors.append(
            _format_scope(
                "available_locales",
                f"declared locales without translations: {sorted(missing)}",
            )
        )

    return errors


def _missing_keys(
    backend: SupportsTranslations,
    base_locale: str,
    locales: list[str],
) -> list[str]:
    issues: list[str] = []
    base = backend.messages_for_locale(base_locale)
    if not base:
        return issues

    expected = {key for key, _ in base}
    for locale in locales:
        if locale == base_locale:
            continue
        present = {key for key, _ in backend.messages_for_locale(locale) or []}
        missing = expected - present
        if missing:
            issues.append(
                _format_scope(
                    locale,
                    f"missing {len(missing)} key(s): {', '.join(sorted(missing))}",
                )
            )
    return issues


def validate_backend(backend: SupportsTranslations, settings: I18nSettings) -> list[str]:
    """Return human-readable issues; an empty list means the catalogue is consistent."""

    locales = sorted(set(backend.available_locales()))
    errors = _validate_locales(settings, set(locales))
    errors.extend(_missing_keys(backend, settings.default_locale, locales))
    return errors


__all__ = ["validate_backend"]
