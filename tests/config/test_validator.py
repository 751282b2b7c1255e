from langstack.config import I18nSettings, validate_backend
from langstack.core import SimpleBackend


def test_consistent_catalogue_has_no_issues() -> None:
    backend = SimpleBackend.from_mapping(
        {"en": {"hello": "Hello"}, "de": {"hello": "Hallo"}}
    )

    assert validate_backend(backend, I18nSettings(fallback="en")) == []


def test_validator_flags_missing_keys() -> None:
    backend = SimpleBackend.from_mapping(
        {"en": {"hello": "Hello", "bye": "Bye"}, "de": {"hello": "Hallo"}}
    )

    errors = validate_backend(backend, I18nSettings())

    assert errors == ["de: missing 1 key(s): bye"]


def test_validator_flags_unknown_locales() -> None:
    backend = SimpleBackend.from_mapping({"en": {"hello": "Hello"}})
    settings = I18nSettings(
        default_locale="fr",
        fallback=["en", "zh-CN"],
        available_locales=["en", "ja"],
    )

    errors = validate_backend(backend, settings)

    assert any(error.startswith("default_locale") and "'fr'" in error for error in errors)
    assert any(error.startswith("fallback") and "'zh-CN'" in error for error in errors)
    assert any(error.startswith("available_locales") and "ja" in error for error in errors)
