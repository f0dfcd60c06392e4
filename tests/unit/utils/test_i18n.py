from __future__ import annotations

"""
Unit tests for the Internationalization (i18n) utility.

Ensures dot-notation resolution, interpolation and key fallback work with
the shipped English catalogue.
"""

from fsnavigator.utils.i18n import I18n


def test_default_locale_loads() -> None:
    manager = I18n()
    assert manager.is_loaded
    assert manager.locale == "en"


def test_nested_key_with_interpolation() -> None:
    manager = I18n()
    assert manager.t("errors.invalid_path", path="/x") == "Error: Invalid path '/x'."


def test_list_values_join_as_lines() -> None:
    text = I18n().t("help")
    assert text.splitlines()[0] == "File System Navigator Commands:"
    assert text.endswith("\n")


def test_missing_key_returns_key() -> None:
    assert I18n().t("does.not.exist") == "does.not.exist"


def test_missing_locale_falls_back_to_keys() -> None:
    manager = I18n("xx")
    assert not manager.is_loaded
    assert manager.t("app.welcome") == "app.welcome"
