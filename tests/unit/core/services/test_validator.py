from __future__ import annotations

"""
Unit tests for Session Configuration Validation.

Verifies type coercion, default injection, strict mode and the handling
of unknown keys and log levels.
"""

import pytest

from fsnavigator.core.services.validator import validate_config
from fsnavigator.domain.config import get_default_config


def test_validate_defaults_roundtrip() -> None:
    clean, warnings = validate_config(get_default_config())
    assert clean == get_default_config()
    assert warnings == []


def test_validate_non_dict_falls_back_to_defaults() -> None:
    clean, warnings = validate_config(["not", "a", "dict"])
    assert clean == get_default_config()
    assert warnings


def test_validate_non_dict_strict_raises() -> None:
    with pytest.raises(TypeError):
        validate_config("oops", strict=True)


def test_validate_coerces_booleans() -> None:
    clean, warnings = validate_config({"populate_demo": "no", "show_banner": 1})
    assert clean["populate_demo"] is False
    assert clean["show_banner"] is True
    assert len(warnings) == 2


def test_validate_normalizes_log_level() -> None:
    clean, _ = validate_config({"log_level": "debug"})
    assert clean["log_level"] == "DEBUG"


def test_validate_unknown_log_level_uses_default() -> None:
    clean, warnings = validate_config({"log_level": "chatty"})
    assert clean["log_level"] == "WARNING"
    assert any("chatty" in w for w in warnings)


def test_validate_drops_unknown_keys() -> None:
    clean, warnings = validate_config({"colour": "blue"})
    assert "colour" not in clean
    assert any("colour" in w for w in warnings)


def test_validate_strict_rejects_bad_types() -> None:
    with pytest.raises(TypeError):
        validate_config({"prompt_prefix": 42}, strict=True)
