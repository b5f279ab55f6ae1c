from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies type coercion, choice normalization, default injection and
strict mode failures.
"""

from typing import Any, Dict

import pytest

from entrytree.core.validator import validate_config
from entrytree.domain.config import get_default_config


def test_valid_config_passes_without_warnings(mock_config_dict: Dict[str, Any]) -> None:
    clean, warnings = validate_config(mock_config_dict)
    assert clean == mock_config_dict
    assert warnings == []


def test_non_dict_falls_back_to_defaults() -> None:
    clean, warnings = validate_config(["not", "a", "dict"])
    assert clean == get_default_config()
    assert len(warnings) == 1


def test_non_dict_raises_in_strict_mode() -> None:
    with pytest.raises(TypeError):
        validate_config("nope", strict=True)


def test_missing_keys_are_filled_and_unknown_keys_dropped() -> None:
    clean, _ = validate_config({"mode": "visitor", "unknown": 1})
    assert clean["mode"] == "visitor"
    assert clean["include_users"] is True
    assert "unknown" not in clean


def test_bool_coercion_from_strings_and_numbers() -> None:
    clean, warnings = validate_config({"include_users": "no", "json_output": 1})
    assert clean["include_users"] is False
    assert clean["json_output"] is True
    assert len(warnings) == 2


def test_invalid_bool_uses_fallback() -> None:
    clean, warnings = validate_config({"include_users": "maybe"})
    assert clean["include_users"] is True
    assert any("include_users" in w for w in warnings)


def test_choices_are_case_insensitive() -> None:
    clean, warnings = validate_config({"mode": "VISITOR", "log_level": "debug"})
    assert clean["mode"] == "visitor"
    assert clean["log_level"] == "DEBUG"
    assert warnings == []


def test_unknown_choice_warns_or_raises() -> None:
    clean, warnings = validate_config({"mode": "recursive"})
    assert clean["mode"] == "print_list"
    assert "allowed" in warnings[0]

    with pytest.raises(ValueError):
        validate_config({"mode": "recursive"}, strict=True)


def test_prefix_keeps_empty_and_drops_trailing_separator() -> None:
    assert validate_config({"prefix": ""})[0]["prefix"] == ""
    assert validate_config({"prefix": "/mnt/"})[0]["prefix"] == "/mnt"


def test_prefix_type_error_in_strict_mode() -> None:
    with pytest.raises(TypeError):
        validate_config({"prefix": 5}, strict=True)


def test_blank_strings_use_fallback() -> None:
    clean, _ = validate_config({"find_suffix": "   "})
    assert clean["find_suffix"] == ""
