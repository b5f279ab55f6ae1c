from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Mapping of CLI flags to configuration keys.
2. Unset options stay None so they never shadow config file values.
3. Rejection of unknown listing modes.
"""

import pytest

from entrytree.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_cli_flags_mapping() -> None:
    args = parse_args(["--no-users", "--json", "--debug", "--mode", "visitor"])
    overrides = args_to_overrides(args)

    assert overrides["include_users"] is False
    assert overrides["json_output"] is True
    assert overrides["log_level"] == "DEBUG"
    assert overrides["mode"] == "visitor"


def test_cli_value_options() -> None:
    args = parse_args(["--prefix", "/mnt", "--find", ".html", "--log-file", "/tmp/x.log"])
    overrides = args_to_overrides(args)

    assert overrides["prefix"] == "/mnt"
    assert overrides["find_suffix"] == ".html"
    assert overrides["log_file"] == "/tmp/x.log"


def test_cli_defaults_map_to_none() -> None:
    overrides = args_to_overrides(parse_args([]))

    assert overrides["mode"] is None
    assert overrides["prefix"] is None
    assert overrides["find_suffix"] is None
    assert "include_users" not in overrides
    assert "json_output" not in overrides
    assert "log_level" not in overrides


def test_cli_rejects_unknown_mode() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--mode", "recursive"])
