from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from entrytree.domain.config import LISTING_MODES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the entrytree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="entrytree",
        description="Build the reference entry tree and list its contents.",
    )

    # --- Listing ---
    p.add_argument(
        "--mode",
        choices=LISTING_MODES,
        default=None,
        help="Listing mechanism: direct print_list or a ListVisitor traversal.",
    )
    p.add_argument(
        "--prefix",
        default=None,
        help="Path prefix prepended to every listed entry.",
    )
    p.add_argument(
        "--find",
        dest="find_suffix",
        default=None,
        help="Only list files whose name ends with this suffix (e.g. .html).",
    )
    p.add_argument(
        "--no-users",
        action="store_true",
        help="Skip the second stage that adds the user directories.",
    )

    # --- Output Format ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON file with configuration values.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this rotating log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Values left at their argparse default are mapped to None so they do
    not shadow configuration file values.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["mode"] = args.mode
    overrides["prefix"] = args.prefix
    overrides["find_suffix"] = args.find_suffix
    overrides["log_file"] = args.log_file

    if args.no_users:
        overrides["include_users"] = False
    if args.json_output:
        overrides["json_output"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
