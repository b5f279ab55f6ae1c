from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, JSON file and command-line overrides), scenario
execution and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from entrytree.core.scenario import run_scenario
from entrytree.core.validator import validate_config
from entrytree.domain.config import get_default_config, load_config
from entrytree.domain.scenario_models import ScenarioResult
from entrytree.infra.logging import LoggingConfig, configure_logging, get_logger
from entrytree.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 invalid input).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap (console only until the configuration is known)
    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True))

    # 3. Resolve base configuration
    if args.config_path:
        if not os.path.exists(args.config_path):
            msg = f"Configuration file does not exist: {args.config_path}"
            logger.error(msg)
            print(f"ERROR: {msg}", file=sys.stderr)
            return 2
        base_conf = load_config(args.config_path)
    else:
        base_conf = get_default_config()

    # 4. Merge overrides and validate
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    _reconfigure_logging(clean_conf, log_level)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 5. Scenario execution phase
    try:
        result = run_scenario(clean_conf)
    except Exception as e:
        msg = f"Scenario failed: {e}"
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if clean_conf["json_output"]:
        payload = asdict(result)
        payload["total_size"] = result.total_size
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge the non-None overrides into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if k in out and v is not None:
            out[k] = v
    return out


def _reconfigure_logging(cfg: Dict[str, Any], bootstrap_level: str) -> None:
    """Re-apply logging settings when the configuration changes them."""
    if cfg["log_level"] == bootstrap_level and not cfg["log_file"]:
        return
    configure_logging(
        LoggingConfig(level=cfg["log_level"], console=True, log_file=cfg["log_file"] or None),
        force=True,
    )

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: ScenarioResult) -> None:
    """Print every stage heading followed by its listing lines."""
    for i, stage in enumerate(result.stages):
        if i:
            print("")
        print(stage.title)
        for line in stage.lines:
            print(line)

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
