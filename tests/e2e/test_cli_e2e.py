from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the package as a subprocess (`python -m entrytree`) and validates
exit codes and stdout content.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"


def run_cli(args: List[str]) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package resolves
    without being installed.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, "-m", "entrytree"] + args

    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_reference_listing() -> None:
    """TC-01: Default run lists the reference tree in two stages."""
    result = run_cli([])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    lines = result.stdout.splitlines()
    assert lines[:7] == [
        "Making root entries...",
        "/root(30000)",
        "/root/bin(30000)",
        "/root/bin/vi(10000)",
        "/root/bin/latex(20000)",
        "/root/tmp(0)",
        "/root/usr(0)",
    ]
    assert "Making user entries..." in lines
    assert "/root(31500)" in lines


def test_cli_visitor_mode_json() -> None:
    """TC-02: JSON output of the visitor traversal."""
    result = run_cli(["--mode", "visitor", "--json"])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    payload = json.loads(result.stdout)
    assert payload["mode"] == "visitor"
    assert payload["total_size"] == 31500
    assert len(payload["stages"]) == 2


def test_cli_missing_config_exit_code(tmp_path: Path) -> None:
    """TC-03: A missing configuration file is reported with exit code 2."""
    result = run_cli(["--config", str(tmp_path / "nope.json")])

    assert result.returncode == 2
    assert "ERROR" in result.stderr


def test_cli_log_file(tmp_path: Path) -> None:
    """TC-04: --log-file persists diagnostics."""
    log_file = tmp_path / "entrytree.log"
    result = run_cli(["--debug", "--log-file", str(log_file), "--no-users"])

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert log_file.exists()
    assert "total size 30000" in log_file.read_text(encoding="utf-8")
