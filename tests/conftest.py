from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared entry tree fixtures used across unit tests.
3. Logging teardown so queue listeners never outlive a test.
"""

import os
import sys
from typing import Any, Dict, Generator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from entrytree.domain.entries import Directory, File  # noqa: E402
from entrytree.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_logging(capsys: pytest.CaptureFixture[str]) -> Generator[None, None, None]:
    """
    Detach package-managed log handlers after each test.

    Depends on `capsys` so the listener is flushed and stopped while the
    captured streams it writes to are still open.
    """
    yield
    shutdown_logging()


@pytest.fixture
def sample_root() -> Directory:
    """
    Return the reference tree.

    Structure:
    /root
      /bin
        vi (10000)
        latex (20000)
      /tmp
      /usr
    """
    root = Directory("root")
    bin_dir = Directory("bin")
    root.add(bin_dir).add(Directory("tmp")).add(Directory("usr"))
    bin_dir.add(File("vi", 10000)).add(File("latex", 20000))
    return root


@pytest.fixture
def expected_sample_lines() -> list:
    """Listing of the reference tree with an empty prefix."""
    return [
        "/root(30000)",
        "/root/bin(30000)",
        "/root/bin/vi(10000)",
        "/root/bin/latex(20000)",
        "/root/tmp(0)",
        "/root/usr(0)",
    ]


@pytest.fixture
def mock_config_dict() -> Dict[str, Any]:
    """Return a valid, complete configuration dictionary."""
    return {
        "prefix": "",
        "mode": "print_list",
        "include_users": True,
        "find_suffix": "",
        "json_output": False,
        "log_level": "INFO",
        "log_file": "",
    }
