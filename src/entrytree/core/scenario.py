from __future__ import annotations

"""
Reference Scenario Runner.

Builds the sample tree, lists it, grows it with the user directories and
lists it again. The listing mechanism (direct `print_list` or a visitor)
and an optional file suffix filter come from the validated configuration.
"""

import logging
from typing import Any, Dict, List

from entrytree.core.builder import add_user_entries, find_child, make_sample_root
from entrytree.core.visitors import FileFindVisitor, ListVisitor
from entrytree.domain.entries import Entry
from entrytree.domain.scenario_models import ScenarioResult, StageResult

logger = logging.getLogger(__name__)

ROOT_STAGE_TITLE = "Making root entries..."
USER_STAGE_TITLE = "Making user entries..."

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_scenario(cfg: Dict[str, Any]) -> ScenarioResult:
    """
    Execute the reference scenario.

    Args:
        cfg: Validated configuration (see `validate_config`).

    Returns:
        ScenarioResult: Lines and sizes of every stage.
    """
    mode = cfg.get("mode", "print_list")
    prefix = cfg.get("prefix", "")
    suffix = cfg.get("find_suffix", "")

    logger.debug(f"Running scenario (mode={mode}, prefix='{prefix}', suffix='{suffix}')")

    stages: List[StageResult] = []

    root = make_sample_root()
    stages.append(_run_stage(ROOT_STAGE_TITLE, root, mode, prefix, suffix))

    if cfg.get("include_users", True):
        add_user_entries(find_child(root, "usr"))
        stages.append(_run_stage(USER_STAGE_TITLE, root, mode, prefix, suffix))

    return ScenarioResult(mode=mode, find_suffix=suffix, stages=stages)


def render_lines(root: Entry, mode: str = "print_list", prefix: str = "") -> List[str]:
    """
    List a tree with the selected mechanism.

    Both mechanisms produce identical output; they differ only in how the
    traversal is driven.
    """
    lines: List[str] = []
    if mode == "visitor":
        root.accept(ListVisitor(lines.append), prefix)
    else:
        root.print_list(prefix, sink=lines.append)
    return lines


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _run_stage(title: str, root: Entry, mode: str, prefix: str, suffix: str) -> StageResult:
    if suffix:
        finder = FileFindVisitor(suffix)
        root.accept(finder, prefix)
        lines = list(finder.lines)
    else:
        lines = render_lines(root, mode, prefix)

    total = root.get_size()
    logger.info(f"{title} {len(lines)} lines, total size {total}")
    return StageResult(title=title, lines=lines, total_size=total)
