from __future__ import annotations

"""
Scenario Result Models.

Data structures used to hand the output of a listing scenario from the
core layer to the interface layer.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class StageResult:
    """
    Output of one listing stage.

    Attributes:
        title: Heading announcing the stage.
        lines: Listing lines in traversal order.
        total_size: Aggregated size of the root after the stage.
    """
    title: str
    lines: List[str] = field(default_factory=list)
    total_size: int = 0


@dataclass(frozen=True)
class ScenarioResult:
    """
    Complete output of a scenario run.

    Attributes:
        mode: Listing mechanism used ("print_list" or "visitor").
        find_suffix: File suffix filter, empty when listing everything.
        stages: Stages in execution order.
    """
    mode: str
    find_suffix: str = ""
    stages: List[StageResult] = field(default_factory=list)

    @property
    def total_size(self) -> int:
        return self.stages[-1].total_size if self.stages else 0
