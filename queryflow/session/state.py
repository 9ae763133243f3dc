"""
Solution reveal state.
"""

from dataclasses import dataclass, field
from enum import Enum


class RevealStage(Enum):
    """Solution reveal stages."""

    IDLE = "idle"
    CLEARING = "clearing"
    BUILDING_NODES = "building_nodes"
    REVEALING_EDGES = "revealing_edges"
    SETTLED = "settled"


@dataclass
class RevealState:
    """
    Progress of the current solution reveal.

    ``epoch`` identifies the reveal; tasks from any other epoch are stale.
    """

    stage: RevealStage = RevealStage.IDLE
    epoch: int = 0
    edges_revealed: int = 0
    edges_total: int = 0
    reveal_log: list[str] = field(default_factory=list)

    def log(self, message: str) -> None:
        """Add a log message."""
        self.reveal_log.append(message)

    def advance_to(self, stage: RevealStage) -> None:
        """Advance to a new stage."""
        self.log(f"Stage: {self.stage.value} → {stage.value}")
        self.stage = stage

    @property
    def in_flight(self) -> bool:
        return self.stage in (
            RevealStage.CLEARING,
            RevealStage.BUILDING_NODES,
            RevealStage.REVEALING_EDGES,
        )

    def summary(self) -> dict:
        """Return a summary of the reveal state."""
        return {
            "stage": self.stage.value,
            "epoch": self.epoch,
            "edges_revealed": self.edges_revealed,
            "edges_total": self.edges_total,
        }
