"""
Edge schema definitions for the query-processing flowchart.

Two kinds of edge exist:
- ReferenceEdge: a directed (source kind, target kind) pair of the answer key
- GraphEdge: a directed connection between two placed nodes
"""

from pydantic import BaseModel, ConfigDict

from .nodes import NodeKind


class ReferenceEdge(BaseModel):
    """One directed pair in the reference pipeline."""

    model_config = ConfigDict(frozen=True)

    source: NodeKind
    target: NodeKind

    def __str__(self) -> str:
        return f"{self.source.value} → {self.target.value}"


class GraphEdge(BaseModel):
    """
    A user-built (or revealed) connection.

    Direction matters: (a, b) and (b, a) are different edges.
    """

    id: str
    source_id: str  # Source node ID
    target_id: str  # Target node ID

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphEdge):
            return False
        return self.id == other.id
