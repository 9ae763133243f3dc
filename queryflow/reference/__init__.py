"""
The fixed reference pipeline the user's graph is scored against.
"""

from .model import (
    ADJACENCY,
    CATALOG,
    LEARNING_GOALS,
    REFERENCE_EDGES,
    SOLUTION_POSITIONS,
    WORKFLOW_TIPS,
    allowed_targets,
    describe,
    node_templates,
    reference_edges,
    solution_position,
    total_expected,
)

__all__ = [
    "ADJACENCY",
    "CATALOG",
    "LEARNING_GOALS",
    "REFERENCE_EDGES",
    "SOLUTION_POSITIONS",
    "WORKFLOW_TIPS",
    "allowed_targets",
    "describe",
    "node_templates",
    "reference_edges",
    "solution_position",
    "total_expected",
]
