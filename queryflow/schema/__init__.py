"""
Schema definitions for flowchart nodes, edges and the editable graph.
"""

from .nodes import GraphNode, NodeKind, NodeTemplate, Position
from .edges import GraphEdge, ReferenceEdge
from .graph import GraphState

__all__ = [
    "GraphNode",
    "NodeKind",
    "NodeTemplate",
    "Position",
    "GraphEdge",
    "ReferenceEdge",
    "GraphState",
]
