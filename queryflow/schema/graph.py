"""
Editable flowchart graph.
"""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from ..errors import InvalidReference
from ..utils.ids import new_edge_id, new_node_id
from .edges import GraphEdge
from .nodes import GraphNode, NodeKind, Position

logger = logging.getLogger(__name__)


class GraphState(BaseModel):
    """
    Container for the user-built directed graph.

    Nodes and edges are kept in insertion order. Removing a node leaves its
    edges in place; such dangling edges are ignored by every lookup.
    """

    nodes: dict[str, GraphNode] = Field(default_factory=dict)
    edges: dict[str, GraphEdge] = Field(default_factory=dict)

    def add_node(self, kind: NodeKind, position: Position) -> str:
        """Add a node under a fresh ID and return it. Kinds may repeat."""
        kind = NodeKind.from_label(kind)
        node_id = new_node_id(kind.value)
        while node_id in self.nodes:
            node_id = new_node_id(kind.value)
        node = GraphNode(
            id=node_id,
            kind=kind,
            position=position,
        )
        self.nodes[node.id] = node
        logger.debug("Added node %s (%s)", node.id, node.label)
        return node.id

    def add_edge(
        self,
        source_id: str,
        target_id: str,
        edge_id: Optional[str] = None,
    ) -> str:
        """
        Connect two existing nodes and return the edge ID.

        Duplicate and cyclic edges are accepted.

        Raises:
            InvalidReference: If either endpoint is not in the graph. The
                graph is left unchanged.
            ValueError: If an explicit ``edge_id`` is already taken.
        """
        if source_id not in self.nodes:
            raise InvalidReference(source_id, "source")
        if target_id not in self.nodes:
            raise InvalidReference(target_id, "target")
        if edge_id is not None and edge_id in self.edges:
            raise ValueError(f"Edge {edge_id} already exists")
        edge = GraphEdge(
            id=edge_id or new_edge_id(),
            source_id=source_id,
            target_id=target_id,
        )
        self.edges[edge.id] = edge
        logger.debug("Added edge %s: %s -> %s", edge.id, source_id, target_id)
        return edge.id

    def remove_node(self, node_id: str) -> bool:
        """Remove a node without touching its edges."""
        return self.nodes.pop(node_id, None) is not None

    def remove_edge(self, edge_id: str) -> bool:
        """Remove an edge."""
        return self.edges.pop(edge_id, None) is not None

    def clear(self) -> None:
        """Drop all nodes and edges."""
        self.nodes.clear()
        self.edges.clear()

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        """Get a node by ID."""
        return self.nodes.get(node_id)

    def get_edge(self, edge_id: str) -> Optional[GraphEdge]:
        """Get an edge by ID."""
        return self.edges.get(edge_id)

    def find_nodes_by_kind(self, kind: NodeKind) -> list[str]:
        """Return IDs of nodes of ``kind`` in insertion order."""
        kind = NodeKind.from_label(kind)
        return [node.id for node in self.nodes.values() if node.kind == kind]

    def first_node_of_kind(self, kind: NodeKind) -> Optional[str]:
        """First-inserted node of ``kind``, or None."""
        matches = self.find_nodes_by_kind(kind)
        return matches[0] if matches else None

    def is_dangling(self, edge: GraphEdge) -> bool:
        """True when an endpoint of ``edge`` has been removed."""
        return edge.source_id not in self.nodes or edge.target_id not in self.nodes

    def live_edges(self) -> list[GraphEdge]:
        """Edges whose endpoints both still exist."""
        return [edge for edge in self.edges.values() if not self.is_dangling(edge)]

    def has_edge(self, source_id: str, target_id: str) -> bool:
        """Exact directed check: is there a live edge source -> target?"""
        return any(
            edge.source_id == source_id and edge.target_id == target_id
            for edge in self.live_edges()
        )

    def get_outgoing_edges(self, node_id: str) -> list[GraphEdge]:
        """Get live edges where node is the source."""
        return [edge for edge in self.live_edges() if edge.source_id == node_id]

    def get_incoming_edges(self, node_id: str) -> list[GraphEdge]:
        """Get live edges where node is the target."""
        return [edge for edge in self.live_edges() if edge.target_id == node_id]

    def snapshot(self) -> dict:
        """Plain-data view for the presentation layer."""
        return self.model_dump(mode="json")

    def __len__(self) -> int:
        return len(self.nodes)

    def summary(self) -> str:
        """Return a summary of the graph."""
        return f"GraphState(nodes={len(self.nodes)}, edges={len(self.edges)})"
