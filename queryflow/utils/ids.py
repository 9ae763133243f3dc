"""
ID generation for flowchart nodes and edges.

Node IDs carry a slug of the node's label so canvas state stays readable
("knowledge-base-3f9c0a1b"). Revealed solution edges use their position in
the reference sequence ("e-0" .. "e-10").
"""

import re
import uuid

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def _suffix() -> str:
    return uuid.uuid4().hex[:8]


def label_slug(label: str) -> str:
    """'AI Engine (Chain)' -> 'ai-engine-chain'."""
    return _NON_ALNUM.sub("-", label.lower()).strip("-") or "node"


def new_node_id(label: str) -> str:
    """Fresh ID for a node of the given display label."""
    return f"{label_slug(label)}-{_suffix()}"


def new_edge_id() -> str:
    """Fresh ID for a user-drawn edge."""
    return f"edge-{_suffix()}"


def solution_edge_id(index: int) -> str:
    """Stable ID for the reference edge at ``index`` in a solution reveal."""
    return f"e-{index}"
