"""
Reference model for the query-processing flowchart.

Static, process-wide tables:
- CATALOG: palette entries (label + description), in palette order
- REFERENCE_EDGES: the 11 directed pairs of the correct pipeline, in reveal order
- ADJACENCY: kind -> kinds it may point to, derived from REFERENCE_EDGES
- SOLUTION_POSITIONS: fixed canvas layout used by the solution reveal

None of these may change at runtime; they are tuples and read-only mappings.
"""

from types import MappingProxyType
from typing import Mapping

from ..schema.edges import ReferenceEdge
from ..schema.nodes import NodeKind, NodeTemplate, Position

K = NodeKind

CATALOG: tuple[NodeTemplate, ...] = (
    NodeTemplate(kind=K.USER, description="Initiates the query and receives final results"),
    NodeTemplate(kind=K.KNOWLEDGE_BASE, description="Structured data repository for information retrieval"),
    NodeTemplate(kind=K.AI_ENGINE, description="Orchestrates the query processing pipeline"),
    NodeTemplate(kind=K.RETRIEVER, description="Fetches relevant information from knowledge base"),
    NodeTemplate(kind=K.LLM_MODEL, description="Generates responses using language understanding"),
    NodeTemplate(kind=K.PROMPT_TEMPLATE, description="Structures the input for consistent LLM processing"),
    NodeTemplate(kind=K.OUTPUT, description="Final presentation-ready response to user"),
    NodeTemplate(kind=K.EVALUATION, description="Assesses quality of generated responses"),
    NodeTemplate(kind=K.API_ENDPOINTS, description="System integration points for external applications"),
    NodeTemplate(kind=K.HUMAN_FEEDBACK, description="User corrections to improve future responses"),
)

REFERENCE_EDGES: tuple[ReferenceEdge, ...] = tuple(
    ReferenceEdge(source=src, target=tgt)
    for src, tgt in (
        (K.USER, K.KNOWLEDGE_BASE),
        (K.KNOWLEDGE_BASE, K.AI_ENGINE),
        (K.AI_ENGINE, K.RETRIEVER),
        (K.AI_ENGINE, K.API_ENDPOINTS),
        (K.RETRIEVER, K.LLM_MODEL),
        (K.LLM_MODEL, K.PROMPT_TEMPLATE),
        (K.PROMPT_TEMPLATE, K.OUTPUT),
        (K.OUTPUT, K.USER),
        (K.OUTPUT, K.EVALUATION),
        (K.EVALUATION, K.HUMAN_FEEDBACK),
        (K.HUMAN_FEEDBACK, K.PROMPT_TEMPLATE),
    )
)


def _derive_adjacency(edges: tuple[ReferenceEdge, ...]) -> Mapping[NodeKind, frozenset]:
    targets: dict[NodeKind, set[NodeKind]] = {kind: set() for kind in NodeKind}
    for edge in edges:
        targets[edge.source].add(edge.target)
    return MappingProxyType({kind: frozenset(t) for kind, t in targets.items()})


ADJACENCY: Mapping[NodeKind, frozenset] = _derive_adjacency(REFERENCE_EDGES)

SOLUTION_POSITIONS: Mapping[NodeKind, Position] = MappingProxyType({
    K.USER: Position(x=400, y=50),
    K.KNOWLEDGE_BASE: Position(x=200, y=150),
    K.AI_ENGINE: Position(x=400, y=250),
    K.RETRIEVER: Position(x=250, y=350),
    K.LLM_MODEL: Position(x=400, y=350),
    K.PROMPT_TEMPLATE: Position(x=400, y=450),
    K.OUTPUT: Position(x=400, y=550),
    K.EVALUATION: Position(x=250, y=650),
    K.HUMAN_FEEDBACK: Position(x=150, y=750),
    K.API_ENDPOINTS: Position(x=550, y=350),
})

LEARNING_GOALS: tuple[str, ...] = (
    "Trace the complete query lifecycle from user input to formatted response",
    "Understand how retrieval-augmented generation combines knowledge bases with LLMs",
    "Recognize the role of feedback loops in improving response quality",
)

WORKFLOW_TIPS: tuple[str, ...] = (
    "Start with User → Knowledge Base as entry point",
    "Connect AI Engine to both Retriever and API Endpoints",
    "Ensure Evaluation receives Output and feeds to Human Feedback",
    "Close the loop by connecting Human Feedback back to Prompt Template",
)

_TEMPLATES_BY_KIND: Mapping[NodeKind, NodeTemplate] = MappingProxyType(
    {template.kind: template for template in CATALOG}
)


def node_templates() -> tuple[NodeTemplate, ...]:
    """Palette entries in display order."""
    return CATALOG


def reference_edges() -> tuple[ReferenceEdge, ...]:
    """The answer-key edges in reveal order."""
    return REFERENCE_EDGES


def total_expected() -> int:
    return len(REFERENCE_EDGES)


def allowed_targets(kind: "NodeKind | str") -> frozenset:
    """Kinds that ``kind`` may point to. Unknown labels raise UnknownNodeKind."""
    return ADJACENCY[NodeKind.from_label(kind)]


def describe(kind: "NodeKind | str") -> NodeTemplate:
    """Label and description for a node kind, for hover/info display."""
    return _TEMPLATES_BY_KIND[NodeKind.from_label(kind)]


def solution_position(kind: "NodeKind | str") -> Position:
    """Fixed layout slot of ``kind`` in the revealed solution."""
    return SOLUTION_POSITIONS[NodeKind.from_label(kind)]
