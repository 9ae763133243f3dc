"""
Node schema definitions for the query-processing flowchart.

Node kinds (10), one per role in the reference pipeline:
- User: asks the question and receives the answer
- Knowledge Base: data repository
- AI Engine (Chain): orchestrator
- Retriever, LLM Model, Prompt Template: the generation path
- Output/Results Formatted: presentation-ready response
- Evaluation, Human Feedback: the improvement loop
- API Endpoints: external integration points

A graph may hold several nodes of the same kind.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..errors import UnknownNodeKind


class NodeKind(str, Enum):
    """Semantic roles a flowchart node can take. Values are display labels."""

    USER = "User"
    KNOWLEDGE_BASE = "Knowledge Base"
    AI_ENGINE = "AI Engine (Chain)"
    RETRIEVER = "Retriever"
    LLM_MODEL = "LLM Model"
    PROMPT_TEMPLATE = "Prompt Template"
    OUTPUT = "Output/Results Formatted"
    EVALUATION = "Evaluation"
    API_ENDPOINTS = "API Endpoints"
    HUMAN_FEEDBACK = "Human Feedback"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: "str | NodeKind") -> "NodeKind":
        """Resolve a display label to its kind; unknown labels fail fast."""
        if isinstance(label, NodeKind):
            return label
        try:
            return cls(label)
        except ValueError:
            raise UnknownNodeKind(label) from None


class NodeTemplate(BaseModel):
    """Palette entry: what a node kind is called and what it does."""

    model_config = ConfigDict(frozen=True)

    kind: NodeKind
    description: str = Field(..., min_length=1)

    @property
    def label(self) -> str:
        return self.kind.value


class Position(BaseModel):
    """Canvas coordinates of a node."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class GraphNode(BaseModel):
    """
    A node placed on the canvas.

    Holds plain data only; hover and info display are handled by the
    session through the event bus.
    """

    id: str
    kind: NodeKind
    position: Position

    @property
    def label(self) -> str:
        return self.kind.value

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphNode):
            return False
        return self.id == other.id
