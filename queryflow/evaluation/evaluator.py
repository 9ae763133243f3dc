"""Score a user-built flowchart against the reference pipeline.

Matching is per reference edge: take the first node (insertion order) of the
source kind and the first node of the target kind, and count the pair if a
directed edge joins them. Extra or duplicate edges neither help nor hurt.
"""

from dataclasses import dataclass, field
from enum import Enum

from ..reference.model import REFERENCE_EDGES
from ..schema.edges import ReferenceEdge
from ..schema.graph import GraphState

# User-visible boundaries
CELEBRATION_RATIO = 0.7
EXCELLENT_MIN = 90.0
GOOD_MIN = 70.0
FAIR_MIN = 50.0

GREEN_BAND_MIN = 75.0
YELLOW_BAND_MIN = 50.0


class FeedbackTier(str, Enum):
    """Qualitative verdict, highest first."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    NEEDS_WORK = "NeedsWork"


FEEDBACK_MESSAGES = {
    FeedbackTier.EXCELLENT: "Excellent! You have nearly perfect understanding of the flow.",
    FeedbackTier.GOOD: "Good job! You understand most of the key connections.",
    FeedbackTier.FAIR: "Not bad! Review the solution to see what you missed.",
    FeedbackTier.NEEDS_WORK: "Keep trying! Review the steps and try again.",
}


@dataclass(frozen=True)
class EvaluationResult:
    """Score of one graph snapshot. Recomputed on every evaluation."""

    matched_count: int
    total_expected: int
    accuracy_percent: float
    feedback_tier: FeedbackTier
    celebrate: bool
    matched: tuple[ReferenceEdge, ...] = field(default_factory=tuple)
    missing: tuple[ReferenceEdge, ...] = field(default_factory=tuple)

    @property
    def feedback(self) -> str:
        return FEEDBACK_MESSAGES[self.feedback_tier]

    @property
    def score_band(self) -> str:
        return score_band(self.accuracy_percent)

    def summary(self) -> str:
        return (
            f"{self.matched_count} of {self.total_expected} connections correct "
            f"({self.accuracy_percent:.1f}%) - {self.feedback_tier.value}"
        )


def accuracy_percent(matched: int, total: int) -> float:
    """Percentage rounded to one decimal."""
    if total <= 0:
        return 0.0
    return round(matched / total * 100, 1)


def feedback_tier(accuracy: float) -> FeedbackTier:
    """Map a rounded accuracy percentage to its tier."""
    if accuracy >= EXCELLENT_MIN:
        return FeedbackTier.EXCELLENT
    elif accuracy >= GOOD_MIN:
        return FeedbackTier.GOOD
    elif accuracy >= FAIR_MIN:
        return FeedbackTier.FAIR
    return FeedbackTier.NEEDS_WORK


def should_celebrate(matched: int, total: int) -> bool:
    """Celebration fires on the raw ratio, not the rounded percentage."""
    return total > 0 and matched / total >= CELEBRATION_RATIO


def score_band(accuracy: float) -> str:
    """Colour band for the result ring."""
    if accuracy >= GREEN_BAND_MIN:
        return "green"
    if accuracy >= YELLOW_BAND_MIN:
        return "yellow"
    return "red"


def edge_satisfied(graph: GraphState, expected: ReferenceEdge) -> bool:
    """Is ``expected`` present between the first nodes of its kinds?"""
    source_id = graph.first_node_of_kind(expected.source)
    target_id = graph.first_node_of_kind(expected.target)
    if source_id is None or target_id is None:
        return False
    return graph.has_edge(source_id, target_id)


def evaluate(
    graph: GraphState,
    reference: tuple[ReferenceEdge, ...] = REFERENCE_EDGES,
) -> EvaluationResult:
    """
    Compare a graph against the reference edges.

    Args:
        graph: Current graph. Not modified.
        reference: Expected edges; defaults to the fixed reference pipeline.

    Returns:
        EvaluationResult with counts, accuracy, tier and the matched/missing split.
    """
    matched: list[ReferenceEdge] = []
    missing: list[ReferenceEdge] = []
    for expected in reference:
        if edge_satisfied(graph, expected):
            matched.append(expected)
        else:
            missing.append(expected)

    total = len(reference)
    accuracy = accuracy_percent(len(matched), total)
    return EvaluationResult(
        matched_count=len(matched),
        total_expected=total,
        accuracy_percent=accuracy,
        feedback_tier=feedback_tier(accuracy),
        celebrate=should_celebrate(len(matched), total),
        matched=tuple(matched),
        missing=tuple(missing),
    )
