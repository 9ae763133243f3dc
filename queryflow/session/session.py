"""
Flowchart session: the command surface the presentation layer drives.

Commands mutate the graph and publish events; evaluation is a pure read of
the current graph. All work is single-threaded; the only deferred work is the
solution reveal, which runs as the owner advances the scheduler clock.
"""

import logging
import random
from typing import Optional

from ..config import SessionConfig
from ..errors import InvalidReference
from ..evaluation.evaluator import EvaluationResult, evaluate
from ..reference import model as reference
from ..schema.graph import GraphState
from ..schema.nodes import NodeKind, NodeTemplate, Position
from .events import CONFETTI, SOUND_CONNECT, SOUND_ERROR, SOUND_SUCCESS, EventBus, EventType
from .scheduler import TaskScheduler
from .sequencer import SolutionSequencer
from .state import RevealStage

logger = logging.getLogger(__name__)


class FlowchartSession:
    """
    One interactive exercise.

    Owns the graph, the scheduler and the solution sequencer. Nothing is
    persisted; a new session starts empty.
    """

    def __init__(
        self,
        config: Optional[SessionConfig] = None,
        bus: Optional[EventBus] = None,
        scheduler: Optional[TaskScheduler] = None,
    ) -> None:
        """
        Initialize session.

        Args:
            config: Timing and layout settings
            bus: Event bus to publish on (a private one is created if omitted)
            scheduler: Deferred-task queue (a private one is created if omitted)
        """
        self.config = config or SessionConfig()
        self.bus = bus or EventBus()
        self.scheduler = scheduler or TaskScheduler()
        self.graph = GraphState()
        self.sequencer = SolutionSequencer(
            self.graph, self.scheduler, self.bus, self.config
        )
        self.last_result: Optional[EvaluationResult] = None
        self._rng = random.Random(self.config.seed)

    # ---- Commands ----

    def add_node(self, kind: "NodeKind | str", position: Optional[Position] = None) -> str:
        """Place a node of ``kind``; position is computed when omitted."""
        kind = NodeKind.from_label(kind)
        if position is None:
            position = self._next_position()
        node_id = self.graph.add_node(kind, position)
        self.bus.emit(EventType.NODE_ADDED, node=self.graph.nodes[node_id])
        return node_id

    def connect(self, source_id: str, target_id: str) -> str:
        """
        Connect two nodes.

        Raises:
            InvalidReference: If either node is missing; nothing is added.
        """
        try:
            edge_id = self.graph.add_edge(source_id, target_id)
        except InvalidReference as exc:
            logger.warning("Rejected connection %s -> %s: %s", source_id, target_id, exc)
            raise
        self.bus.emit(
            EventType.EDGE_ADDED,
            edge=self.graph.edges[edge_id],
            origin="user",
            sound=SOUND_CONNECT,
            at_ms=self.scheduler.now_ms,
        )
        return edge_id

    def remove_node(self, node_id: str) -> bool:
        """Remove a node. Its edges are left dangling and ignored."""
        removed = self.graph.remove_node(node_id)
        if removed:
            self.bus.emit(EventType.NODE_REMOVED, node_id=node_id)
        return removed

    def remove_edge(self, edge_id: str) -> bool:
        removed = self.graph.remove_edge(edge_id)
        if removed:
            self.bus.emit(EventType.EDGE_REMOVED, edge_id=edge_id)
        return removed

    def evaluate(self) -> EvaluationResult:
        """Score the current graph and fire the matching feedback effect."""
        result = evaluate(self.graph)
        self.last_result = result
        logger.info("Evaluation: %s", result.summary())
        if result.celebrate:
            self.bus.emit(EventType.CELEBRATE, sound=SOUND_SUCCESS, confetti=dict(CONFETTI))
        else:
            self.bus.emit(EventType.DISCOURAGE, sound=SOUND_ERROR)
        self.bus.emit(EventType.EVALUATION_COMPLETED, result=result)
        return result

    def reveal_solution(self) -> int:
        """Rebuild the graph as the reference solution. Returns the reveal epoch."""
        self.last_result = None
        return self.sequencer.reveal()

    def reset(self) -> None:
        """Cancel any reveal and empty the graph."""
        self.sequencer.cancel()
        self.graph.clear()
        self.last_result = None
        self.bus.emit(EventType.GRAPH_CLEARED)
        logger.info("Session reset")

    # ---- Clock ----

    def tick(self, ms: int) -> int:
        """Advance the virtual clock; returns the number of tasks run."""
        return self.scheduler.advance(ms)

    def run_pending(self) -> int:
        """Run all scheduled work to completion."""
        return self.scheduler.run_until_idle()

    # ---- Queries ----

    @property
    def reveal_stage(self) -> RevealStage:
        return self.sequencer.state.stage

    def palette(self) -> tuple[NodeTemplate, ...]:
        return reference.node_templates()

    def describe(self, kind: "NodeKind | str") -> NodeTemplate:
        return reference.describe(kind)

    def hover(self, node_id: str) -> Optional[NodeTemplate]:
        """Publish info for the hovered node; unknown ids publish nothing."""
        node = self.graph.get_node(node_id)
        if node is None:
            return None
        template = reference.describe(node.kind)
        self.bus.emit(EventType.NODE_HOVER_INFO, node_id=node_id, template=template)
        return template

    def hover_clear(self) -> None:
        self.bus.emit(EventType.NODE_HOVER_CLEAR)

    def suggest_targets(self, node_id: str) -> frozenset:
        """Kinds the node may point to. Unknown ids get an empty set."""
        node = self.graph.get_node(node_id)
        if node is None:
            return frozenset()
        return reference.allowed_targets(node.kind)

    def is_suggested_connection(self, source_id: str, target_id: str) -> bool:
        """Does source -> target follow an adjacency rule? Informational only."""
        target = self.graph.get_node(target_id)
        if target is None:
            return False
        return target.kind in self.suggest_targets(source_id)

    def _next_position(self) -> Position:
        cfg = self.config
        return Position(
            x=cfg.palette_origin_x + self._rng.random() * cfg.palette_jitter_x,
            y=cfg.palette_origin_y + len(self.graph.nodes) * cfg.palette_row_height,
        )
