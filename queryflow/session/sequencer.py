"""
Solution reveal.

Rebuilds the graph as the reference pipeline: one node per kind at its fixed
layout slot, then the reference edges one per tick in reference order, then a
settle (fit-to-view) signal one extra delay after the last edge.

    clear → build nodes → edge 0 @ 0ms, edge 1 @ stride, ... → settle

A new reveal or a reset bumps the scheduler epoch, so edge tasks left over
from an abandoned reveal are dropped instead of landing on the new graph.
"""

import logging
from typing import Optional

from ..config import SessionConfig
from ..errors import InvalidReference
from ..reference.model import REFERENCE_EDGES, SOLUTION_POSITIONS
from ..schema.edges import ReferenceEdge
from ..schema.graph import GraphState
from ..schema.nodes import NodeKind
from ..utils.ids import solution_edge_id
from .events import EventBus, EventType
from .scheduler import TaskScheduler
from .state import RevealStage, RevealState

logger = logging.getLogger(__name__)


class SolutionSequencer:
    """Drives the animated reveal of the reference graph."""

    def __init__(
        self,
        graph: GraphState,
        scheduler: TaskScheduler,
        bus: EventBus,
        config: Optional[SessionConfig] = None,
        reference: tuple[ReferenceEdge, ...] = REFERENCE_EDGES,
    ) -> None:
        self.graph = graph
        self.scheduler = scheduler
        self.bus = bus
        self.config = config or SessionConfig()
        self.reference = reference
        self.state = RevealState()

    def reveal(self) -> int:
        """
        Start a reveal, abandoning any reveal still in flight.

        Nodes appear immediately; edges are scheduled.

        Returns:
            The epoch of the new reveal
        """
        epoch = self.scheduler.bump_epoch()
        self.state.epoch = epoch
        self.state.edges_revealed = 0
        self.state.edges_total = len(self.reference)

        self.state.advance_to(RevealStage.CLEARING)
        self.graph.clear()
        self.bus.emit(EventType.GRAPH_CLEARED)

        self.state.advance_to(RevealStage.BUILDING_NODES)
        node_ids = self._build_nodes()

        self.state.advance_to(RevealStage.REVEALING_EDGES)
        stride = self.config.reveal_stride_ms
        for index, expected in enumerate(self.reference):
            self.scheduler.schedule(
                index * stride,
                self._edge_task(index, node_ids[expected.source], node_ids[expected.target]),
                epoch=epoch,
                label=solution_edge_id(index),
            )
        last_delay = (len(self.reference) - 1) * stride if self.reference else 0
        self.scheduler.schedule(
            last_delay + self.config.settle_delay_ms,
            self._settle,
            epoch=epoch,
            label="settle",
        )
        logger.info(
            "Revealing solution: %d nodes, %d edges (epoch %d)",
            len(node_ids),
            len(self.reference),
            epoch,
        )
        return epoch

    def cancel(self) -> None:
        """Abandon the current reveal and return to idle."""
        if self.state.in_flight:
            logger.info("Cancelling reveal at edge %d/%d",
                        self.state.edges_revealed, self.state.edges_total)
        self.state.epoch = self.scheduler.bump_epoch()
        self.state.advance_to(RevealStage.IDLE)

    def _build_nodes(self) -> dict[NodeKind, str]:
        node_ids: dict[NodeKind, str] = {}
        for expected in self.reference:
            for kind in (expected.source, expected.target):
                if kind in node_ids:
                    continue
                node_id = self.graph.add_node(kind, SOLUTION_POSITIONS[kind])
                node_ids[kind] = node_id
                self.bus.emit(EventType.NODE_ADDED, node=self.graph.nodes[node_id])
        return node_ids

    def _edge_task(self, index: int, source_id: str, target_id: str):
        def run() -> None:
            edge_id = solution_edge_id(index)
            try:
                self.graph.add_edge(source_id, target_id, edge_id=edge_id)
            except InvalidReference as exc:
                # The user deleted a revealed node before its edge came due
                logger.warning("Skipping solution edge %s: %s", edge_id, exc)
            else:
                self.bus.emit(
                    EventType.EDGE_ADDED,
                    edge=self.graph.edges[edge_id],
                    origin="solution",
                    sound=None,
                    at_ms=self.scheduler.now_ms,
                )
            self.state.edges_revealed = index + 1
            self.bus.emit(
                EventType.SOLUTION_REVEAL_PROGRESS,
                edge_index=index,
                total=len(self.reference),
                at_ms=self.scheduler.now_ms,
            )

        return run

    def _settle(self) -> None:
        self.state.advance_to(RevealStage.SETTLED)
        self.bus.emit(
            EventType.SOLUTION_REVEAL_COMPLETE,
            fit_padding=self.config.fit_padding,
            fit_duration_ms=self.config.fit_duration_ms,
            at_ms=self.scheduler.now_ms,
        )
        logger.info("Solution reveal settled (epoch %d)", self.state.epoch)
