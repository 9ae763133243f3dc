"""Shared fixtures for the queryflow test suite."""

import pytest

from queryflow.config import SessionConfig
from queryflow.reference.model import REFERENCE_EDGES
from queryflow.schema.graph import GraphState
from queryflow.schema.nodes import NodeKind, Position
from queryflow.session.events import EventBus
from queryflow.session.session import FlowchartSession


class EventRecorder:
    """Subscriber that keeps every event it receives."""

    def __init__(self) -> None:
        self.events = []

    def __call__(self, event) -> None:
        self.events.append(event)

    def of_type(self, event_type):
        return [e for e in self.events if e.type == event_type]

    def types(self):
        return [e.type for e in self.events]

    def clear(self) -> None:
        self.events.clear()


@pytest.fixture
def recorder():
    return EventRecorder()


@pytest.fixture
def bus(recorder):
    bus = EventBus()
    bus.subscribe(recorder)
    return bus


@pytest.fixture
def session(bus):
    """Session with a fixed seed and the default 100ms reveal stride."""
    return FlowchartSession(config=SessionConfig(seed=7), bus=bus)


def build_graph(pairs, graph=None):
    """Add one node per kind mentioned in ``pairs`` and connect each pair.

    Returns the graph and a kind -> node id map.
    """
    graph = graph or GraphState()
    ids = {}
    for src, tgt in pairs:
        for kind in (src, tgt):
            if kind not in ids:
                ids[kind] = graph.add_node(kind, Position(x=0, y=0))
        graph.add_edge(ids[src], ids[tgt])
    return graph, ids


def reference_pairs(count=None):
    """The first ``count`` reference edges as (source, target) kind pairs."""
    edges = REFERENCE_EDGES if count is None else REFERENCE_EDGES[:count]
    return [(e.source, e.target) for e in edges]


@pytest.fixture
def all_kinds():
    return list(NodeKind)
