"""
Session runtime.

- FlowchartSession: inbound commands (add/connect/remove/evaluate/reveal/reset)
- EventBus: outbound notifications to the presentation layer
- TaskScheduler: virtual-clock deferred tasks with epoch invalidation
- SolutionSequencer: animated rebuild of the reference graph
"""

from .events import Event, EventBus, EventType
from .scheduler import ScheduledTask, TaskScheduler
from .sequencer import SolutionSequencer
from .session import FlowchartSession
from .state import RevealStage, RevealState

__all__ = [
    "Event",
    "EventBus",
    "EventType",
    "ScheduledTask",
    "TaskScheduler",
    "SolutionSequencer",
    "FlowchartSession",
    "RevealStage",
    "RevealState",
]
