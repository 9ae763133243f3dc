"""
Cooperative deferred-task queue with a virtual clock.

Tasks carry the epoch they were scheduled under. Bumping the epoch makes
every pending task stale; stale tasks are dropped when they come due instead
of running. Nothing runs until the owner advances the clock.
"""

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)


@dataclass(order=True)
class ScheduledTask:
    """A callback due at ``due_ms``; ties run in scheduling order."""

    due_ms: int
    seq: int
    epoch: int = field(compare=False)
    callback: Callable[[], None] = field(compare=False)
    label: str = field(default="", compare=False)


class TaskScheduler:
    """
    Tick-driven scheduler.

    Single-threaded: callbacks run inside ``advance()`` / ``run_until_idle()``
    and may schedule more tasks.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self.epoch = 0
        self.dropped = 0
        self._queue: list[ScheduledTask] = []
        self._seq = itertools.count()

    def schedule(
        self,
        delay_ms: int,
        callback: Callable[[], None],
        epoch: int | None = None,
        label: str = "",
    ) -> ScheduledTask:
        """
        Run ``callback`` ``delay_ms`` after the current virtual time.

        Args:
            delay_ms: Non-negative delay
            callback: Zero-argument callable
            epoch: Epoch the task belongs to (defaults to the current one)
            label: Name used in log messages
        """
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be >= 0, got {delay_ms}")
        task = ScheduledTask(
            due_ms=self.now_ms + delay_ms,
            seq=next(self._seq),
            epoch=self.epoch if epoch is None else epoch,
            callback=callback,
            label=label,
        )
        heapq.heappush(self._queue, task)
        return task

    def bump_epoch(self) -> int:
        """Invalidate every pending task and return the new epoch."""
        self.epoch += 1
        return self.epoch

    @property
    def pending(self) -> int:
        """Tasks still queued for the current epoch."""
        return sum(1 for task in self._queue if task.epoch == self.epoch)

    def is_idle(self) -> bool:
        return not self._queue

    def advance(self, ms: int) -> int:
        """Move the clock forward ``ms`` and run what came due. Returns tasks run."""
        if ms < 0:
            raise ValueError(f"ms must be >= 0, got {ms}")
        return self._run_until(self.now_ms + ms)

    def run_until_idle(self) -> int:
        """Drain the queue, moving the clock to each task's due time."""
        ran = 0
        while self._queue:
            ran += self._run_until(self._queue[0].due_ms)
        return ran

    def _run_until(self, deadline_ms: int) -> int:
        ran = 0
        while self._queue and self._queue[0].due_ms <= deadline_ms:
            task = heapq.heappop(self._queue)
            self.now_ms = task.due_ms
            if task.epoch != self.epoch:
                self.dropped += 1
                logger.debug("Dropped stale task %s (epoch %d)", task.label, task.epoch)
                continue
            task.callback()
            ran += 1
        self.now_ms = max(self.now_ms, deadline_ms)
        return ran
