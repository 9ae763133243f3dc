"""
Tests for the virtual-clock task scheduler.
"""

import pytest

from queryflow.session.scheduler import TaskScheduler


class TestTaskScheduler:
    """Tests for TaskScheduler."""

    def test_nothing_runs_until_advanced(self):
        """Test scheduling alone never runs a task."""
        scheduler = TaskScheduler()
        ran = []
        scheduler.schedule(0, lambda: ran.append("a"))

        assert ran == []
        assert scheduler.advance(0) == 1
        assert ran == ["a"]

    def test_runs_in_due_order_then_insertion_order(self):
        """Test tasks run by due time, ties broken by scheduling order."""
        scheduler = TaskScheduler()
        ran = []
        scheduler.schedule(200, lambda: ran.append("late"))
        scheduler.schedule(100, lambda: ran.append("first"))
        scheduler.schedule(100, lambda: ran.append("second"))

        scheduler.run_until_idle()

        assert ran == ["first", "second", "late"]
        assert scheduler.now_ms == 200

    def test_advance_runs_only_due_tasks(self):
        """Test advance stops at the new clock time."""
        scheduler = TaskScheduler()
        ran = []
        scheduler.schedule(50, lambda: ran.append(50))
        scheduler.schedule(150, lambda: ran.append(150))

        scheduler.advance(100)

        assert ran == [50]
        assert scheduler.now_ms == 100
        assert scheduler.pending == 1

    def test_bumped_epoch_drops_pending_tasks(self):
        """Test tasks from an older epoch are dropped when they come due."""
        scheduler = TaskScheduler()
        ran = []
        scheduler.schedule(10, lambda: ran.append("stale"))
        scheduler.bump_epoch()
        scheduler.schedule(20, lambda: ran.append("fresh"))

        scheduler.run_until_idle()

        assert ran == ["fresh"]
        assert scheduler.dropped == 1
        assert scheduler.is_idle()

    def test_explicit_epoch(self):
        """Test a task tagged with a past epoch never runs."""
        scheduler = TaskScheduler()
        epoch = scheduler.bump_epoch()
        ran = []
        scheduler.schedule(0, lambda: ran.append(epoch), epoch=epoch - 1)

        scheduler.run_until_idle()

        assert ran == []

    def test_callbacks_can_schedule(self):
        """Test a running task may schedule follow-up work."""
        scheduler = TaskScheduler()
        ran = []

        def outer():
            ran.append(scheduler.now_ms)
            scheduler.schedule(100, lambda: ran.append(scheduler.now_ms))

        scheduler.schedule(100, outer)
        scheduler.run_until_idle()

        assert ran == [100, 200]

    def test_negative_delays_rejected(self):
        """Test negative delays and clock moves are refused."""
        scheduler = TaskScheduler()
        with pytest.raises(ValueError):
            scheduler.schedule(-1, lambda: None)
        with pytest.raises(ValueError):
            scheduler.advance(-5)
