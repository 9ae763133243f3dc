"""
Tests for session configuration, the event bus and the utility helpers.
"""

import logging

import pytest

from queryflow.config import SessionConfig
from queryflow.errors import ConfigError
from queryflow.session.events import EventBus, EventType
from queryflow.utils.ids import label_slug, new_edge_id, new_node_id, solution_edge_id
from queryflow.utils.logger import LOG_FORMAT, setup_logger


class TestSessionConfig:
    """Tests for SessionConfig."""

    def test_defaults(self):
        """Test the reveal timing defaults match the widget's animation."""
        config = SessionConfig()
        assert config.reveal_stride_ms == 100
        assert config.settle_delay_ms == 100
        assert config.fit_duration_ms == 800
        assert config.log_level == "INFO"

    def test_env_overrides(self, monkeypatch):
        """Test QUERYFLOW_* variables override defaults."""
        monkeypatch.setenv("QUERYFLOW_REVEAL_STRIDE_MS", "25")
        monkeypatch.setenv("QUERYFLOW_SEED", "3")

        config = SessionConfig()

        assert config.reveal_stride_ms == 25
        assert config.seed == 3
        assert config.settle_delay_ms == 100

    def test_env_garbage_raises_config_error(self, monkeypatch):
        """Test a non-integer env value surfaces as ConfigError."""
        monkeypatch.setenv("QUERYFLOW_SETTLE_DELAY_MS", "soon")

        with pytest.raises(ConfigError, match="settle_delay_ms"):
            SessionConfig()

    def test_numeric_strings_are_coerced(self):
        """Test string values are type-checked and converted, not compared raw."""
        config = SessionConfig(reveal_stride_ms="100")
        assert config.reveal_stride_ms == 100

    @pytest.mark.parametrize("kwargs", [
        {"reveal_stride_ms": 0},
        {"reveal_stride_ms": "fast"},
        {"settle_delay_ms": -1},
        {"palette_row_height": -10},
        {"fit_padding": "wide"},
        {"log_level": "LOUD"},
    ])
    def test_invalid_values(self, kwargs):
        """Test range and type violations raise ConfigError."""
        with pytest.raises(ConfigError):
            SessionConfig(**kwargs)

    def test_config_error_is_value_error(self):
        """Test callers catching ValueError still see config errors."""
        with pytest.raises(ValueError):
            SessionConfig(settle_delay_ms=-5)

    def test_log_level_from_env(self, monkeypatch):
        """Test QUERYFLOW_LOG_LEVEL is read by the config and normalised."""
        monkeypatch.setenv("QUERYFLOW_LOG_LEVEL", "warning")

        config = SessionConfig()

        assert config.log_level == "WARNING"
        assert config.log_level_value == logging.WARNING

    def test_seed_makes_positions_reproducible(self):
        """Test two sessions with the same seed place nodes identically."""
        from queryflow.session.session import FlowchartSession

        a = FlowchartSession(SessionConfig(seed=11))
        b = FlowchartSession(SessionConfig(seed=11))
        pa = a.graph.nodes[a.add_node("User")].position
        pb = b.graph.nodes[b.add_node("User")].position
        assert pa == pb


class TestEventBus:
    """Tests for EventBus."""

    def test_typed_and_catch_all_handlers(self):
        """Test typed handlers see one type and catch-all handlers see all."""
        bus = EventBus()
        typed, everything = [], []
        bus.subscribe(typed.append, EventType.CELEBRATE)
        bus.subscribe(everything.append)

        bus.emit(EventType.CELEBRATE, sound="success")
        bus.emit(EventType.DISCOURAGE)

        assert [e.type for e in typed] == [EventType.CELEBRATE]
        assert [e.type for e in everything] == [EventType.CELEBRATE, EventType.DISCOURAGE]
        assert typed[0]["sound"] == "success"

    def test_unsubscribe(self):
        """Test an unsubscribed handler receives nothing."""
        bus = EventBus()
        seen = []
        bus.subscribe(seen.append, EventType.GRAPH_CLEARED)
        bus.unsubscribe(seen.append, EventType.GRAPH_CLEARED)

        bus.emit(EventType.GRAPH_CLEARED)

        assert seen == []


class TestIds:
    """Tests for ID helpers."""

    def test_label_slug(self):
        """Test labels become lowercase dash-separated slugs."""
        assert label_slug("AI Engine (Chain)") == "ai-engine-chain"
        assert label_slug("Output/Results Formatted") == "output-results-formatted"

    def test_node_ids_carry_kind_and_are_unique(self):
        """Test node IDs start with the label slug and never repeat."""
        ids = {new_node_id("Knowledge Base") for _ in range(50)}
        assert len(ids) == 50
        assert all(i.startswith("knowledge-base-") for i in ids)

    def test_edge_ids(self):
        """Test user edge IDs and stable solution edge IDs."""
        assert new_edge_id().startswith("edge-")
        assert new_edge_id() != new_edge_id()
        assert solution_edge_id(4) == "e-4"


class TestLogger:
    """Tests for logger setup."""

    def test_setup_logger_is_cached(self, monkeypatch):
        """Test the level comes from QUERYFLOW_LOG_LEVEL and handlers are not duplicated."""
        monkeypatch.setenv("QUERYFLOW_LOG_LEVEL", "debug")
        logger = setup_logger("queryflow.test_setup")

        assert logger.level == logging.DEBUG
        assert setup_logger("queryflow.test_setup") is logger
        assert len(logger.handlers) == 1
        assert logger.handlers[0].formatter._fmt == LOG_FORMAT

    def test_explicit_level_wins(self):
        """Test an explicit level bypasses the config default."""
        logger = setup_logger("queryflow.test_explicit", level=logging.ERROR)
        assert logger.level == logging.ERROR
