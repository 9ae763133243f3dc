"""Session configuration.

Only presentation timing, layout and log level live here. Scoring thresholds
are fixed constants in ``queryflow.evaluation``.

Every field can be overridden from the environment (or a ``.env`` file) as
``QUERYFLOW_<FIELD_NAME>``, e.g. ``QUERYFLOW_REVEAL_STRIDE_MS=50``.
"""

import logging
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

ENV_PREFIX = "QUERYFLOW_"


class SessionConfig(BaseSettings):
    """Flowchart session configuration."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Solution reveal ===
    reveal_stride_ms: int = Field(default=100, gt=0, description="Delay between successive edge insertions")
    settle_delay_ms: int = Field(default=100, ge=0, description="Extra delay after the last edge")
    fit_padding: float = Field(default=0.2, ge=0, description="Fit-to-view padding")
    fit_duration_ms: int = Field(default=800, ge=0, description="Fit-to-view animation duration")

    # === Computed add-node positions ===
    palette_origin_x: float = Field(default=250.0)
    palette_origin_y: float = Field(default=100.0)
    palette_jitter_x: float = Field(default=400.0, ge=0, description="Random horizontal spread")
    palette_row_height: float = Field(default=80.0, ge=0, description="Vertical offset per existing node")
    seed: Optional[int] = Field(default=None, description="Fixed seed makes computed positions reproducible")

    # === Logging ===
    log_level: str = Field(default="INFO", description="Logging level name")

    def __init__(self, **values) -> None:
        try:
            super().__init__(**values)
        except ValidationError as exc:
            raise ConfigError(f"Invalid session configuration: {exc}") from exc

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)
