"""Pydantic configuration models.

Two kinds of configuration:

- ``ThresholdConfig``: what to gate on. Comes from command-line flags and
  the JSON config file (``.lcovgaterc.json``), see ``loader.merge_config``.
- ``GateSettings``: how to run. Read from environment variables.

Environment Variable Format:
    LCOVGATE__<KEY>=<VALUE>

Examples:
    LCOVGATE__COMMAND='["deno", "coverage", "--lcov"]'
    LCOVGATE__TIMEOUT_SEC=120
    LCOVGATE__LOG_LEVEL=DEBUG
    LCOVGATE__LOG_FORMAT=json
"""

import math
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from lcovgate.coverage.models import CoverageKind

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_THRESHOLD = 100.0
DEFAULT_COMMAND = ["deno", "coverage", "--lcov"]


class ThresholdConfig(BaseModel):
    """Coverage thresholds.

    A threshold of None means that kind is not gated. ``perFile`` is the
    JSON spelling of ``per_file``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    lines: float | None = Field(default=None, description="Minimum line coverage percent.")
    functions: float | None = Field(
        default=None, description="Minimum function coverage percent."
    )
    branches: float | None = Field(default=None, description="Minimum branch coverage percent.")
    per_file: bool = Field(
        default=False,
        alias="perFile",
        description="Also apply thresholds to every individual file.",
    )
    include: str | None = Field(
        default=None, description="Include pattern forwarded to the coverage command."
    )
    exclude: str | None = Field(
        default=None, description="Exclude pattern forwarded to the coverage command."
    )

    @field_validator("lines", "functions", "branches")
    @classmethod
    def validate_threshold(cls, v: float | None) -> float | None:
        if v is not None and not math.isfinite(v):
            raise ValueError(f"Threshold must be a finite number, got {v}")
        return v

    def threshold(self, kind: "CoverageKind") -> float | None:
        value: float | None = getattr(self, kind.value)
        return value


class GateSettings(BaseSettings):
    """Runtime settings. Env vars: LCOVGATE__COMMAND, LCOVGATE__LOG_LEVEL, etc."""

    model_config = SettingsConfigDict(
        env_prefix="LCOVGATE__",
        case_sensitive=False,
    )

    command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_COMMAND),
        description="Coverage command that prints an LCOV report on stdout.",
    )
    timeout_sec: float | None = Field(
        default=None,
        description="Kill the coverage command after this many seconds. None waits forever.",
    )
    log_level: LogLevel = "WARNING"
    log_format: Literal["json", "console"] = "console"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("Coverage command must not be empty")
        return v

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v
