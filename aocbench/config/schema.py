# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for aocbench.

Each config section gets its own frozen pydantic model. The models use
pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked

A config file is optional. Without one, HarnessConfig.default() supplies every
value, so the CLI works out of the box and a file only needs the keys it wants
to change (plus `global.config_version`).
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CONFIG_VERSION = "1.0.0"


class GlobalConfig(BaseModel):
    """Cross-cutting settings: schema version and logging."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    log_level: str = Field(
        default="WARNING",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for file-based log output",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        upper = value.upper()
        if upper not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level '{value}'")
        return upper


class FetchConfig(BaseModel):
    """Where puzzle pages and inputs come from, and how to authenticate."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    base_url: str = Field(
        default="https://adventofcode.com",
        description="Site root; puzzle pages live under <base_url>/<year>/day/<day>",
    )
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        le=300,
        description="Per-request timeout",
    )
    session_env_var: str = Field(
        default="ADVENT_OF_CODE_SESSION",
        min_length=1,
        description="Environment variable holding the session cookie value",
    )
    user_agent: str = Field(
        default="aocbench",
        description="User-Agent sent with every request",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


class BenchConfig(BaseModel):
    """Benchmark defaults."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    default_duration_seconds: float = Field(
        default=1.0,
        gt=0,
        allow_inf_nan=False,
        description="Budget used when --bench is given without a value",
    )
    color: bool = Field(
        default=True,
        description="Use ANSI colors in the comparison table",
    )


class ScaffoldConfig(BaseModel):
    """Template generation settings."""

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    package_dir: Optional[str] = Field(
        default=None,
        description="Directory of the puzzles package to scaffold into; defaults to aocbench/puzzles",
    )


class HarnessConfig(BaseModel):
    """
    Top-level config container.

    Only `global` is required in a file. The other sections fall back to their
    defaults when omitted.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    bench: BenchConfig = Field(default_factory=BenchConfig)
    scaffold: ScaffoldConfig = Field(default_factory=ScaffoldConfig)

    @classmethod
    def default(cls) -> "HarnessConfig":
        """The configuration used when no file is given."""
        return cls.model_validate({"global": {"config_version": DEFAULT_CONFIG_VERSION}})
