"""Environment-driven settings for the run tool."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RunSettings(BaseSettings):
    """Defaults for locating, building and launching run targets."""

    model_config = SettingsConfigDict(
        env_prefix="SPMRUN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    PACKAGE_PATH: str | None = Field(
        default=None,
        description="Package root directory (defaults to the working directory).",
    )
    MANIFEST_NAME: str = Field(
        default="package-graph.yaml",
        description="File name of the package graph manifest inside the package root.",
    )
    BUILD_PATH: str = Field(
        default=".build/debug",
        description="Directory, relative to the package root, holding built products.",
    )
    BUILD_COMMAND: str = Field(
        default="swift build --product",
        description="Command used to build a product; the product name is appended.",
    )
    BUILD_TIMEOUT_SEC: int | None = Field(
        default=None,
        description="Optional timeout for the build command.",
    )
    SCRIPT_SUFFIX: str = Field(
        default=".swift",
        description="Source file suffix that triggers the legacy interpreter redirect.",
    )
    INTERPRETER: str = Field(
        default="swift",
        description="Script interpreter binary name or absolute path.",
    )
    TOOL_NAME: str = Field(
        default="swift run",
        description="Tool name shown in diagnostics.",
    )
    LOG_LEVEL: str = Field(
        default="WARNING",
        description="Log level used when --verbose is not given.",
    )
    RUN_LOG_DIR: str | None = Field(
        default=None,
        description="Directory for per-invocation JSONL ledgers (disabled when unset).",
    )

    @model_validator(mode="after")
    def validate_fields(self) -> "RunSettings":
        """Normalize LOG_LEVEL and check SCRIPT_SUFFIX."""
        level = self.LOG_LEVEL.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"SPMRUN_LOG_LEVEL '{self.LOG_LEVEL}' is not a logging level")
        object.__setattr__(self, "LOG_LEVEL", level)
        if not self.SCRIPT_SUFFIX.startswith("."):
            raise ValueError("SPMRUN_SCRIPT_SUFFIX must start with '.'")
        return self


@lru_cache
def get_run_settings() -> RunSettings:
    """Return cached run settings."""
    return RunSettings()


__all__ = ["RunSettings", "get_run_settings"]
