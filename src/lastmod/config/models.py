"""Configuration models describing lastmod settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LastmodBaseModel(BaseModel):
    """Shared configuration for lastmod Pydantic models."""

    model_config = ConfigDict(extra="forbid")


class ScanSettings(LastmodBaseModel):
    """Options governing the recursive subtree scan.

    Attributes:
        max_depth: Deepest level below each child directory that is visited.
        follow_symlinks: Whether symlinked directories are descended into.
    """

    max_depth: int = Field(default=100, ge=1)
    follow_symlinks: bool = False


class OutputSettings(LastmodBaseModel):
    """Report rendering options.

    Attributes:
        format: Whether the report is emitted as text lines or as JSON.
    """

    format: Literal["text", "json"] = "text"


class LoggingSettings(LastmodBaseModel):
    """Runtime logging configuration.

    Attributes:
        verbose: Whether debug diagnostics are written to stderr.
    """

    verbose: bool = False


class LastmodConfig(LastmodBaseModel):
    """Top-level configuration struct for lastmod.

    Attributes:
        scan: Subtree scan settings.
        output: Report rendering settings.
        logging: Logging configuration.
    """

    scan: ScanSettings = Field(default_factory=ScanSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


__all__ = [
    "LastmodBaseModel",
    "ScanSettings",
    "OutputSettings",
    "LoggingSettings",
    "LastmodConfig",
]
