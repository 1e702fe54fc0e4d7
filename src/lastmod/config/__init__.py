"""Configuration management for lastmod."""

from __future__ import annotations

from typing import Any, Mapping

from lastmod.errors import ConfigError

from .models import LastmodConfig, LoggingSettings, OutputSettings, ScanSettings
from .resolver import resolve_with_precedence


def load_config(cli_overrides: Mapping[str, Any] | None = None) -> LastmodConfig:
    """Return the effective configuration for one invocation.

    Only built-in defaults and command-line values are consulted; no
    configuration file or environment variable is read.

    Raises:
        ConfigError: If an override fails validation.
    """
    return resolve_with_precedence(defaults=LastmodConfig(), cli_overrides=cli_overrides)


__all__ = [
    "ConfigError",
    "LastmodConfig",
    "LoggingSettings",
    "OutputSettings",
    "ScanSettings",
    "load_config",
    "resolve_with_precedence",
]
