"""Configuration resolution helpers."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from lastmod.errors import ConfigError

from .models import LastmodConfig


def resolve_with_precedence(
    *,
    defaults: LastmodConfig,
    cli_overrides: Mapping[str, Any] | None = None,
) -> LastmodConfig:
    """Apply dotted-key command-line overrides to the defaults and validate them.

    Keys name a section and a field, such as ``"scan.max_depth"``. Values set
    to ``None`` are ignored so that unset command-line options keep their
    defaults.
    """
    merged = defaults.model_dump(mode="python")
    for key, value in (cli_overrides or {}).items():
        if value is None:
            continue
        _assign(merged, key, value)

    try:
        return LastmodConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration values: {exc}") from exc


def _assign(target: dict[str, Any], key: str, value: Any) -> None:
    *sections, leaf = key.split(".")
    node = target
    for segment in sections:
        child = node.get(segment)
        if not isinstance(child, dict):
            raise ConfigError(f"Override '{key}' does not name a configuration section.")
        node = child
    node[leaf] = value


__all__ = ["resolve_with_precedence"]
