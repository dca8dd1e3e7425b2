"""Config parsing: parse_action_def, normalize, parse_config, load_config."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import IO, Any

import yaml

from .errors import ConfigError, ConfigErrorKind
from .matcher import PatternError, compile_pattern
from .models import ActionSpec, HooksConfig


def _pattern_field(raw: Mapping, hook: str, action_id: str, key: str):
    source = raw.get(key)
    if source is None:
        return None
    if not isinstance(source, str):
        raise ConfigError(
            ConfigErrorKind.MALFORMED,
            f"expected a pattern string, got {type(source).__name__}",
            hook=hook,
            action=action_id,
            field=key,
        )
    try:
        return compile_pattern(source)
    except PatternError as e:
        raise ConfigError(
            ConfigErrorKind.INVALID_PATTERN, str(e), hook=hook, action=action_id, field=key
        ) from e


def parse_action_def(hook: str, action_id: str, raw: Any) -> ActionSpec:
    """Normalize one action definition; a bare string is shorthand for ``run``."""
    if isinstance(raw, ActionSpec):
        return raw
    if isinstance(raw, str):
        return ActionSpec(run=raw)
    if not isinstance(raw, Mapping):
        raise ConfigError(
            ConfigErrorKind.MALFORMED,
            f"expected a command string or a mapping, got {type(raw).__name__}",
            hook=hook,
            action=action_id,
        )

    run = raw.get("run")
    if not isinstance(run, str):
        raise ConfigError(
            ConfigErrorKind.MALFORMED, "missing `run` command", hook=hook, action=action_id
        )
    name = raw.get("name")
    if name is not None and not isinstance(name, str):
        name = str(name)
    return ActionSpec(
        run=run,
        name=name,
        include=_pattern_field(raw, hook, action_id, "include"),
        exclude=_pattern_field(raw, hook, action_id, "exclude"),
    )


def normalize(raw: Mapping | HooksConfig | None) -> HooksConfig:
    """Turn a raw ``{hook: {id: definition}}`` mapping into a HooksConfig."""
    if isinstance(raw, HooksConfig):
        raw = raw.hooks
    if raw is None:
        return HooksConfig()
    if not isinstance(raw, Mapping):
        raise ConfigError(
            ConfigErrorKind.MALFORMED,
            f"expected a mapping of hook names, got {type(raw).__name__}",
        )

    cfg = HooksConfig()
    for hook, actions in raw.items():
        hook = str(hook)
        if actions is None:
            cfg.hooks[hook] = {}
            continue
        if not isinstance(actions, Mapping):
            raise ConfigError(
                ConfigErrorKind.MALFORMED,
                f"expected a mapping of actions, got {type(actions).__name__}",
                hook=hook,
            )
        cfg.hooks[hook] = {
            str(action_id): parse_action_def(hook, str(action_id), definition)
            for action_id, definition in actions.items()
        }
    return cfg


def parse_config(data: bytes | str | IO) -> HooksConfig:
    """Parse a YAML action config document."""
    try:
        raw = yaml.safe_load(data)
    except yaml.YAMLError as e:
        raise ConfigError(ConfigErrorKind.MALFORMED, f"invalid yaml: {e}") from e
    return normalize(raw)


def load_config(path: Path) -> HooksConfig:
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ConfigError(
            ConfigErrorKind.UNREADABLE, f"cannot read config {path}: {e.strerror or e}"
        ) from e
    return parse_config(data)
