"""Error types: PrefixError, ConfigError, ContextError, SpawnError."""

from __future__ import annotations

from enum import Enum


class PrefixError(Exception):
    """Base class for errors raised by prefix."""


class ConfigErrorKind(str, Enum):
    MALFORMED = "malformed"
    INVALID_PATTERN = "invalid-pattern"
    UNREADABLE = "unreadable"


class ConfigError(PrefixError):
    """The action config could not be loaded. Fatal: no action runs."""

    def __init__(
        self,
        kind: ConfigErrorKind,
        message: str,
        *,
        hook: str | None = None,
        action: str | None = None,
        field: str | None = None,
    ):
        self.kind = kind
        self.hook = hook
        self.action = action
        self.field = field
        location = ".".join(part for part in (hook, action, field) if part)
        super().__init__(f"{location}: {message}" if location else message)


class ContextError(PrefixError):
    """The file context could not be queried from git."""


class SpawnError(PrefixError):
    """An action's command could not be started."""
