"""Hook data models: ActionSpec, HooksConfig, FileContext, hook name sets."""

from __future__ import annotations

from dataclasses import dataclass, field

from .matcher import Pattern

# Hooks git lets the user bypass with --no-verify.
NOVERIFY_HOOKS = ("commit-msg", "pre-commit", "pre-rebase", "pre-push")

# Hooks git feeds data on stdin.
STDIN_HOOKS = ("pre-push", "pre-receive", "post-receive", "post-rewrite")

HOOKS = (
    "applypatch-msg",
    "pre-applypatch",
    "post-applypatch",
    "pre-commit",
    "prepare-commit-msg",
    "commit-msg",
    "post-commit",
    "pre-rebase",
    "post-checkout",
    "post-merge",
    "pre-push",
    "pre-receive",
    "update",
    "post-receive",
    "post-update",
    "push-to-checkout",
    "pre-auto-gc",
    "post-rewrite",
    "sendemail-validate",
)

PLACEHOLDERS = ("{staged_files}", "{push_files}", "{files}")


@dataclass(frozen=True)
class ActionSpec:
    """One action: a shell command plus optional file filters."""

    run: str
    name: str | None = None
    include: Pattern | None = None
    exclude: Pattern | None = None

    def display_name(self, action_id: str) -> str:
        return self.name or action_id

    def command(self, files: list[str] | tuple[str, ...]) -> str:
        """Substitute every placeholder with the space-joined *files*."""
        joined = " ".join(files)
        cmd = self.run
        for placeholder in PLACEHOLDERS:
            cmd = cmd.replace(placeholder, joined)
        return cmd


@dataclass
class HooksConfig:
    """Actions grouped by hook name, in declaration order."""

    hooks: dict[str, dict[str, ActionSpec]] = field(default_factory=dict)

    def take(self, hook: str) -> dict[str, ActionSpec]:
        """Remove and return the actions of *hook*."""
        return self.hooks.pop(hook, None) or {}


@dataclass(frozen=True)
class FileContext:
    """File sets captured once per run: tracked, staged and to-be-pushed."""

    ls: tuple[str, ...] = ()
    staged: tuple[str, ...] = ()
    push: tuple[str, ...] = ()
