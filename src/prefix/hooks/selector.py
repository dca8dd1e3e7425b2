"""Action selection: which actions of a hook run, and on which files."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .models import ActionSpec, FileContext, HooksConfig

ContextSource = FileContext | Callable[[], FileContext]


@dataclass(frozen=True)
class SelectedAction:
    id: str
    spec: ActionSpec
    files: tuple[str, ...]

    @property
    def display_name(self) -> str:
        return self.spec.display_name(self.id)

    @property
    def command(self) -> str:
        return self.spec.command(self.files)


def base_files(spec: ActionSpec, context: FileContext) -> tuple[str, ...]:
    """File set named by the first placeholder found: staged, then push, then ls."""
    if "{staged_files}" in spec.run:
        return context.staged
    if "{push_files}" in spec.run:
        return context.push
    return context.ls


def applicable_files(spec: ActionSpec, context: FileContext) -> tuple[str, ...]:
    include, exclude = spec.include, spec.exclude
    return tuple(
        path
        for path in base_files(spec, context)
        if (include is None or include.matches(path))
        and (exclude is None or not exclude.matches(path))
    )


def select(hook: str, config: HooksConfig, context: ContextSource) -> list[SelectedAction]:
    """Consume *hook* from *config* and return the actions that have files to act on.

    *context* may be a FileContext or a zero-argument callable producing one;
    the callable is only invoked when the hook has actions.
    """
    actions = config.take(hook)
    if not actions:
        return []
    if callable(context):
        context = context()

    selected = []
    for action_id, spec in actions.items():
        files = applicable_files(spec, context)
        if files:
            selected.append(SelectedAction(action_id, spec, files))
    return selected
