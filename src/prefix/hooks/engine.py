"""Hook execution engine: run_hook, run_action, ActionResult, RunOutcome."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path
from typing import IO

from prefix.core.utils import decode_output

from .errors import SpawnError
from .models import STDIN_HOOKS, ActionSpec, HooksConfig
from .selector import ContextSource, SelectedAction, select

GIT_ARGS_ENV = "PREFIX_GIT_ARGS"
GIT_STDIN_ENV = "PREFIX_GIT_STDIN"


@dataclass
class ActionResult:
    """Outcome of one dispatched action."""

    id: str
    spec: ActionSpec
    files: tuple[str, ...] = ()
    returncode: int | None = None  # negative when killed by a signal
    stdout: bytes = b""
    stderr: bytes = b""
    elapsed: timedelta = field(default_factory=timedelta)
    error: SpawnError | None = None

    @property
    def display_name(self) -> str:
        return self.spec.display_name(self.id)

    @property
    def errored(self) -> bool:
        return self.error is not None

    @property
    def failed(self) -> bool:
        return self.error is None and self.returncode != 0


@dataclass
class RunOutcome:
    """Everything a hook run produced, results in selection order."""

    hook: str
    state: str = "reported"  # "skipped" | "empty" | "reported"
    results: list[ActionResult] = field(default_factory=list)
    elapsed: timedelta = field(default_factory=timedelta)

    @property
    def has_errors(self) -> bool:
        return any(r.failed or r.errored for r in self.results)


def child_env(
    hook: str,
    args: Sequence[str] = (),
    stdin: IO | None = None,
    base: Mapping[str, str] | None = None,
) -> dict[str, str]:
    """Environment for every action of a run.

    Stdin is drained here, once, for hooks git feeds on stdin.
    """
    env = dict(os.environ if base is None else base)
    if args:
        env[GIT_ARGS_ENV] = " ".join(args)
    if hook in STDIN_HOOKS:
        data = (stdin or sys.stdin.buffer).read()
        env[GIT_STDIN_ENV] = data if isinstance(data, str) else decode_output(data)
    return env


def run_action(
    action: SelectedAction,
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> ActionResult:
    """Run one action's command through the shell and capture its output."""
    start = time.monotonic()
    try:
        proc = subprocess.run(
            action.command,
            shell=True,
            capture_output=True,
            env=env,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
        )
    except (OSError, ValueError) as e:
        # ValueError: NUL byte in the command or environment
        return ActionResult(
            id=action.id,
            spec=action.spec,
            files=action.files,
            elapsed=timedelta(seconds=time.monotonic() - start),
            error=SpawnError(str(e)),
        )
    return ActionResult(
        id=action.id,
        spec=action.spec,
        files=action.files,
        returncode=proc.returncode,
        stdout=proc.stdout,
        stderr=proc.stderr,
        elapsed=timedelta(seconds=time.monotonic() - start),
    )


def dispatch(
    actions: Sequence[SelectedAction],
    env: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> list[ActionResult]:
    """Run all *actions* concurrently and wait for every one of them."""
    if not actions:
        return []
    with ThreadPoolExecutor(max_workers=len(actions)) as pool:
        futures = [pool.submit(run_action, action, env, cwd) for action in actions]
    return [f.result() for f in futures]


def run_hook(
    hook: str,
    config: HooksConfig,
    *,
    context: ContextSource,
    args: Sequence[str] = (),
    stdin: IO | None = None,
    skip: bool = False,
    cwd: Path | None = None,
    on_dispatch: Callable[[list[SelectedAction]], None] | None = None,
) -> RunOutcome:
    """Run every applicable action of *hook*. Returns the collected outcome.

    ConfigError and ContextError propagate; per-action spawn failures are
    returned as results.
    """
    start = time.monotonic()
    if skip:
        return RunOutcome(hook=hook, state="skipped")

    env = child_env(hook, args, stdin)
    selected = select(hook, config, context)
    if not selected:
        return RunOutcome(
            hook=hook, state="empty", elapsed=timedelta(seconds=time.monotonic() - start)
        )

    if on_dispatch is not None:
        on_dispatch(selected)
    results = dispatch(selected, env, cwd)
    return RunOutcome(
        hook=hook, results=results, elapsed=timedelta(seconds=time.monotonic() - start)
    )
