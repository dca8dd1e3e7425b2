"""Git queries: repository locator and file context."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from prefix.hooks.errors import ContextError
from prefix.hooks.models import FileContext


@dataclass(frozen=True)
class GitDir:
    top_level: Path
    git_dir: Path  # common dir, shared by worktrees

    @property
    def hooks_dir(self) -> Path:
        return self.git_dir / "hooks"


def _git(args: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess:
    return subprocess.run(["git", *args], capture_output=True, text=True, cwd=cwd)


def git_dir(cwd: Path | None = None) -> GitDir | None:
    """Return the repository's top level and common git dir, or None outside a repo."""
    try:
        r = _git(["rev-parse", "--show-toplevel", "--git-common-dir"], cwd=cwd)
    except OSError:
        return None
    lines = r.stdout.splitlines()
    if r.returncode != 0 or len(lines) != 2:
        return None
    top_level, common = (Path(line) for line in lines)
    base = cwd or Path.cwd()
    return GitDir(top_level=top_level, git_dir=(base / common).resolve())


def _files(args: list[str], cwd: Path | None, fallback: list[str] | None = None) -> tuple[str, ...]:
    try:
        r = _git(args, cwd=cwd)
        if r.returncode != 0 and fallback is not None:
            r = _git(fallback, cwd=cwd)
            if r.returncode != 0:
                return ()
    except OSError as e:
        raise ContextError(f"cannot run git: {e}") from e
    if r.returncode != 0:
        raise ContextError(f"git {' '.join(args)} failed: {r.stderr.strip()}")

    base = cwd or Path.cwd()
    seen: dict[str, None] = {}
    for line in r.stdout.splitlines():
        if line and line not in seen and (base / line).is_file():
            seen[line] = None
    return tuple(seen)


def file_context(cwd: Path | None = None) -> FileContext:
    """Tracked, staged and to-be-pushed files that still exist on disk.

    Paths are relative to *cwd*, which should be the repository top level.
    """
    diff = ["diff", "--diff-filter=ACMR", "--name-only"]
    return FileContext(
        ls=_files(["ls-files", "--cached"], cwd),
        staged=_files([*diff, "--cached"], cwd),
        push=_files([*diff, "HEAD", "@{push}"], cwd, fallback=[*diff, "HEAD", "master"]),
    )
