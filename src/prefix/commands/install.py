"""Git hook scripts: install and uninstall."""

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path

from prefix.hooks.models import HOOKS

_SCRIPT = """\
#!/bin/sh
hook_name=$(basename "$0")
exec "{python}" -m prefix run "$hook_name" -- "$@"
"""


def hook_script(python: str | None = None) -> str:
    return _SCRIPT.format(python=python or sys.executable)


@dataclass
class InstallReport:
    created: list[Path] = field(default_factory=list)
    backed_up: list[Path] = field(default_factory=list)


def _write_executable(path: Path, content: str) -> None:
    path.write_text(content)
    if os.name == "posix":
        path.chmod(0o755)


def install_hooks(hooks_dir: Path, force: bool = False, script: str | None = None) -> InstallReport:
    """Write a trigger script for every git hook into *hooks_dir*.

    An existing script with different content is copied to ``<hook>.bak``
    first, unless *force* is set.
    """
    script = script or hook_script()
    report = InstallReport()
    hooks_dir.mkdir(parents=True, exist_ok=True)
    for name in HOOKS:
        hook = hooks_dir / name
        if not force and hook.exists() and hook.read_text(errors="replace") != script:
            backup = hook.with_name(f"{name}.bak")
            shutil.copy2(hook, backup)
            report.backed_up.append(backup)
        _write_executable(hook, script)
        report.created.append(hook)
    return report


def uninstall_hooks(hooks_dir: Path) -> list[Path]:
    """Remove installed trigger scripts. Returns the removed paths."""
    removed: list[Path] = []
    if not hooks_dir.is_dir():
        return removed
    for name in HOOKS:
        hook = hooks_dir / name
        if hook.exists():
            hook.unlink()
            removed.append(hook)
    return removed
