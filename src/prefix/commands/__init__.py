"""Commands: config scaffolding and git hook script installation."""

from .install import InstallReport, hook_script, install_hooks, uninstall_hooks
from .scaffold import SAMPLE_CONFIG, init_project

__all__ = [
    "SAMPLE_CONFIG",
    "InstallReport",
    "hook_script",
    "init_project",
    "install_hooks",
    "uninstall_hooks",
]
