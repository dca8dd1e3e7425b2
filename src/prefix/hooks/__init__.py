"""Hooks: config model, action selection and concurrent execution."""

from .engine import ActionResult, RunOutcome, child_env, dispatch, run_action, run_hook
from .errors import ConfigError, ConfigErrorKind, ContextError, PrefixError, SpawnError
from .matcher import Pattern, PatternError, compile_pattern, matches
from .models import HOOKS, NOVERIFY_HOOKS, STDIN_HOOKS, ActionSpec, FileContext, HooksConfig
from .parser import load_config, normalize, parse_action_def, parse_config
from .selector import SelectedAction, applicable_files, select

__all__ = [
    "HOOKS",
    "NOVERIFY_HOOKS",
    "STDIN_HOOKS",
    "ActionResult",
    "ActionSpec",
    "ConfigError",
    "ConfigErrorKind",
    "ContextError",
    "FileContext",
    "HooksConfig",
    "Pattern",
    "PatternError",
    "PrefixError",
    "RunOutcome",
    "SelectedAction",
    "SpawnError",
    "applicable_files",
    "child_env",
    "compile_pattern",
    "dispatch",
    "load_config",
    "matches",
    "normalize",
    "parse_action_def",
    "parse_config",
    "run_action",
    "run_hook",
    "select",
]
