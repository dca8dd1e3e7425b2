"""Configuration: env, paths, run settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

CONFIG_FILE_NAME = "prefix.yml"

# Presence of the variable skips every action, whatever its value.
SKIP_ENV = "PREFIX_SKIP"
CONFIG_ENV = "PREFIX_CONFIG"


@dataclass
class Settings:
    cwd: Path = field(default_factory=Path.cwd)
    config_path: Path | None = None  # explicit override; None = <top level>/prefix.yml
    skip: bool = False
    verbose: bool = False

    def resolve_config_path(self, top_level: Path) -> Path:
        if self.config_path is None:
            return top_level / CONFIG_FILE_NAME
        if self.config_path.is_absolute():
            return self.config_path
        return self.cwd / self.config_path


def load_settings(
    config_path: Path | str | None = None,
    verbose: bool = False,
    cwd: Path | None = None,
) -> Settings:
    """Load settings with priority: CLI args > env > .env > defaults."""
    load_dotenv()

    settings = Settings(verbose=verbose)
    if cwd is not None:
        settings.cwd = cwd

    settings.skip = SKIP_ENV in os.environ
    if env_config := os.getenv(CONFIG_ENV):
        settings.config_path = Path(env_config)

    if config_path:
        settings.config_path = Path(config_path)

    return settings
