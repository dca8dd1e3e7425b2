"""Tests for config: settings priority, env toggles, config path resolution."""

import os
from pathlib import Path
from unittest.mock import patch

from prefix.core.config import CONFIG_FILE_NAME, Settings, load_settings


class TestSettingsDefaults:
    def test_not_skipped(self):
        assert Settings().skip is False

    def test_default_config_path(self, tmp_path):
        assert Settings().resolve_config_path(tmp_path) == tmp_path / CONFIG_FILE_NAME

    def test_relative_override_resolves_against_cwd(self, tmp_path):
        s = Settings(cwd=tmp_path, config_path=Path("conf/hooks.yml"))
        assert s.resolve_config_path(Path("/repo")) == tmp_path / "conf" / "hooks.yml"

    def test_absolute_override(self, tmp_path):
        s = Settings(config_path=tmp_path / "hooks.yml")
        assert s.resolve_config_path(Path("/repo")) == tmp_path / "hooks.yml"


class TestLoadSettings:
    def test_skip_env_presence(self):
        with patch.dict(os.environ, {"PREFIX_SKIP": ""}):
            assert load_settings().skip is True

    def test_skip_env_absent(self):
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("PREFIX_SKIP", None)
            assert load_settings().skip is False

    def test_config_env(self):
        with patch.dict(os.environ, {"PREFIX_CONFIG": "/etc/hooks.yml"}):
            assert load_settings().config_path == Path("/etc/hooks.yml")

    def test_cli_overrides_env(self):
        with patch.dict(os.environ, {"PREFIX_CONFIG": "/etc/hooks.yml"}):
            s = load_settings(config_path="mine.yml")
        assert s.config_path == Path("mine.yml")

    def test_cwd_and_verbose(self, tmp_path):
        s = load_settings(verbose=True, cwd=tmp_path)
        assert s.verbose is True
        assert s.cwd == tmp_path
