"""Tests for commands: init scaffolding, hook install / uninstall."""

import os

import yaml

from prefix.commands import SAMPLE_CONFIG, hook_script, init_project, install_hooks, uninstall_hooks
from prefix.hooks import HOOKS, parse_config


class TestInitProject:
    def test_creates_sample(self, tmp_path):
        created = init_project(tmp_path)
        assert created == ["prefix.yml"]
        assert (tmp_path / "prefix.yml").read_text() == SAMPLE_CONFIG

    def test_keeps_existing(self, tmp_path):
        (tmp_path / "prefix.yml").write_text("pre-commit: {}\n")
        assert init_project(tmp_path) == []
        assert (tmp_path / "prefix.yml").read_text() == "pre-commit: {}\n"

    def test_sample_is_valid(self):
        cfg = parse_config(SAMPLE_CONFIG)
        assert list(cfg.hooks["pre-commit"]) == ["test"]
        assert yaml.safe_load(SAMPLE_CONFIG)["pre-commit"]["test"] == 'echo "it works"'


class TestInstallHooks:
    def test_installs_every_hook(self, tmp_path):
        hooks_dir = tmp_path / "hooks"
        report = install_hooks(hooks_dir, script="#!/bin/sh\n")
        assert sorted(p.name for p in report.created) == sorted(HOOKS)
        assert (hooks_dir / "pre-commit").read_text() == "#!/bin/sh\n"
        assert os.access(hooks_dir / "pre-commit", os.X_OK)

    def test_backs_up_foreign_script(self, tmp_path):
        (tmp_path / "pre-commit").write_text("custom")
        report = install_hooks(tmp_path, script="#!/bin/sh\n")
        assert report.backed_up == [tmp_path / "pre-commit.bak"]
        assert (tmp_path / "pre-commit.bak").read_text() == "custom"

    def test_reinstall_no_backup(self, tmp_path):
        install_hooks(tmp_path, script="#!/bin/sh\n")
        report = install_hooks(tmp_path, script="#!/bin/sh\n")
        assert report.backed_up == []

    def test_force_skips_backup(self, tmp_path):
        (tmp_path / "pre-commit").write_text("custom")
        report = install_hooks(tmp_path, force=True, script="#!/bin/sh\n")
        assert report.backed_up == []
        assert not (tmp_path / "pre-commit.bak").exists()

    def test_script_runs_prefix(self):
        script = hook_script("/usr/bin/python3")
        assert script.startswith("#!/bin/sh\n")
        assert '"/usr/bin/python3" -m prefix run "$hook_name" -- "$@"' in script


class TestUninstallHooks:
    def test_removes_installed(self, tmp_path):
        install_hooks(tmp_path, script="#!/bin/sh\n")
        (tmp_path / "other").write_text("keep")
        removed = uninstall_hooks(tmp_path)
        assert len(removed) == len(HOOKS)
        assert [p.name for p in tmp_path.iterdir()] == ["other"]

    def test_missing_dir(self, tmp_path):
        assert uninstall_hooks(tmp_path / "nope") == []
