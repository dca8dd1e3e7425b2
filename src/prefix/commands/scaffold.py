"""Project scaffolding: `prefix init` and the sample config."""

from __future__ import annotations

from pathlib import Path

from prefix.core.config import CONFIG_FILE_NAME

SAMPLE_CONFIG = """\
# prefix - a git hook manager
#
# git hook names are provided as top level yaml
# keys which contain named actions to run
#
# run `prefix install` to install these actions as git hooks
# you can manually invoke them by providing the name of the hook:
# `prefix run pre-commit`
pre-commit:
  # shorthand notation is just
  # the name of the action followed by a command to run
  test: echo "it works"

  # a more configurable notation is as follows
  #lint:
  #  name: lint python
  #  include: "*.py"
  #  exclude: "tests/**"
  #  run: |
  #    flake8 {staged_files}
"""


def init_project(top_level: Path) -> list[str]:
    """Write a sample prefix.yml unless one exists. Returns list of created paths."""
    created: list[str] = []
    config_path = top_level / CONFIG_FILE_NAME
    if not config_path.exists():
        config_path.write_text(SAMPLE_CONFIG)
        created.append(str(config_path.relative_to(top_level)))
    return created
