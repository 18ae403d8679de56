# ruff: noqa: E402

from __future__ import annotations

import sys
from pathlib import Path
from typing import Sequence

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import superspec.paths as paths
from superspec.io import MenuChoice

LEGACY_CONFIG = """\
# SuperSpec Project Configuration
version: 1

project:
  name: demo

workflow:
  require_design: false
  require_validation: true
  strict_mode: true

git:
  worktree_dir: .trees
  branch_prefix: scott/

test:
  command: pytest
  coverage: true
"""


def write_project_yaml(root: Path, content: str = LEGACY_CONFIG) -> Path:
    path = paths.project_config_path(root)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


class ScriptedPrompter:
    """Prompter that replays a fixed list of answers and records each prompt."""

    def __init__(self, answers: Sequence[str]) -> None:
        self.answers = list(answers)
        self.calls: list[tuple[str, list[MenuChoice], str | None]] = []

    def select(
        self, message: str, choices: Sequence[MenuChoice], default: str | None = None
    ) -> str:
        self.calls.append((message, list(choices), default))
        if not self.answers:
            raise AssertionError(f"unexpected prompt: {message}")
        return self.answers.pop(0)

    def confirm(self, message: str, default: bool = False) -> bool:
        raise AssertionError(f"unexpected confirm: {message}")
