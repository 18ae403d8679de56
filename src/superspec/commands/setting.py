"""Implementation for the ``superspec setting`` command."""

from __future__ import annotations

from pathlib import Path

from .. import config, paths, ui
from ..errors import ProjectNotInitializedError
from ..io import TerminalPrompter
from ..models import ProjectConfig
from ..settings import Prompter, SettingsController


def run_setting(args: object, *, prompter: Prompter | None = None) -> ProjectConfig:
    """Edit the review settings of the enclosing SuperSpec project."""
    directory = getattr(args, "directory", None)
    start = Path(directory) if directory else Path.cwd()
    project_root = paths.find_project_root(start)
    if project_root is None:
        raise ProjectNotInitializedError(
            "SuperSpec not initialized in this directory.",
            recovery_hint="Run `superspec init` first.",
        )

    project_config = config.load_project_config(project_root)

    ui.show_banner()
    controller = SettingsController(
        project_root,
        project_config,
        prompter or TerminalPrompter(),
        save=config.write_project_config,
    )
    return controller.run()
