"""Path helpers for locating the SuperSpec project root and config file."""

from __future__ import annotations

from pathlib import Path

from . import log

SUPERSPEC_DIRNAME = "superspec"
PROJECT_CONFIG_FILENAME = "project.yaml"


def superspec_dir(project_root: Path) -> Path:
    """Return the ``superspec`` directory for a project root.

    Example:
        >>> superspec_dir(Path("/repo")).name == SUPERSPEC_DIRNAME
        True
    """
    return project_root / SUPERSPEC_DIRNAME


def project_config_path(project_root: Path) -> Path:
    """Return the path to the project config (the root marker file).

    Args:
        project_root: Project root directory.

    Returns:
        Path to ``<root>/superspec/project.yaml``.

    Example:
        >>> project_config_path(Path("/repo")).as_posix()
        '/repo/superspec/project.yaml'
    """
    return superspec_dir(project_root) / PROJECT_CONFIG_FILENAME


def project_config_display_path() -> str:
    """Return the config path relative to a project root, for messages."""
    return f"{SUPERSPEC_DIRNAME}/{PROJECT_CONFIG_FILENAME}"


def find_project_root(start: Path | None = None) -> Path | None:
    """Find the nearest ancestor that contains ``superspec/project.yaml``.

    The start directory is resolved first, so ``..`` segments and symlinks
    never stall the walk; every real ancestor up to and including the
    filesystem root is checked exactly once.

    Args:
        start: Directory to start from. Defaults to the current directory.

    Returns:
        The project root, or ``None`` when no ancestor has the marker file.
    """
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        log.trace(f"checking {candidate} for {project_config_display_path()}")
        if project_config_path(candidate).exists():
            return candidate
    return None
