"""Read and write ``superspec/project.yaml``.

Loading parses the YAML document and validates it with the Pydantic models in
:mod:`superspec.models`. Saving does not dump the model generically: it
renders a fixed, commented layout so the file stays readable for people who
edit it by hand.

Example:
    >>> from superspec.models import ProjectConfig
    >>> text = render_project_config(ProjectConfig())
    >>> "  command: npm test" in text
    True
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from . import log, paths
from .errors import ConfigReadError, ConfigWriteError
from .models import ProjectConfig

WORKFLOW_DEFAULTS: dict[str, Any] = {
    "require_design": True,
    "require_validation": True,
    "strict_mode": False,
}
GIT_DEFAULTS: dict[str, Any] = {
    "worktree_dir": ".worktrees",
    "branch_prefix": "feature/",
}
TEST_DEFAULTS: dict[str, Any] = {
    "command": "npm test",
    "coverage": False,
}

_INIT_HINT = "run 'superspec init' to regenerate the project config"


def format_scalar(value: object) -> str:
    """Format a value as a single-line YAML scalar.

    Example:
        >>> format_scalar(True)
        'true'
        >>> format_scalar("feature/")
        'feature/'
        >>> format_scalar("yes")
        "'yes'"
    """
    text = _dump_scalar(value)
    if "\n" in text:
        # Multi-line scalars must stay on one line inside the nested layout.
        text = _dump_scalar(value, style='"')
    if "\n" in text:
        # Tagged values such as !!binary only have a block form.
        text = format_scalar(repr(value))
    return text


def _dump_scalar(value: object, style: str | None = None) -> str:
    text = yaml.safe_dump(
        value,
        default_flow_style=True,
        default_style=style,
        allow_unicode=True,
        width=1_000_000,
    )
    return text.removesuffix("\n").removesuffix("\n...")


def _group_lines(group: Mapping[str, Any], defaults: Mapping[str, Any]) -> list[str]:
    lines = []
    for key, default in defaults.items():
        value = group.get(key)
        lines.append(f"  {key}: {format_scalar(default if value is None else value)}")
    for key, value in group.items():
        if key in defaults:
            continue
        lines.append(f"  {format_scalar(str(key))}: {format_scalar(value)}")
    return lines


def render_project_config(config: ProjectConfig) -> str:
    """Render the config using the fixed, commented project layout."""
    review = config.review
    enabled = format_scalar(review.enabled)
    frontend_provider = format_scalar(review.frontend.provider)
    backend_provider = format_scalar(review.backend.provider)
    sections = [
        "# SuperSpec Project Configuration",
        f"version: {format_scalar(config.version)}",
        "",
        "# Project settings",
        "project:",
        f"  name: {format_scalar(config.project.name)}",
        "",
        "# Workflow settings",
        "workflow:",
        *_group_lines(config.workflow, WORKFLOW_DEFAULTS),
        "",
        "# Git settings",
        "git:",
        *_group_lines(config.git, GIT_DEFAULTS),
        "",
        "# Test settings",
        "test:",
        *_group_lines(config.test, TEST_DEFAULTS),
        "",
        "# External AI Review settings",
        "# Enable to have external AI (Codex/Gemini) review your code"
        " after implementation",
        "review:",
        f"  {'enabled: ' + enabled:<35}# Master switch for external AI review",
        "",
        "  # Frontend task review (UI, components, styling)",
        "  frontend:",
        f"    {'provider: ' + frontend_provider:<33}# gemini | codex | none",
        f"    model: {format_scalar(review.frontend.model)}",
        "",
        "  # Backend task review (API, logic, data)",
        "  backend:",
        f"    {'provider: ' + backend_provider:<33}# codex | gemini | none",
        f"    model: {format_scalar(review.backend.model)}",
    ]
    return "\n".join(sections) + "\n"


def load_project_config(project_root: Path) -> ProjectConfig:
    """Load and validate the project config under ``project_root``.

    Args:
        project_root: Directory that contains ``superspec/project.yaml``.

    Returns:
        Parsed config with ``review`` back-filled when absent.

    Raises:
        ConfigReadError: The file is missing, unreadable, or invalid.
    """
    path = paths.project_config_path(project_root)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigReadError(f"invalid project config at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigReadError(
            f"failed to read project config at {path}: {exc}",
            recovery_hint=_INIT_HINT,
        ) from exc
    try:
        payload = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigReadError(f"invalid YAML in project config at {path}:\n{exc}") from exc
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ConfigReadError(
            f"invalid project config at {path}: expected a mapping at the top level"
        )
    try:
        config = ProjectConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigReadError(f"invalid project config at {path}:\n{exc}") from exc
    if payload.get("review") is None:
        log.debug("project config has no review section; using defaults")
    log.debug(f"loaded project config from {path}")
    return config


def write_project_config(project_root: Path, config: ProjectConfig) -> None:
    """Write ``config`` to ``superspec/project.yaml`` under ``project_root``.

    Raises:
        ConfigWriteError: The file could not be written.
    """
    path = paths.project_config_path(project_root)
    text = render_project_config(config)
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ConfigWriteError(f"failed to write project config at {path}: {exc}") from exc
    log.debug(f"saved project config to {path}")
