"""Failure contracts for SuperSpec commands.

Operations raise SuperSpecError subclasses on expected runtime failures.
Programmer bugs raise normal exceptions. The CLI catches SuperSpecError,
prints the message and exits non-zero.
"""

from __future__ import annotations

from typing import Literal

SuperSpecErrorCode = Literal[
    "project_not_initialized",
    "config_read_failed",
    "config_write_failed",
]


class SuperSpecError(Exception):
    """Expected failure surfaced to the user.

    Use ``raise ConfigReadError(...) from exc`` to chain the causing
    exception; it is available as ``__cause__``.
    """

    def __init__(
        self,
        code: SuperSpecErrorCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.recovery_hint = recovery_hint


class ProjectNotInitializedError(SuperSpecError):
    """No ``superspec/project.yaml`` was found above the start directory."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("project_not_initialized", message, recovery_hint=recovery_hint)


class ConfigReadError(SuperSpecError):
    """Project config is missing, unreadable, or invalid."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("config_read_failed", message, recovery_hint=recovery_hint)


class ConfigWriteError(SuperSpecError):
    """Project config could not be written."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("config_write_failed", message, recovery_hint=recovery_hint)
