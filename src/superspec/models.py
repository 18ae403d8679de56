"""Pydantic models for SuperSpec project configuration data."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

FRONTEND_PROVIDER_VALUES = ("gemini", "codex", "none")
FrontendProvider = Literal["gemini", "codex", "none"]

BACKEND_PROVIDER_VALUES = ("codex", "gemini", "none")
BackendProvider = Literal["codex", "gemini", "none"]

GEMINI_MODEL = "gemini-3-pro-preview"
CODEX_MODEL = "gpt-5.2-codex"

PROVIDER_MODELS: dict[str, str] = {
    "gemini": GEMINI_MODEL,
    "codex": CODEX_MODEL,
}


class FrontendReview(BaseModel):
    """Reviewer used for frontend tasks (UI, components, styling).

    Example:
        >>> FrontendReview().model
        'gemini-3-pro-preview'
    """

    provider: FrontendProvider = "gemini"
    model: str = GEMINI_MODEL


class BackendReview(BaseModel):
    """Reviewer used for backend tasks (API, logic, data).

    Example:
        >>> BackendReview().provider
        'codex'
    """

    provider: BackendProvider = "codex"
    model: str = CODEX_MODEL


ReviewTarget = FrontendReview | BackendReview


class ReviewConfig(BaseModel):
    """External AI review settings.

    Attributes:
        enabled: Master switch for external review.
        frontend: Frontend reviewer provider and model.
        backend: Backend reviewer provider and model.

    Example:
        >>> ReviewConfig().enabled
        False
    """

    enabled: bool = False
    frontend: FrontendReview = Field(default_factory=FrontendReview)
    backend: BackendReview = Field(default_factory=BackendReview)

    @field_validator("frontend", "backend", mode="before")
    @classmethod
    def default_missing_target(cls, value: object) -> object:
        if value is None:
            return {}
        return value


class ProjectSection(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def normalize_name(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ProjectConfig(BaseModel):
    """The full ``superspec/project.yaml`` document.

    ``workflow``, ``git`` and ``test`` are free-form mappings; ``review`` is
    back-filled with defaults when older documents omit it.

    Example:
        >>> ProjectConfig.model_validate({"version": 1}).review.backend.model
        'gpt-5.2-codex'
    """

    model_config = ConfigDict(extra="allow")

    version: int = 1
    project: ProjectSection = Field(default_factory=ProjectSection)
    workflow: dict[str, Any] = Field(default_factory=dict)
    git: dict[str, Any] = Field(default_factory=dict)
    test: dict[str, Any] = Field(default_factory=dict)
    review: ReviewConfig = Field(default_factory=ReviewConfig)

    @field_validator("project", "workflow", "git", "test", "review", mode="before")
    @classmethod
    def default_missing_section(cls, value: object) -> object:
        if value is None:
            return {}
        return value

    @field_validator("workflow", "git", "test", mode="before")
    @classmethod
    def stringify_group_keys(cls, value: object) -> object:
        if isinstance(value, dict):
            return {str(key): item for key, item in value.items()}
        return value


def apply_provider(target: ReviewTarget, provider: str) -> ReviewTarget:
    """Return ``target`` switched to ``provider``.

    Known providers pin their canonical model; ``none`` keeps the previous
    model unchanged.

    Example:
        >>> apply_provider(BackendReview(), "gemini").model
        'gemini-3-pro-preview'
        >>> apply_provider(BackendReview(model="custom"), "none").model
        'custom'
    """
    update: dict[str, str] = {"provider": provider}
    model = PROVIDER_MODELS.get(provider)
    if model is not None:
        update["model"] = model
    return target.model_copy(update=update)
