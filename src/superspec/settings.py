"""Interactive review-settings editor.

The controller owns the loaded :class:`ProjectConfig` for the whole session.
Each loop iteration renders the current settings, asks for one menu choice,
applies it, and saves the document before rendering again.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Literal, Protocol, Sequence

from . import log, paths, ui
from .io import MenuChoice
from .models import (
    BACKEND_PROVIDER_VALUES,
    FRONTEND_PROVIDER_VALUES,
    ProjectConfig,
    apply_provider,
)

ReviewKind = Literal["frontend", "backend"]

MENU_MESSAGE = "What would you like to configure?"
ENABLE_REVIEW_FIRST = "Enable review first"

PROVIDER_VALUES: dict[ReviewKind, tuple[str, ...]] = {
    "frontend": FRONTEND_PROVIDER_VALUES,
    "backend": BACKEND_PROVIDER_VALUES,
}

SaveConfig = Callable[[Path, ProjectConfig], None]


class Prompter(Protocol):
    def select(
        self, message: str, choices: Sequence[MenuChoice], default: str | None = None
    ) -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...


class SettingsState(Enum):
    RENDERING = "rendering"
    AWAITING_MENU_CHOICE = "awaiting_menu_choice"
    AWAITING_SUB_CHOICE = "awaiting_sub_choice"
    EXITING = "exiting"


_PROVIDER_CHOICES: dict[ReviewKind, tuple[MenuChoice, ...]] = {
    "frontend": (
        MenuChoice("Gemini", "gemini", "Google Gemini (recommended for UI/UX)"),
        MenuChoice("Codex", "codex", "OpenAI Codex"),
        MenuChoice("None", "none", "Skip frontend review"),
    ),
    "backend": (
        MenuChoice("Codex", "codex", "OpenAI Codex (recommended for logic/API)"),
        MenuChoice("Gemini", "gemini", "Google Gemini"),
        MenuChoice("None", "none", "Skip backend review"),
    ),
}


def provider_choices(kind: ReviewKind) -> tuple[MenuChoice, ...]:
    return _PROVIDER_CHOICES[kind]


def menu_choices(config: ProjectConfig) -> list[MenuChoice]:
    """Build the main menu for the current review settings."""
    review = config.review
    gate = None if review.enabled else ENABLE_REVIEW_FIRST
    if review.enabled:
        toggle = MenuChoice(
            "🔴 Disable External AI Review", "toggle", "Turn off external AI code review"
        )
    else:
        toggle = MenuChoice(
            "🟢 Enable External AI Review", "toggle", "Turn on external AI code review"
        )
    return [
        toggle,
        MenuChoice(
            "🎨 Configure Frontend Review",
            "frontend",
            f"Current: {review.frontend.provider}",
            gate,
        ),
        MenuChoice(
            "⚙️  Configure Backend Review",
            "backend",
            f"Current: {review.backend.provider}",
            gate,
        ),
        MenuChoice("← Exit", "exit"),
    ]


def render_settings(config: ProjectConfig) -> None:
    """Print the current review settings."""
    review = config.review
    ui.show(ui.section_header("Current Review Settings", "⚙️"))
    ui.show()
    if review.enabled:
        status = ui.styled("✓ Enabled", ui.SUCCESS)
    else:
        status = ui.styled("✗ Disabled", ui.MUTED)
    ui.display_key_value("External AI Review", status)
    ui.show()
    if review.enabled:
        targets = (("Frontend", review.frontend), ("Backend", review.backend))
        for index, (label, target) in enumerate(targets):
            if index:
                ui.show()
            ui.show(ui.styled(f"  {label}:", ui.HEADING))
            ui.display_key_value("    Provider", ui.styled(target.provider, ui.PRIMARY))
            ui.display_key_value("    Model", ui.styled(target.model, ui.MUTED))
    ui.show()


class SettingsController:
    """Menu-driven editor for the ``review`` settings of a project.

    Args:
        project_root: Root that owns ``superspec/project.yaml``.
        config: Loaded config; the controller mutates it in place.
        prompter: Source of menu choices.
        save: Persists the config; called once per accepted mutation.
    """

    def __init__(
        self,
        project_root: Path,
        config: ProjectConfig,
        prompter: Prompter,
        *,
        save: SaveConfig,
    ) -> None:
        self.project_root = project_root
        self.config = config
        self.prompter = prompter
        self._save = save
        self.state = SettingsState.RENDERING

    def run(self) -> ProjectConfig:
        """Run the loop until the user picks ``exit``."""
        while self.state is not SettingsState.EXITING:
            self.step()
        ui.show(ui.styled(f"Settings saved to {paths.project_config_display_path()}", ui.MUTED))
        ui.show()
        return self.config

    def step(self) -> None:
        """Render once, prompt once, and apply the chosen action."""
        self.state = SettingsState.RENDERING
        render_settings(self.config)
        self.state = SettingsState.AWAITING_MENU_CHOICE
        choices = menu_choices(self.config)
        action = self.prompter.select(MENU_MESSAGE, choices)
        picked = next((choice for choice in choices if choice.value == action), None)
        if picked is None:
            log.warning(f"unknown settings action: {action}")
            return
        if picked.disabled:
            log.warning(picked.disabled)
            return
        if action == "toggle":
            self.toggle_review()
        elif action in ("frontend", "backend"):
            self.state = SettingsState.AWAITING_SUB_CHOICE
            self.configure_provider(action)
        elif action == "exit":
            self.state = SettingsState.EXITING
            return
        self.state = SettingsState.RENDERING

    def toggle_review(self) -> None:
        review = self.config.review
        review.enabled = not review.enabled
        self._persist()
        ui.show()
        if review.enabled:
            log.success("✓ External AI Review enabled")
        else:
            ui.show(ui.styled("✗ External AI Review disabled", ui.MUTED))
        ui.show()

    def configure_provider(self, kind: ReviewKind) -> None:
        review = self.config.review
        current = getattr(review, kind)
        provider = self.prompter.select(
            f"Select {kind} review provider:",
            provider_choices(kind),
            default=current.provider,
        )
        if provider not in PROVIDER_VALUES[kind]:
            log.warning(f"unknown {kind} review provider: {provider}")
            return
        setattr(review, kind, apply_provider(current, provider))
        self._persist()
        ui.show()
        log.success(f"✓ {kind.capitalize()} provider set to: {provider}")
        ui.show()

    def _persist(self) -> None:
        self._save(self.project_root, self.config)
