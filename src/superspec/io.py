"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence

import questionary


@dataclass(frozen=True)
class MenuChoice:
    """One option of a single-choice prompt.

    Attributes:
        name: Label shown to the user.
        value: Value returned when the option is picked.
        description: Optional help text.
        disabled: Reason the option cannot be picked, or ``None``.
    """

    name: str
    value: str
    description: str | None = None
    disabled: str | None = None


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def say(message: str = "") -> None:
    """Print a normal message to stdout.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def warn(message: str) -> None:
    """Print a warning message to stderr."""
    print(f"warning: {message}", file=sys.stderr)


def die(message: str, code: int = 1) -> None:
    """Print an error message and exit.

    Args:
        message: Error message to display.
        code: Exit code to use.

    Returns:
        None. Exits the process via ``sys.exit``.
    """
    print(f"error: {message}", file=sys.stderr)
    sys.exit(code)


def _select_by_number(
    text: str, choices: Sequence[MenuChoice], default: str | None
) -> str:
    say(text)
    default_index: int | None = None
    for index, choice in enumerate(choices, start=1):
        label = f"  {index}) {choice.name}"
        if choice.disabled:
            label += f" ({choice.disabled})"
        elif choice.description:
            label += f" - {choice.description}"
        say(label)
        if choice.value == default:
            default_index = index
    suffix = f" [{default_index}]" if default_index is not None else ""
    while True:
        raw = input(f"Choice{suffix}: ").strip()
        if raw == "" and default_index is not None:
            raw = str(default_index)
        if raw.isdigit() and 1 <= int(raw) <= len(choices):
            choice = choices[int(raw) - 1]
            if choice.disabled:
                warn(choice.disabled)
                continue
            return choice.value
        for choice in choices:
            if raw == choice.value and not choice.disabled:
                return choice.value


def select(text: str, choices: Sequence[MenuChoice], default: str | None = None) -> str:
    """Prompt for a single choice.

    Args:
        text: Prompt message.
        choices: Options to offer; disabled options cannot be picked.
        default: Value of the option highlighted initially.

    Returns:
        The ``value`` of the picked option.
    """
    if _use_questionary():
        question = questionary.select(
            text,
            choices=[
                questionary.Choice(
                    title=choice.name,
                    value=choice.value,
                    description=choice.description,
                    disabled=choice.disabled,
                )
                for choice in choices
            ],
            default=default,
        )
        value = question.ask()
        if value is None:
            die("aborted")
        return str(value)
    return _select_by_number(text, choices, default)


def confirm(text: str, default: bool = False) -> bool:
    """Prompt for a yes/no confirmation.

    Args:
        text: Prompt label shown to the user.
        default: Default answer when the user presses enter.

    Returns:
        ``True`` when the user confirms.
    """
    if _use_questionary():
        response = questionary.confirm(text, default=default).ask()
        if response is None:
            die("aborted")
        return bool(response)
    suffix = "[Y/n]" if default else "[y/N]"
    response = input(f"{text} {suffix}: ").strip().lower()
    if response == "":
        return default
    return response in {"y", "yes"}


class TerminalPrompter:
    """Prompter backed by the interactive terminal."""

    def select(
        self, message: str, choices: Sequence[MenuChoice], default: str | None = None
    ) -> str:
        return select(message, choices, default=default)

    def confirm(self, message: str, default: bool = False) -> bool:
        return confirm(message, default=default)
