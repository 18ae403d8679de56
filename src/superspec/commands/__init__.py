"""Command implementations exposed by the SuperSpec CLI."""

from .setting import run_setting

__all__ = ["run_setting"]
