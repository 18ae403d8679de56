"""Terminal presentation helpers: banner, section headers, key/value rows."""

from __future__ import annotations

from rich.text import Text

from . import log

BANNER = r"""
  ____                        ____
 / ___| _   _ _ __   ___ _ __/ ___| _ __   ___  ___
 \___ \| | | | '_ \ / _ \ '__\___ \| '_ \ / _ \/ __|
  ___) | |_| | |_) |  __/ |   ___) | |_) |  __/ (__
 |____/ \__,_| .__/ \___|_|  |____/| .__/ \___|\___|
             |_|                   |_|
""".strip("\n")

PRIMARY = "bold cyan"
SUCCESS = "green"
MUTED = "bright_black"
HEADING = "bold white"


def show(text: Text | str = "") -> None:
    log.console().print(text)


def show_banner() -> None:
    show(Text(BANNER, style=PRIMARY))
    show()


def section_header(title: str, icon: str = "") -> Text:
    """Return a styled section header line."""
    label = f"{icon}  {title}" if icon else title
    return Text(label, style=HEADING)


def styled(message: str, style: str) -> Text:
    return Text(message, style=style)


def display_key_value(key: str, value: Text | str, *, width: int = 22) -> None:
    """Print an aligned ``key: value`` row."""
    row = Text(f"  {key + ':':<{width}} ")
    row.append_text(value if isinstance(value, Text) else Text(value))
    show(row)
