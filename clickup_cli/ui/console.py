"""Rich console instance and message helpers."""

from __future__ import annotations

import json
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from clickup_cli.ui.theme import get_theme

console = Console(theme=get_theme().to_rich_theme(), highlight=True)


def _print_message(message: str, title: str, color: str, icon: str) -> None:
    content = Text()
    content.append(message, style=color)

    console.print(Panel(
        content,
        title=f"[{color} bold]{icon} {title}[/{color} bold]",
        border_style=color,
        box=box.ROUNDED,
        padding=(0, 2),
    ))


def print_error(message: str, title: str = "Error") -> None:
    _print_message(message, title, "#FF5252", "✖")


def print_success(message: str, title: str = "Success") -> None:
    _print_message(message, title, "#00E676", "✔")


def print_warning(message: str, title: str = "Warning") -> None:
    _print_message(message, title, "#FFB347", "⚠")


def print_info(message: str, title: str = "Info") -> None:
    _print_message(message, title, "#B388FF", "ℹ")


def print_json(data: Any) -> None:
    """Print data as indented JSON, for `--json` output."""
    console.print_json(json.dumps(data, indent=2, ensure_ascii=False))
