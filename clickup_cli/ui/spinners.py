"""Spinner shown while a request is in flight."""

from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager

from clickup_cli.ui.console import console

SPINNER_STYLES = {
    "default": "dots",
    "loading": "dots12",
    "saving": "arc",
}


@contextmanager
def create_spinner(message: str, style: str = "default") -> Generator[None, None, None]:
    """Context manager for showing a spinner during an operation.

    The spinner is transient and is not drawn when stdout is not a terminal,
    so piped `--json` output stays clean.
    """
    if not console.is_terminal:
        yield
        return

    with console.status(
        f"[primary]{message}[/primary]",
        spinner=SPINNER_STYLES.get(style, "dots"),
        spinner_style="primary",
    ):
        yield
