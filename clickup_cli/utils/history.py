"""Command history for the interactive shell."""

from __future__ import annotations

from pathlib import Path

from prompt_toolkit.history import FileHistory, History, InMemoryHistory


class CommandHistory:
    """Shell history, persisted next to the credential file when a path is given."""

    def __init__(self, history_file: Path | None = None):
        self.history_file = history_file

        if history_file:
            history_file.parent.mkdir(parents=True, exist_ok=True)
            self._history: History = FileHistory(str(history_file))
        else:
            self._history = InMemoryHistory()

    @property
    def history(self) -> History:
        return self._history

    def add(self, command: str) -> None:
        # Never keep a pasted token in the history file
        if command.strip() and "--token" not in command:
            self._history.append_string(command)

    def get_recent(self, n: int = 10) -> list[str]:
        """Most recent commands, oldest first."""
        strings = list(self._history.load_history_strings())
        return list(reversed(strings[:n]))
