"""Command completion for the interactive shell."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

# Command groups with descriptions
COMMANDS = {
    "auth": "Log in, log out, token status",
    "user": "Show the authenticated user",
    "task": "Task operations",
    "list": "Tasks in a list",
    "workspace": "Workspaces and their spaces",
    "space": "Lists in a space",
    "help": "Show help",
    "history": "Show recent commands",
    "clear": "Clear the screen",
    "quit": "Exit the shell",
    "exit": "Exit the shell",
}

SUBCOMMANDS = {
    "auth": ["login", "logout", "status"],
    "user": ["me"],
    "task": ["get", "create", "update", "complete", "delete", "search"],
    "list": ["tasks"],
    "workspace": ["list", "spaces", "use"],
    "space": ["lists", "use"],
    "help": ["auth", "user", "task", "list", "workspace", "space"],
}

SUBCOMMAND_OPTIONS = {
    ("auth", "login"): ["--token"],
    ("auth", "logout"): ["--all"],
    ("user", "me"): ["--json"],
    ("task", "get"): ["--json"],
    ("task", "create"): ["--name", "--description", "--priority", "--status", "--json"],
    ("task", "update"): ["--name", "--description", "--priority", "--status", "--json"],
    ("task", "complete"): ["--json"],
    ("task", "delete"): ["--force"],
    ("task", "search"): ["--space", "--project", "--list", "--status", "--assignee", "--json"],
    ("list", "tasks"): ["--archived", "--closed", "--page", "--status", "--json"],
    ("workspace", "list"): ["--json"],
    ("workspace", "spaces"): ["--json"],
    ("space", "lists"): ["--archived", "--json"],
}

OPTION_META = {
    "--token": "access token",
    "--all": "also forget defaults",
    "--json": "JSON output",
    "--name": "task name",
    "--description": "task description",
    "--priority": "1 urgent .. 4 low",
    "--status": "status name",
    "--force": "skip confirmation",
    "--space": "space ID (repeatable)",
    "--project": "folder ID (repeatable)",
    "--list": "list ID (repeatable)",
    "--assignee": "user ID (repeatable)",
    "--archived": "include archived",
    "--closed": "include closed tasks",
    "--page": "page number",
}


class CommandCompleter(Completer):
    """Completer for command groups, subcommands and options."""

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        words = text.split()
        completing_new_word = not words or text.endswith(" ")
        current = "" if completing_new_word else words[-1].lower()
        position = len(words) if completing_new_word else len(words) - 1

        if position == 0:
            for cmd, desc in COMMANDS.items():
                if cmd.startswith(current):
                    yield Completion(cmd, start_position=-len(current), display_meta=desc)
            return

        group = words[0].lower()
        if position == 1:
            for sub in SUBCOMMANDS.get(group, []):
                if sub.startswith(current):
                    yield Completion(sub, start_position=-len(current))
            return

        options = SUBCOMMAND_OPTIONS.get((group, words[1].lower()), [])
        if current and not current.startswith("-"):
            return
        for opt in options:
            if opt.startswith(current):
                yield Completion(
                    opt,
                    start_position=-len(current),
                    display_meta=OPTION_META.get(opt, ""),
                )
