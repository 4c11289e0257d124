"""Help command - display CLI help."""

from __future__ import annotations

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from clickup_cli.commands.base import BaseCommand
from clickup_cli.ui.console import console

COMMANDS = [
    {
        "name": "auth",
        "aliases": "",
        "description": "Log in, log out, show token status",
        "usage": "auth login [--token TOKEN]\nauth logout [--all]\nauth status",
    },
    {
        "name": "user",
        "aliases": "me",
        "description": "Show the authenticated user",
        "usage": "user me [--json]",
    },
    {
        "name": "task",
        "aliases": "tasks, t",
        "description": "Get, create, update, complete, delete, search tasks",
        "usage": (
            "task get <task_id> [--json]\n"
            "task create <list_id> --name NAME [--description D] [--priority 1-4] [--status S] [--json]\n"
            "task update <task_id> [--name N] [--description D] [--status S] [--priority 1-4] [--json]\n"
            "task complete <task_id>\n"
            "task delete <task_id> [--force]\n"
            "task search <query> [--space ID]... [--list ID]... [--status S]... [--assignee ID]... [--json]"
        ),
    },
    {
        "name": "list",
        "aliases": "",
        "description": "Show the tasks in a list",
        "usage": "list tasks <list_id> [-a|--archived] [-c|--closed] [-p|--page N] [-s|--status S]... [--json]",
    },
    {
        "name": "workspace",
        "aliases": "workspaces, team, ws",
        "description": "List workspaces and their spaces",
        "usage": "workspace list [--json]\nworkspace spaces [team_id] [--json]\nworkspace use <team_id>",
    },
    {
        "name": "space",
        "aliases": "spaces",
        "description": "List the lists in a space",
        "usage": "space lists [space_id] [-a|--archived] [--json]\nspace use <space_id>",
    },
    {
        "name": "help",
        "aliases": "h, ?",
        "description": "Show this help message",
        "usage": "help [command]",
    },
]


class HelpCommand(BaseCommand):
    """Display help information."""

    name = "help"
    description = "Show help information"
    usage = "help [command]"
    aliases = ["h", "?"]

    def execute(self, args: list[str]) -> bool:
        remaining = [a for a in args if not a.startswith("-")]

        if remaining:
            return self._show_command_help(remaining[0].lower())
        return self._show_general_help()

    def _show_general_help(self) -> bool:
        table = Table(
            show_header=True,
            header_style="primary",
            border_style="muted",
            padding=(0, 2),
        )
        table.add_column("Command", style="command", width=12)
        table.add_column("Aliases", style="muted", width=22)
        table.add_column("Description", style="text")

        for cmd in COMMANDS:
            table.add_row(cmd["name"], cmd["aliases"], cmd["description"])

        console.print(Panel(
            table,
            title="[primary]Available Commands[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        console.print()
        tips = Text()
        tips.append("Tips:\n", style="primary")
        tips.append("  • ", style="muted")
        tips.append("Use ", style="text")
        tips.append("help <command>", style="command")
        tips.append(" for detailed usage\n", style="text")
        tips.append("  • ", style="muted")
        tips.append("Set ", style="text")
        tips.append("CLICKUP_API_TOKEN", style="warning")
        tips.append(" or run ", style="text")
        tips.append("auth login", style="command")
        tips.append(" to authenticate\n", style="text")
        tips.append("  • ", style="muted")
        tips.append("Add ", style="text")
        tips.append("--json", style="warning")
        tips.append(" for machine-readable output", style="text")
        console.print(tips)

        return True

    def _show_command_help(self, cmd_name: str) -> bool:
        cmd = None
        for c in COMMANDS:
            aliases = [a.strip() for a in c["aliases"].split(",") if a.strip()]
            if cmd_name == c["name"] or cmd_name in aliases:
                cmd = c
                break

        if not cmd:
            console.print(f"[error]Unknown command: {cmd_name}[/error]")
            console.print("[muted]Use help to see available commands[/muted]")
            return False

        console.print()

        text = Text()
        text.append(f"{cmd['description']}\n\n", style="text")
        text.append("Usage:\n", style="muted")
        for line in cmd["usage"].splitlines():
            text.append(f"  clickup {line}\n", style="command")
        if cmd["aliases"]:
            text.append("\nAliases:\n", style="muted")
            text.append(f"  {cmd['aliases']}", style="tertiary")

        console.print(Panel(
            text,
            title=f"[primary]{cmd['name']}[/primary]",
            border_style="primary",
            padding=(1, 2),
        ))

        return True
