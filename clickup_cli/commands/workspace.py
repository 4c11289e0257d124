"""Workspace commands - list workspaces and their spaces."""

from __future__ import annotations

from typing import Any

from clickup_cli.commands.base import GroupCommand, require_numeric
from clickup_cli.ui.console import console, print_json, print_success, print_warning
from clickup_cli.ui.panels import create_spaces_table, create_workspaces_table
from clickup_cli.ui.spinners import create_spinner


class WorkspaceCommand(GroupCommand):
    """Workspace (team) operations."""

    name = "workspace"
    description = "List workspaces and the spaces inside them"
    usage = "workspace <list|spaces [team_id]|use <team_id>> [--json]"
    aliases = ["workspaces", "team", "ws"]

    subcommands = {
        "list": "list_workspaces",
        "ls": "list_workspaces",
        "spaces": "spaces",
        "use": "use",
    }

    def list_workspaces(self, args: list[str], flags: dict[str, Any]) -> bool:
        with create_spinner("Fetching workspaces...", style="loading"):
            with self.make_client() as client:
                workspaces = client.get_workspaces()

        if flags.get("json") or flags.get("j"):
            print_json(workspaces)
        elif not workspaces:
            print_warning("No workspaces found")
        else:
            console.print()
            console.print(create_workspaces_table(workspaces))
        return True

    def spaces(self, args: list[str], flags: dict[str, Any]) -> bool:
        """List spaces; the team id defaults to the stored workspace."""
        team_id = args[0] if args else self.store.get("defaultTeamId")
        if not team_id:
            raise ValueError('A workspace ID is required (or set one with "clickup workspace use <id>")')
        team_id = require_numeric(team_id, "workspace ID")

        with create_spinner(f"Fetching spaces for workspace {team_id}...", style="loading"):
            with self.make_client() as client:
                spaces = client.get_spaces(team_id)

        if flags.get("json") or flags.get("j"):
            print_json(spaces)
        elif not spaces:
            print_warning("No spaces found")
        else:
            console.print()
            console.print(create_spaces_table(spaces))
        return True

    def use(self, args: list[str], flags: dict[str, Any]) -> bool:
        if not args:
            raise ValueError("A workspace ID is required")
        team_id = require_numeric(args[0], "workspace ID")
        self.store.set("defaultTeamId", team_id)
        print_success(f"Default workspace set to {team_id}")
        return True
