"""Space commands - list the lists in a space."""

from __future__ import annotations

from typing import Any

from clickup_cli.commands.base import GroupCommand, require_numeric
from clickup_cli.ui.console import console, print_json, print_success, print_warning
from clickup_cli.ui.panels import create_lists_table
from clickup_cli.ui.spinners import create_spinner


class SpaceCommand(GroupCommand):
    """Space operations."""

    name = "space"
    description = "List the folderless lists in a space"
    usage = "space <lists [space_id]|use <space_id>> [-a|--archived] [--json]"
    aliases = ["spaces"]

    subcommands = {
        "lists": "lists",
        "use": "use",
    }

    def lists(self, args: list[str], flags: dict[str, Any]) -> bool:
        space_id = args[0] if args else self.store.get("defaultSpaceId")
        if not space_id:
            raise ValueError('A space ID is required (or set one with "clickup space use <id>")')
        space_id = require_numeric(space_id, "space ID")

        with create_spinner(f"Fetching lists for space {space_id}...", style="loading"):
            with self.make_client() as client:
                lists = client.get_lists(
                    space_id,
                    archived=bool(flags.get("archived") or flags.get("a")),
                )

        if flags.get("json") or flags.get("j"):
            print_json(lists)
        elif not lists:
            print_warning("No lists found")
        else:
            console.print()
            console.print(create_lists_table(lists))
        return True

    def use(self, args: list[str], flags: dict[str, Any]) -> bool:
        if not args:
            raise ValueError("A space ID is required")
        space_id = require_numeric(args[0], "space ID")
        self.store.set("defaultSpaceId", space_id)
        print_success(f"Default space set to {space_id}")
        return True
